"""
Text input parsing
==================

The ledger works on numbers and month keys. Anything typed by a user, and
every number handed to `Ledger.add_entry`, goes through these helpers, so
parsing failures surface as InvalidAmount / InvalidMonth.

Accepted amounts: "1200", "1,200.50", "$1,200", " 99 ".
"""

from __future__ import annotations
import math
import re

from .errors import InvalidAmount, InvalidMonth
from .months import month_key

_MONTH_RE = re.compile(r"^\s*(\d{4})\s*[-/ ]\s*(\d{1,2})\s*$")


def _clean_number(text: str) -> str:
    return str(text).strip().replace("$", "").replace(",", "").strip()


def to_finite_float(value, what: str) -> float:
    """Coerce typed text or a number to a finite float, else InvalidAmount."""
    if isinstance(value, bool):
        raise InvalidAmount(f"{what} must be a number, got {value!r}")
    try:
        fv = float(_clean_number(value)) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        raise InvalidAmount(f"{what} must be a number, got {value!r}") from None
    if not math.isfinite(fv):
        raise InvalidAmount(f"{what} must be finite, got {value!r}")
    return fv


def parse_amount(value) -> float:
    """Parse an original sale amount; must be a number > 0."""
    amount = to_finite_float(value, "Amount")
    if amount <= 0:
        raise InvalidAmount(f"Amount must be positive, got {value!r}")
    return amount


def parse_asking_price(value) -> float:
    """Parse an asking price. Blank means 0."""
    if value is None or (isinstance(value, str) and not _clean_number(value)):
        return 0.0
    return to_finite_float(value, "Asking price")


def parse_month(text: str) -> str:
    """Normalise '2020-1', '2020/01' or '2020 01' to '2020-01'."""
    m = _MONTH_RE.match(str(text))
    if not m:
        raise InvalidMonth(f"Month must look like YYYY-MM, got {text!r}")
    return month_key(int(m.group(1)), int(m.group(2)))
