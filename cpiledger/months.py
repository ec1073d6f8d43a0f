"""
Month keys and pickers
======================

Months are identified by zero-padded `YYYY-MM` strings. Because they are
zero-padded, plain string comparison orders them chronologically, which is
what the ledger relies on for sorting and for the min/max bounds.

The picker helpers reproduce the year/month drop-downs of the entry form:
every year between the bounds, and for a given year only the months that
fall inside the bounds. Passing the CPI table as `available` narrows both
to months that actually have a CPI value, so a sparse table never offers a
month the ledger would reject.
"""

from __future__ import annotations
from typing import Collection, List, Optional, Tuple
import re

from .errors import InvalidMonth

MONTH_NAMES = [
    ("01", "January"),
    ("02", "February"),
    ("03", "March"),
    ("04", "April"),
    ("05", "May"),
    ("06", "June"),
    ("07", "July"),
    ("08", "August"),
    ("09", "September"),
    ("10", "October"),
    ("11", "November"),
    ("12", "December"),
]

_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


def month_key(year: int, month: int) -> str:
    """Build a `YYYY-MM` key, e.g. month_key(2025, 9) -> '2025-09'."""
    if not 1 <= month <= 12:
        raise InvalidMonth(f"Month must be 1-12, got {month}")
    return f"{year:04d}-{month:02d}"


def is_month_key(key: str) -> bool:
    m = _KEY_RE.match(str(key))
    return bool(m) and 1 <= int(m.group(2)) <= 12


def split_month_key(key: str) -> Tuple[int, int]:
    """Return (year, month) for a `YYYY-MM` key."""
    m = _KEY_RE.match(str(key))
    if not m or not 1 <= int(m.group(2)) <= 12:
        raise InvalidMonth(f"Month must look like YYYY-MM, got {key!r}")
    return int(m.group(1)), int(m.group(2))


def years_in_range(min_month: str, max_month: str,
                   available: Optional[Collection[str]] = None) -> List[int]:
    """All years covered by [min_month, max_month], oldest first.

    With `available`, only years holding at least one available month.
    """
    y1, _ = split_month_key(min_month)
    y2, _ = split_month_key(max_month)
    if available is None:
        return list(range(y1, y2 + 1))
    return sorted({split_month_key(k)[0] for k in available
                   if is_month_key(k) and min_month <= k <= max_month})


def months_for_year(year: int, min_month: str, max_month: str,
                    available: Optional[Collection[str]] = None) -> List[Tuple[str, str]]:
    """Months of `year` that fall inside the bounds, as (value, name) pairs.

    The first year starts at the min month and the last year stops at the
    max month; years outside the range yield an empty list. With
    `available`, months missing from it are left out.
    """
    min_year, min_mon = split_month_key(min_month)
    max_year, max_mon = split_month_key(max_month)
    if year < min_year or year > max_year:
        return []

    start = min_mon if year == min_year else 1
    end = max_mon if year == max_year else 12
    return [(value, name) for value, name in MONTH_NAMES
            if start <= int(value) <= end
            and (available is None or f"{year:04d}-{value}" in available)]


def default_month(max_month: str, available: Optional[Collection[str]] = None) -> str:
    """The month preselected for new entries: the latest accepted one."""
    year, month = split_month_key(max_month)
    if available is None:
        return month_key(year, month)
    keys = [k for k in available if is_month_key(k) and k <= max_month]
    if not keys:
        raise InvalidMonth(f"No available month at or before {max_month}")
    return max(keys)
