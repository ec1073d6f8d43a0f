"""
Inflation adjustment
====================

    adjusted = amount * (base_cpi / cpi_at(month))

The base CPI is looked up once, at startup, from the configured base month.
No rounding happens here; rounding is a presentation concern
(see `formatting.py`).
"""

from __future__ import annotations
import logging
import math

from .cpi_table import CpiTable
from .errors import ConfigurationError, DataUnavailable

logger = logging.getLogger(__name__)


def resolve_base_cpi(table: CpiTable, base_month: str) -> float:
    """Look up the CPI of the base month.

    Raises ConfigurationError when the base month is not in the table: every
    adjustment against a missing base would be meaningless.
    """
    value = table.get(base_month)
    if value is None or not math.isfinite(value) or value <= 0:
        raise ConfigurationError(
            f"Base CPI unavailable: month {base_month} not in CPI table "
            f"({table.min_month}..{table.max_month})"
        )
    return value


def adjust(month: str, amount: float, table: CpiTable, base_cpi: float) -> float:
    """Express `amount` (in `month` dollars) in base-month dollars.

    Raises DataUnavailable if `month` has no published CPI value.
    """
    return amount * (base_cpi / table.cpi_at(month))


def adjust_or_unchanged(month: str, amount: float, table: CpiTable, base_cpi: float) -> float:
    """Like `adjust`, but fall back to the unadjusted amount on missing data."""
    try:
        return adjust(month, amount, table, base_cpi)
    except DataUnavailable:
        logger.warning("CPI data missing for %s. Cannot adjust.", month)
        return amount
