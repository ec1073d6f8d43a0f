"""Display helpers for amounts, ratios and month keys."""

from __future__ import annotations

from .months import MONTH_NAMES, split_month_key


def format_currency(value: float) -> str:
    """Whole US dollars: 1235.6 -> '$1,236', -5 -> '-$5'."""
    text = f"{abs(value):,.0f}"
    if text == "0":
        return "$0"
    return f"-${text}" if value < 0 else f"${text}"


def format_percent(ratio: float) -> str:
    """Percent with one or two decimals: -0.05137 -> '-5.14%', 0.125 -> '12.5%'."""
    text = f"{ratio * 100:.2f}"
    if text.endswith("0"):
        text = text[:-1]
    if text in ("-0.0", "-0.00"):
        text = "0.0"
    return f"{text}%"


def display_month_year(key: str) -> str:
    """'2020-01' -> 'Jan 2020'. Blank input gives ''."""
    if not key:
        return ""
    year, month = split_month_key(key)
    return f"{MONTH_NAMES[month - 1][1][:3]} {year}"
