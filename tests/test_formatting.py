"""Tests for display formatting."""

import pytest

from cpiledger.formatting import display_month_year, format_currency, format_percent


@pytest.mark.parametrize("value,expected", [
    (0, "$0"),
    (123.6476, "$124"),
    (1235.6, "$1,236"),
    (1234567.0, "$1,234,567"),
    (-5, "-$5"),
    (-0.2, "$0"),
])
def test_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.parametrize("ratio,expected", [
    (-0.05137, "-5.14%"),
    (0.125, "12.5%"),
    (0.1, "10.0%"),
    (1.0, "100.0%"),
    (0.0, "0.0%"),
    (-0.00001, "0.0%"),
])
def test_percent(ratio, expected):
    assert format_percent(ratio) == expected


def test_month_year():
    assert display_month_year("1913-01") == "Jan 1913"
    assert display_month_year("2025-09") == "Sep 2025"
    assert display_month_year("") == ""
