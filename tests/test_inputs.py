"""Tests for parsing typed input into amounts and month keys."""

import pytest

from cpiledger.errors import InvalidAmount, InvalidMonth
from cpiledger.inputs import parse_amount, parse_asking_price, parse_month, to_finite_float


class TestParseAmount:
    @pytest.mark.parametrize("text,expected", [
        ("100", 100.0),
        (" 99.5 ", 99.5),
        ("1,200", 1200.0),
        ("$1,200.50", 1200.5),
    ])
    def test_valid(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "0", "-5", "nan", "inf", "$"])
    def test_invalid(self, text):
        with pytest.raises(InvalidAmount):
            parse_amount(text)


class TestParseAskingPrice:
    def test_blank_is_zero(self):
        assert parse_asking_price("") == 0.0
        assert parse_asking_price("  ") == 0.0
        assert parse_asking_price(None) == 0.0

    def test_negative_allowed(self):
        assert parse_asking_price("-10") == -10.0

    @pytest.mark.parametrize("text", ["abc", "nan", "-inf"])
    def test_invalid(self, text):
        with pytest.raises(InvalidAmount):
            parse_asking_price(text)


class TestToFiniteFloat:
    @pytest.mark.parametrize("value,expected", [(100, 100.0), (2.5, 2.5), ("$1,000", 1000.0), (-3, -3.0)])
    def test_numbers_and_text(self, value, expected):
        assert to_finite_float(value, "Amount") == expected

    @pytest.mark.parametrize("value", [True, False, None, [1], "abc", float("nan"), float("inf")])
    def test_rejected(self, value):
        with pytest.raises(InvalidAmount, match="Amount"):
            to_finite_float(value, "Amount")

    def test_amount_and_asking_share_the_rules(self):
        assert parse_amount(100) == 100.0
        assert parse_asking_price(-10) == -10.0
        for bad in (True, float("inf")):
            with pytest.raises(InvalidAmount):
                parse_amount(bad)
            with pytest.raises(InvalidAmount):
                parse_asking_price(bad)


class TestParseMonth:
    @pytest.mark.parametrize("text,expected", [
        ("2020-01", "2020-01"),
        ("2020-1", "2020-01"),
        ("2020/12", "2020-12"),
        (" 1913 01 ", "1913-01"),
    ])
    def test_valid(self, text, expected):
        assert parse_month(text) == expected

    @pytest.mark.parametrize("text", ["", "2020", "2020-13", "2020-00", "Jan 2020", "20-01"])
    def test_invalid(self, text):
        with pytest.raises(InvalidMonth):
            parse_month(text)
