"""Tests for CpiTable: lookups, bounds and validation."""

import pytest

from cpiledger import CpiTable
from cpiledger.errors import ConfigurationError, DataUnavailable


class TestLookup:
    def test_get_present_and_absent(self, table):
        assert table.get("2020-01") == 258.8
        assert table.get("2020-02") is None

    def test_cpi_at_absent_raises(self, table):
        with pytest.raises(DataUnavailable):
            table.cpi_at("1900-01")

    def test_contains_and_len(self, table):
        assert "2021-06" in table
        assert "2021-07" not in table
        assert len(table) == 4

    def test_keys_sorted(self):
        t = CpiTable({"2025-09": 320.0, "1913-01": 9.8, "2020-01": 258.8})
        assert list(t) == ["1913-01", "2020-01", "2025-09"]

    def test_min_max(self, table):
        assert table.min_month == "1913-01"
        assert table.max_month == "2025-09"


class TestImmutable:
    def test_no_item_assignment(self, table):
        with pytest.raises(TypeError):
            table["2020-01"] = 1.0

    def test_source_dict_changes_do_not_leak(self):
        values = {"2020-01": 258.8}
        t = CpiTable(values)
        values["2020-01"] = 1.0
        values["2020-02"] = 2.0
        assert t["2020-01"] == 258.8
        assert "2020-02" not in t


class TestValidation:
    @pytest.mark.parametrize("key", ["2020-1", "2020-13", "20-01", "Jan 2020"])
    def test_bad_keys(self, key):
        with pytest.raises(ConfigurationError):
            CpiTable({key: 100.0})

    @pytest.mark.parametrize("value", [0, -1.5, float("nan"), float("inf")])
    def test_bad_values(self, value):
        with pytest.raises(ConfigurationError):
            CpiTable({"2020-01": value})

    def test_empty(self):
        with pytest.raises(ConfigurationError):
            CpiTable({})
