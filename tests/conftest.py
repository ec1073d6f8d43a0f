import pytest

from cpiledger import CpiTable, Ledger, LedgerConfig


@pytest.fixture
def table():
    """Small sparse CPI table (note: no 1900-01, no 2021-07)."""
    return CpiTable({
        "1913-01": 9.8,
        "2020-01": 258.8,
        "2021-06": 270.0,
        "2025-09": 320.0,
    })


@pytest.fixture
def config():
    return LedgerConfig(base_month="2025-09", min_month="1913-01", max_month="2025-09")


@pytest.fixture
def ledger(table, config):
    return Ledger(table=table, config=config)
