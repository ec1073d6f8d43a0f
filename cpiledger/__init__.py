"""
cpiledger package
=================

Inflation-adjusted sales ledger: record historical sale amounts by month,
express them in base-month dollars using CPI-U, and compare asking prices.

- The CLI entry point is in `cpiledger/cli.py`.
- The ledger (add / delete / clear / summarize) is in `cpiledger/ledger.py`.
- CPI loading is in `cpiledger/loader.py`.
"""

__version__ = '0.1.0'

from .adjust import adjust, adjust_or_unchanged, resolve_base_cpi
from .cpi_table import CpiTable
from .errors import ConfigurationError, DataUnavailable, InvalidAmount, InvalidMonth, LedgerError
from .ledger import Ledger
from .loader import load_cpi_table
from .models import Entry, Summary
from .settings import LedgerConfig
