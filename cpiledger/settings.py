"""
Configuration
=============

Values come from the environment (optionally a `.env` file in the working
directory) and fall back to the defaults below. CLI flags override them.

    CPILEDGER_BASE_MONTH   month all amounts are expressed in   (2025-09)
    CPILEDGER_MIN_MONTH    earliest month accepted for entries  (1913-01)
    CPILEDGER_MAX_MONTH    latest month accepted for entries    (2025-09)
    CPILEDGER_CPI_PATH     CPI export to load instead of the bundled one
    CPILEDGER_LOG_DIR      where the rotating log file goes      (logs)
    CPILEDGER_LOG_LEVEL    DEBUG / INFO / WARNING ...            (INFO)
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError
from .months import is_month_key

# --- Load Environment Variables ---
load_dotenv(Path.cwd() / ".env")

DEFAULT_BASE_MONTH = "2025-09"
DEFAULT_MIN_MONTH = "1913-01"
DEFAULT_MAX_MONTH = "2025-09"

BASE_MONTH = os.getenv("CPILEDGER_BASE_MONTH", DEFAULT_BASE_MONTH)
MIN_MONTH = os.getenv("CPILEDGER_MIN_MONTH", DEFAULT_MIN_MONTH)
MAX_MONTH = os.getenv("CPILEDGER_MAX_MONTH", DEFAULT_MAX_MONTH)

CPI_PATH: Optional[str] = os.getenv("CPILEDGER_CPI_PATH") or None

LOG_DIR = Path(os.getenv("CPILEDGER_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("CPILEDGER_LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class LedgerConfig:
    """Base month and the range of months the ledger accepts."""
    base_month: str = DEFAULT_BASE_MONTH
    min_month: str = DEFAULT_MIN_MONTH
    max_month: str = DEFAULT_MAX_MONTH

    def __post_init__(self) -> None:
        for name in ("base_month", "min_month", "max_month"):
            value = getattr(self, name)
            if not is_month_key(value):
                raise ConfigurationError(f"{name} must look like YYYY-MM, got {value!r}")
        if self.min_month > self.max_month:
            raise ConfigurationError(
                f"min_month {self.min_month} is after max_month {self.max_month}"
            )

    @classmethod
    def from_env(cls, base_month: Optional[str] = None, min_month: Optional[str] = None,
                 max_month: Optional[str] = None) -> "LedgerConfig":
        """Build from environment settings; explicit arguments win."""
        return cls(
            base_month=base_month or BASE_MONTH,
            min_month=min_month or MIN_MONTH,
            max_month=max_month or MAX_MONTH,
        )

    def in_range(self, month: str) -> bool:
        return self.min_month <= month <= self.max_month
