"""
Sales ledger
============

The ledger is the heart of the project. It works like a tiny in-memory
table of sales:

1) Look up the CPI for the sale month
2) Adjust the sale amount to base-month dollars
3) Compare the asking price with the adjusted amount
4) Keep the entries newest-month-first (stable for equal months)
5) Summarise the current entries on demand

All state (entries and the id counter) belongs to a `Ledger` instance. Each
public operation holds the instance lock for its whole duration, so an
operation either completes fully or leaves the ledger untouched.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import List, Optional, Tuple
import csv
import json
import logging
import math
import threading

from .adjust import adjust, resolve_base_cpi
from .cpi_table import CpiTable
from .errors import InvalidAmount, InvalidMonth
from .inputs import parse_amount, parse_asking_price
from .models import Entry, Summary
from .months import is_month_key
from .settings import LedgerConfig
from .sorting import merge_sort

logger = logging.getLogger(__name__)


@dataclass
class Ledger:
    """In-memory collection of sale entries.

    The base CPI is resolved when the ledger is built; a missing base month
    raises ConfigurationError, so no ledger ever exists without one.
    """
    table: CpiTable
    config: LedgerConfig = field(default_factory=LedgerConfig)
    base_cpi: float = field(init=False)

    _entries: List[Entry] = field(default_factory=list, init=False, repr=False)
    # last id handed out; ids are pre-incremented so the first is 1
    _last_id: int = field(default=0, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        self.base_cpi = resolve_base_cpi(self.table, self.config.base_month)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def entries(self) -> Tuple[Entry, ...]:
        """Current entries, newest month first."""
        with self._lock:
            return tuple(self._entries)

    def get_entry(self, entry_id: int) -> Optional[Entry]:
        with self._lock:
            for e in self._entries:
                if e.id == entry_id:
                    return e
        return None

    # ---------------- Mutations ----------------
    def add_entry(self, month: str, original_amount, asking_price=0.0) -> Entry:
        """Record a sale and return the new entry.

        Raises InvalidMonth / InvalidAmount without touching the ledger.
        """
        month = self._check_month(month)
        amount = parse_amount(original_amount)
        asking = parse_asking_price(asking_price)

        with self._lock:
            adjusted = adjust(month, amount, self.table, self.base_cpi)
            if not math.isfinite(adjusted) or adjusted <= 0:
                raise InvalidAmount(
                    f"Adjusted amount for {amount!r} in {month} is out of range ({adjusted!r})"
                )
            self._last_id += 1
            entry = Entry(
                id=self._last_id,
                month=month,
                original_amount=amount,
                adjusted_amount=adjusted,
                asking_price=asking,
                over_under_ratio=1 - asking / adjusted,
            )
            self._entries.append(entry)
            self._entries = merge_sort(self._entries, key=lambda e: e.month, reverse=True)

        logger.info("Added entry %d: %s amount=%.2f adjusted=%.2f asking=%.2f",
                    entry.id, entry.month, entry.original_amount,
                    entry.adjusted_amount, entry.asking_price)
        return entry

    def delete_entry(self, entry_id: int) -> bool:
        """Remove the entry with `entry_id`. Unknown ids are a no-op (False)."""
        with self._lock:
            kept = [e for e in self._entries if e.id != entry_id]
            removed = len(kept) != len(self._entries)
            self._entries = kept
        if removed:
            logger.info("Deleted entry %d", entry_id)
        else:
            logger.debug("Delete ignored: no entry with id %s", entry_id)
        return removed

    def clear_all(self) -> None:
        """Remove every entry and restart ids at 1."""
        with self._lock:
            count = len(self._entries)
            self._entries = []
            self._last_id = 0
        logger.info("Cleared %d entries", count)

    # ---------------- Read operations ----------------
    def summarize(self) -> Summary:
        """Entry count, totals and the average adjusted amount (0 when empty)."""
        with self._lock:
            count = 0
            total_original = 0.0
            total_adjusted = 0.0
            for e in self._entries:
                count += 1
                total_original += e.original_amount
                total_adjusted += e.adjusted_amount
        return Summary(
            entry_count=count,
            total_original=total_original,
            total_adjusted=total_adjusted,
            average_adjusted=total_adjusted / count if count else 0.0,
        )

    def export_csv(self, path: str) -> None:
        """Write the current entries to a CSV file."""
        rows = self.entries
        names = [f.name for f in fields(Entry)]
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(names)
            for e in rows:
                w.writerow([getattr(e, n) for n in names])

    def export_json(self, path: str) -> None:
        """Write the current entries to a JSON file (list of objects)."""
        payload = [e.to_dict() for e in self.entries]
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)

    # ---------------- Validation ----------------
    def _check_month(self, month: str) -> str:
        if not isinstance(month, str) or not is_month_key(month):
            raise InvalidMonth(f"Month must look like YYYY-MM, got {month!r}")
        if not self.config.in_range(month) or month not in self.table:
            logger.debug("Rejected month %s", month)
            raise InvalidMonth(
                f"CPI data is not available for {month}. Choose a month within "
                f"{self.config.min_month} to {self.config.max_month} where data is provided."
            )
        return month

