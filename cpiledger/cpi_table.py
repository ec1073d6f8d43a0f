"""
CPI lookup table
================

`CpiTable` is a read-only mapping from a `YYYY-MM` key to the published
index value for that month. The table may be sparse: months that were not
published (or not shipped) are simply absent, and there is no interpolation.

Two lookup styles:
- `table.get(month)` returns Optional[float] (absent -> None)
- `table.cpi_at(month)` raises DataUnavailable when absent
"""

from __future__ import annotations
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional
import math

from .errors import ConfigurationError, DataUnavailable
from .months import is_month_key


class CpiTable(Mapping):
    """Immutable month -> CPI mapping, keys kept in chronological order."""

    def __init__(self, values: Mapping, source: Optional[str] = None):
        data: Dict[str, float] = {}
        for key, value in values.items():
            key = str(key).strip()
            if not is_month_key(key):
                raise ConfigurationError(f"Bad CPI month key: {key!r}")
            fv = float(value)
            if not math.isfinite(fv) or fv <= 0:
                raise ConfigurationError(f"CPI value for {key} must be a positive number, got {value!r}")
            data[key] = fv
        if not data:
            raise ConfigurationError("CPI table is empty")
        self._data = MappingProxyType(dict(sorted(data.items())))
        self._keys = tuple(self._data)
        # where the values came from (file path or None for literals)
        self.source = source

    def __getitem__(self, month: str) -> float:
        return self._data[month]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"CpiTable({len(self)} months, {self.min_month}..{self.max_month})"

    def cpi_at(self, month: str) -> float:
        """Index value for `month`; raises DataUnavailable if not published."""
        value = self._data.get(month)
        if value is None:
            raise DataUnavailable(month)
        return value

    @property
    def min_month(self) -> str:
        return self._keys[0]

    @property
    def max_month(self) -> str:
        return self._keys[-1]
