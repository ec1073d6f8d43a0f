"""
CPI loader (CSV / Excel -> CpiTable)
====================================

Reads a CPI export and converts it into an immutable `CpiTable`.

Two layouts are understood:
- flat: one row per month, a month column (`month`, `date`, `%Y-%m`, ...)
  and a value column (`cpi`, `value`, `index`, ...)
- box: one row per year with `Year` plus Jan..Dec columns, the way BLS and
  most inflation-calculator sites publish the CPI-U table

Key ideas:
- Column names are matched loosely (case/punctuation-insensitive).
- Blank cells are skipped, so a partially published year stays sparse.
- The bundled snapshot lives in `cpiledger/data/cpi_u.csv`.
"""

from __future__ import annotations
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Optional, Union
import logging
import re

import pandas as pd

from .cpi_table import CpiTable
from .months import MONTH_NAMES, month_key

logger = logging.getLogger(__name__)

BUNDLED_CPI_PATH = Path(__file__).resolve().parent / "data" / "cpi_u.csv"

_MONTH_COLUMNS = ("month", "date", "%Y-%m", "period", "observation_date")
_VALUE_COLUMNS = ("cpi", "value", "index", "cpi_value", "CPIAUCNS")
_KEY_RE = re.compile(r"^\s*(\d{4})[-/ .](\d{1,2})")


def _to_float(x) -> Optional[float]:
    """Convert a cell to float, returning None if missing/invalid."""
    if pd.isna(x): return None
    try: return float(str(x).replace(",", "").strip())
    except ValueError: return None


def _to_month_key(x) -> Optional[str]:
    """Convert a cell (string or date) to a `YYYY-MM` key."""
    if pd.isna(x): return None
    if isinstance(x, (datetime, date)):
        return month_key(x.year, x.month)
    m = _KEY_RE.match(str(x))
    if not m or not 1 <= int(m.group(2)) <= 12:
        return None
    return month_key(int(m.group(1)), int(m.group(2)))


def _norm(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "", str(s).lower())


def _find_col(df: pd.DataFrame, *names: str) -> Optional[str]:
    cols = list(df.columns)
    for n in names:
        if n in cols:
            return n
    norm_map = {_norm(c): c for c in cols}
    for n in names:
        nn = _norm(n)
        if nn in norm_map:
            return norm_map[nn]
    return None


def _box_month_columns(df: pd.DataFrame) -> Dict[int, str]:
    """Map month number -> column for Jan..Dec style headers."""
    out: Dict[int, str] = {}
    for c in df.columns:
        nc = _norm(c)
        for value, name in MONTH_NAMES:
            if nc in (name.lower(), name.lower()[:3]):
                out[int(value)] = c
    return out


def _read_frame(path: Path) -> pd.DataFrame:
    if path.suffix.lower() in (".xlsx", ".xlsm", ".xls"):
        df = pd.read_excel(path, engine="openpyxl")
    else:
        df = pd.read_csv(path, encoding="utf-8-sig")
    df.rename(columns={c: str(c).strip() for c in df.columns}, inplace=True)
    return df


def cpi_values_from_frame(df: pd.DataFrame) -> Dict[str, float]:
    """Extract {month: cpi} from a DataFrame in flat or box layout."""
    values: Dict[str, float] = {}

    month_col = _find_col(df, *_MONTH_COLUMNS)
    value_col = _find_col(df, *_VALUE_COLUMNS)
    if month_col and value_col:
        for _, row in df.iterrows():
            key = _to_month_key(row[month_col])
            cpi = _to_float(row[value_col])
            if key is None or cpi is None:
                continue
            values[key] = cpi
        return values

    year_col = _find_col(df, "year")
    box_cols = _box_month_columns(df)
    if year_col and box_cols:
        for _, row in df.iterrows():
            year = _to_float(row[year_col])
            if year is None:
                continue
            for month, col in box_cols.items():
                cpi = _to_float(row[col])
                if cpi is None:
                    continue
                values[month_key(int(year), month)] = cpi
        return values

    raise KeyError(f"Unrecognised CPI layout. Available columns={list(df.columns)}")


def load_cpi_table(path: Union[str, Path, None] = None) -> CpiTable:
    """Load a CPI export (CSV or XLSX). With no path, load the bundled snapshot."""
    path = Path(path) if path else BUNDLED_CPI_PATH
    df = _read_frame(path)
    values = cpi_values_from_frame(df)
    table = CpiTable(values, source=str(path))
    logger.debug("Loaded %d CPI months from %s (%s..%s)",
                 len(table), path, table.min_month, table.max_month)
    return table
