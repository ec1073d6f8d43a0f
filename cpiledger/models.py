"""
Data model (Entry, Summary)
===========================

Each recorded sale becomes an `Entry`. Entries are immutable (`frozen=True`):
the adjusted amount and the over/under ratio are computed once, when the
entry is added, and never recomputed afterwards.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class Entry:
    """One recorded sale."""
    id: int
    month: str  # YYYY-MM
    original_amount: float
    adjusted_amount: float
    asking_price: float
    # 1 - asking / adjusted
    over_under_ratio: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Summary:
    """Aggregate metrics over the current ledger."""
    entry_count: int = 0
    total_original: float = 0.0
    total_adjusted: float = 0.0
    average_adjusted: float = 0.0
