"""
Domain entities for the per-ticker quote summary.
Zero external dependencies: pure Python dataclasses only.

Every analytical field is independently optional. ``None`` means the statistic
is not meaningful for the input; for ``sma`` an empty list means the window is
wider than the available data, which is not the same thing.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PriceDiff:
    absolute: float
    relative: float


@dataclass(frozen=True)
class QuoteSummary:
    ticker: str
    max: Optional[float]
    min: Optional[float]
    last_price: Optional[float]
    price_diff: Optional[PriceDiff]
    sma: Optional[tuple[float, ...]]
