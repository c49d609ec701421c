"""
Statistics stage: pure functions over an ordered series of adjusted closes.

Each function is total over its input, including the empty series, and reports
"not meaningful" as ``None`` rather than a sentinel value.
"""

import math
from collections.abc import Sequence
from typing import Optional

from quote_tracker.domain.entities.quote_summary import PriceDiff, QuoteSummary

DEFAULT_SMA_WINDOW = 30


def max_price(closes: Sequence[float]) -> Optional[float]:
    """Largest close, or None for an empty series. NaN closes are ignored."""
    return max(_comparable(closes), default=None)


def min_price(closes: Sequence[float]) -> Optional[float]:
    """Smallest close, or None for an empty series. NaN closes are ignored."""
    return min(_comparable(closes), default=None)


def last_price(closes: Sequence[float]) -> Optional[float]:
    if not closes:
        return None
    return closes[-1]


def price_diff(closes: Sequence[float]) -> Optional[PriceDiff]:
    """Absolute and relative change between the first and the last close.

    The relative change is taken against the first close. A first close of
    exactly 0.0 is replaced by 1.0 as the denominator, so the relative change
    then equals the absolute one.

    Returns:
        A PriceDiff, or None for an empty series.
    """
    if not closes:
        return None
    first, last = closes[0], closes[-1]
    absolute = last - first
    denom = 1.0 if first == 0.0 else first
    return PriceDiff(absolute=absolute, relative=absolute / denom)


def n_window_sma(n: int, closes: Sequence[float]) -> Optional[list[float]]:
    """Simple moving average over every contiguous window of *n* closes.

    Args:
        n:      Window width.
        closes: Time-ascending adjusted closes.

    Returns:
        One mean per window position, in order. An empty list when the series
        is shorter than *n*. None when the series is empty or *n* <= 1.
    """
    if not closes or n <= 1:
        return None
    return [sum(closes[i : i + n]) / n for i in range(len(closes) - n + 1)]


def build_quote_summary(
    ticker: str,
    closes: Sequence[float],
    sma_window: int = DEFAULT_SMA_WINDOW,
) -> QuoteSummary:
    """Package the five statistics of *closes* together with *ticker*."""
    sma = n_window_sma(sma_window, closes)
    return QuoteSummary(
        ticker=ticker,
        max=max_price(closes),
        min=min_price(closes),
        last_price=last_price(closes),
        price_diff=price_diff(closes),
        sma=tuple(sma) if sma is not None else None,
    )


def _comparable(closes: Sequence[float]):
    # NaN compares false against everything, so max()/min() would depend on its position
    return (c for c in closes if not math.isnan(c))
