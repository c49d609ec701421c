"""
Ordering stage: turns an unordered collection of quotes into the time-ascending
series of adjusted closes consumed by the statistics functions.
"""

from typing import Iterable

from quote_tracker.domain.entities.price_point import PricePoint


def order_closes(points: Iterable[PricePoint]) -> list[float]:
    # sorted() is stable, so quotes sharing a timestamp keep their input order
    return [float(p.close) for p in sorted(points, key=lambda p: p.timestamp)]
