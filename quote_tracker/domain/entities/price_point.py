"""
Domain entity for a single timestamped quote.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PricePoint:
    timestamp: datetime
    close: float
