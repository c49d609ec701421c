"""
Port (interface) for quote history providers.
Infrastructure adapters (e.g. YFinanceQuoteProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from quote_tracker.domain.entities.price_point import PricePoint


class IQuoteProvider(ABC):
    @abstractmethod
    def get_quote_history(
        self,
        start: datetime,
        end: datetime,
        ticker: str,
    ) -> list[PricePoint]:
        """Fetch the quotes of *ticker* between *start* and *end*, in any order.

        Raises:
            ProviderError: on network, parsing or unknown-symbol failures.
        """
        ...
