"""
Domain errors.
The only failure that reaches the core is a provider failure; ordering and
statistics are total over their input.
"""

from typing import Optional


class ProviderError(Exception):
    """Raised by an IQuoteProvider when quotes cannot be fetched or parsed."""

    def __init__(self, description: str, ticker: Optional[str] = None) -> None:
        super().__init__(description)
        self.description = description
        self.ticker = ticker
