"""
Use-case: summarize the quote history of one or more ticker symbols.
Depends only on Domain ports, entities and services; no infrastructure imports.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Iterator, Optional

from quote_tracker.domain.entities.quote_summary import QuoteSummary
from quote_tracker.domain.errors import ProviderError
from quote_tracker.domain.ports.quote_provider_port import IQuoteProvider
from quote_tracker.domain.services.price_series import order_closes
from quote_tracker.domain.services.statistics import DEFAULT_SMA_WINDOW, build_quote_summary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickerOutcome:
    """Result of summarizing one ticker: exactly one of summary/error is set."""

    ticker: str
    summary: Optional[QuoteSummary] = None
    error: Optional[ProviderError] = None


class SummarizeQuoteHistoryUseCase:
    def __init__(self, provider: IQuoteProvider, sma_window: int = DEFAULT_SMA_WINDOW) -> None:
        """
        Args:
            provider:   IQuoteProvider implementation (e.g. YFinanceQuoteProvider).
            sma_window: Width of the simple moving average window.
        """
        self._provider = provider
        self._sma_window = sma_window

    def execute(self, start: datetime, end: datetime, ticker: str) -> QuoteSummary:
        """Fetch, order and summarize the quotes of *ticker* in [*start*, *end*].

        Raises:
            ValueError: if *ticker* is blank.
            ProviderError: propagated unchanged from the IQuoteProvider.
        """
        if not ticker or not ticker.strip():
            raise ValueError("ticker must be a non-empty string")
        ticker = ticker.strip()

        logger.debug("Fetching quotes for %s from %s to %s", ticker, start, end)
        points = self._provider.get_quote_history(start, end, ticker)
        closes = order_closes(points)
        logger.debug("Summarizing %d closes for %s", len(closes), ticker)
        return build_quote_summary(ticker, closes, self._sma_window)

    def execute_many(
        self,
        start: datetime,
        end: datetime,
        tickers: Iterable[str],
        workers: int = 1,
    ) -> Iterator[TickerOutcome]:
        """Summarize every ticker, yielding outcomes in the order of *tickers*.

        A ProviderError for one ticker is recorded in its outcome and does not
        stop the others. With *workers* > 1 the fetches run in a thread pool.
        """
        tickers = [t.strip() for t in tickers if t and t.strip()]

        def run(ticker: str) -> TickerOutcome:
            try:
                return TickerOutcome(ticker=ticker, summary=self.execute(start, end, ticker))
            except ProviderError as exc:
                logger.info("Provider failed for %s: %s", ticker, exc.description)
                return TickerOutcome(ticker=ticker, error=exc)

        if workers <= 1:
            for ticker in tickers:
                yield run(ticker)
            return

        with ThreadPoolExecutor(max_workers=workers) as pool:
            yield from pool.map(run, tickers)
