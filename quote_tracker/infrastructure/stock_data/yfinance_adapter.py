"""
Infrastructure adapter: yfinance → IQuoteProvider.
All yfinance-specific details (Ticker.history(), DataFrame columns) are confined
here; the rest of the codebase depends only on IQuoteProvider.
"""

import logging
from datetime import datetime

import yfinance as yf

from quote_tracker.domain.entities.price_point import PricePoint
from quote_tracker.domain.errors import ProviderError
from quote_tracker.domain.ports.quote_provider_port import IQuoteProvider

logger = logging.getLogger(__name__)


class YFinanceQuoteProvider(IQuoteProvider):
    """Fetches quote history from Yahoo Finance via the yfinance library."""

    ADJ_CLOSE_COLUMN = "Adj Close"
    CLOSE_COLUMN = "Close"

    def __init__(self, interval: str = "1d") -> None:
        self._interval = interval

    def get_quote_history(
        self,
        start: datetime,
        end: datetime,
        ticker: str,
    ) -> list[PricePoint]:
        symbol = ticker.upper().strip()
        logger.debug("yfinance history(%s, start=%s, end=%s, interval=%s)",
                     symbol, start, end, self._interval)
        try:
            history = yf.Ticker(symbol).history(
                start=start,
                end=end,
                interval=self._interval,
                auto_adjust=False,
            )
        except Exception as exc:
            raise ProviderError(f"request for {symbol!r} failed: {exc}", ticker=symbol) from exc

        if history is None or history.empty:
            raise ProviderError(f"no historical data available for {symbol!r}", ticker=symbol)

        column = (
            self.ADJ_CLOSE_COLUMN
            if self.ADJ_CLOSE_COLUMN in history.columns
            else self.CLOSE_COLUMN
        )
        if column not in history.columns:
            raise ProviderError(f"response for {symbol!r} has no close prices", ticker=symbol)

        # yfinance leaves NaN closes for non-trading rows (dividends, splits, halts)
        closes = history[column]
        missing = int(closes.isna().sum())
        if missing:
            logger.debug("Dropping %d NaN closes for %s", missing, symbol)
            closes = closes.dropna()
            if closes.empty:
                raise ProviderError(f"no closing prices available for {symbol!r}", ticker=symbol)

        try:
            return [
                PricePoint(timestamp=stamp.to_pydatetime(), close=float(value))
                for stamp, value in closes.items()
            ]
        except (TypeError, ValueError, AttributeError) as exc:
            raise ProviderError(f"could not parse quotes for {symbol!r}: {exc}", ticker=symbol) from exc
