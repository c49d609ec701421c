"""
FastAPI entry point: quote summaries over HTTP.

This module is the Composition Root for server runs: it wires the
YFinanceQuoteProvider and Settings into the summarize use case.  create_app()
accepts any IQuoteProvider so the app can be built around a test double.
Settings are only read when the app is built, never at import time.

Run locally:
    uvicorn quote_tracker.infrastructure.entrypoints.fastapi_app:create_app --factory --reload --port 8000
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from quote_tracker.application.use_cases.summarize_quotes import SummarizeQuoteHistoryUseCase
from quote_tracker.domain.entities.quote_summary import QuoteSummary
from quote_tracker.domain.errors import ProviderError
from quote_tracker.domain.ports.quote_provider_port import IQuoteProvider
from quote_tracker.infrastructure.config.settings import Settings
from quote_tracker.infrastructure.stock_data.yfinance_adapter import YFinanceQuoteProvider

logger = logging.getLogger(__name__)


class PriceDiffResponse(BaseModel):
    absolute: float
    relative: float


class QuoteSummaryResponse(BaseModel):
    ticker: str
    start: datetime
    end: datetime
    max: Optional[float] = None
    min: Optional[float] = None
    last_price: Optional[float] = None
    price_diff: Optional[PriceDiffResponse] = None
    sma: Optional[list[float]] = None

    @classmethod
    def from_summary(
        cls, summary: QuoteSummary, start: datetime, end: datetime
    ) -> "QuoteSummaryResponse":
        diff = summary.price_diff
        return cls(
            ticker=summary.ticker,
            start=start,
            end=end,
            max=summary.max,
            min=summary.min,
            last_price=summary.last_price,
            price_diff=(
                PriceDiffResponse(absolute=diff.absolute, relative=diff.relative)
                if diff is not None
                else None
            ),
            sma=list(summary.sma) if summary.sma is not None else None,
        )


def create_app(
    provider: Optional[IQuoteProvider] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()
    if provider is None:
        provider = YFinanceQuoteProvider(interval=settings.interval)

    app = FastAPI(title="Quote Tracker API")

    @app.get("/summary/{symbol}", response_model=QuoteSummaryResponse)
    def get_summary(
        symbol: str,
        start: datetime,
        end: Optional[datetime] = None,
        window: Optional[int] = Query(default=None, ge=1),
    ):
        """Summarize the quotes of *symbol* between *start* and *end* (default: now)."""
        end = end or datetime.now(timezone.utc)
        use_case = SummarizeQuoteHistoryUseCase(provider, sma_window=window or settings.sma_window)
        try:
            summary = use_case.execute(start, end, symbol)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except ProviderError as exc:
            logger.warning("Provider failed for %s: %s", symbol, exc.description)
            raise HTTPException(status_code=502, detail=exc.description) from exc
        return QuoteSummaryResponse.from_summary(summary, start, end)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
