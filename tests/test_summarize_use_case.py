"""Tests for SummarizeQuoteHistoryUseCase."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from quote_tracker.application.use_cases.summarize_quotes import SummarizeQuoteHistoryUseCase
from quote_tracker.domain.entities.price_point import PricePoint
from quote_tracker.domain.entities.quote_summary import PriceDiff
from quote_tracker.domain.errors import ProviderError
from quote_tracker.domain.ports.quote_provider_port import IQuoteProvider

START = datetime(2020, 7, 2, tzinfo=timezone.utc)
END = START + timedelta(days=30)


def make_points(closes):
    # reversed so the use case has to order them
    return [PricePoint(START + timedelta(days=i), c) for i, c in enumerate(closes)][::-1]


@pytest.fixture
def provider():
    return MagicMock(spec=IQuoteProvider)


class TestExecute:
    def test_summarizes_ordered_closes(self, provider):
        provider.get_quote_history.return_value = make_points([0.0, 5.0])
        summary = SummarizeQuoteHistoryUseCase(provider, sma_window=2).execute(START, END, "abc")

        assert summary.ticker == "abc"
        assert summary.last_price == 5.0
        assert summary.price_diff == PriceDiff(absolute=5.0, relative=5.0)
        assert summary.sma == (2.5,)
        provider.get_quote_history.assert_called_once_with(START, END, "abc")

    def test_strips_ticker(self, provider):
        provider.get_quote_history.return_value = []
        summary = SummarizeQuoteHistoryUseCase(provider).execute(START, END, "  MSFT ")
        assert summary.ticker == "MSFT"
        provider.get_quote_history.assert_called_once_with(START, END, "MSFT")

    def test_empty_history_is_tolerated(self, provider):
        provider.get_quote_history.return_value = []
        summary = SummarizeQuoteHistoryUseCase(provider).execute(START, END, "AAPL")
        assert summary.max is None
        assert summary.sma is None

    def test_provider_error_propagates_unchanged(self, provider):
        error = ProviderError("boom", ticker="AAPL")
        provider.get_quote_history.side_effect = error
        with pytest.raises(ProviderError) as excinfo:
            SummarizeQuoteHistoryUseCase(provider).execute(START, END, "AAPL")
        assert excinfo.value is error

    @pytest.mark.parametrize("ticker", ["", "   "])
    def test_blank_ticker_rejected(self, provider, ticker):
        with pytest.raises(ValueError):
            SummarizeQuoteHistoryUseCase(provider).execute(START, END, ticker)
        provider.get_quote_history.assert_not_called()


class TestExecuteMany:
    def fake_history(self, start, end, ticker):
        if ticker == "BAD":
            raise ProviderError("unknown symbol", ticker=ticker)
        return make_points([1.0, 2.0, 3.0])

    @pytest.mark.parametrize("workers", [1, 4])
    def test_failures_do_not_stop_other_tickers(self, provider, workers):
        provider.get_quote_history.side_effect = self.fake_history
        use_case = SummarizeQuoteHistoryUseCase(provider, sma_window=2)

        outcomes = list(use_case.execute_many(START, END, ["AAPL", "BAD", "MSFT"], workers=workers))

        assert [o.ticker for o in outcomes] == ["AAPL", "BAD", "MSFT"]
        assert outcomes[0].summary.sma == (1.5, 2.5)
        assert outcomes[1].summary is None
        assert outcomes[1].error.description == "unknown symbol"
        assert outcomes[2].error is None

    def test_blank_tickers_skipped(self, provider):
        provider.get_quote_history.return_value = []
        outcomes = list(
            SummarizeQuoteHistoryUseCase(provider).execute_many(START, END, ["", " ", "GOOG"])
        )
        assert [o.ticker for o in outcomes] == ["GOOG"]
