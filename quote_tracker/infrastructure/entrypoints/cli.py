"""
Command-line entry point: prints one summary line per ticker.

This module is the Composition Root for terminal runs: it reads Settings, wires
the YFinanceQuoteProvider into the use case and writes each outcome to stdout
(summaries) or stderr (provider failures).

Run:
    quote-tracker --from "2020-07-02 00:00:00" --symbols AAPL,MSFT
"""

import logging
from datetime import datetime, timezone

import click
from pydantic import ValidationError

from quote_tracker.application.use_cases.summarize_quotes import SummarizeQuoteHistoryUseCase
from quote_tracker.infrastructure.config.settings import Settings, split_symbols
from quote_tracker.infrastructure.presentation.quote_formatter import (
    format_error_line,
    format_summary_line,
)
from quote_tracker.infrastructure.stock_data.yfinance_adapter import YFinanceQuoteProvider

FROM_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_from(ctx, param, value: str) -> datetime:
    """Click callback: parse *value* as a UTC timestamp in FROM_FORMAT."""
    try:
        return datetime.strptime(value, FROM_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError as exc:
        raise click.BadParameter(f"expected format 'YYYY-MM-DD HH:MM:SS', got {value!r}") from exc


@click.command()
@click.option(
    "-f",
    "--from",
    "start",
    required=True,
    callback=parse_from,
    help="Start of the quote window, 'YYYY-MM-DD HH:MM:SS' (UTC).",
)
@click.option("-s", "--symbols", help="Comma-separated ticker symbols.")
@click.option("-w", "--window", type=click.IntRange(min=1), help="SMA window width.")
@click.option("--workers", type=click.IntRange(min=1), help="Tickers fetched concurrently.")
def main(start, symbols, window, workers):
    """Summarize the quote history of each ticker since --from."""
    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        raise click.UsageError(f"invalid configuration: {exc}")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    tickers = split_symbols(symbols) if symbols else settings.tickers
    use_case = SummarizeQuoteHistoryUseCase(
        YFinanceQuoteProvider(interval=settings.interval),
        sma_window=window or settings.sma_window,
    )
    end = datetime.now(timezone.utc)

    for outcome in use_case.execute_many(start, end, tickers, workers=workers or settings.workers):
        if outcome.error is not None:
            click.echo(format_error_line(outcome.ticker, outcome.error), err=True)
        else:
            click.echo(format_summary_line(start, outcome.summary))


if __name__ == "__main__":
    main()
