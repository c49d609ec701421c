"""
Presentation adapter: renders QuoteSummary records and provider failures as
single text lines.

This is the only place where absent statistics collapse to a displayed 0.00;
the domain keeps them as None.
"""

from datetime import datetime, timezone

from quote_tracker.domain.entities.quote_summary import QuoteSummary
from quote_tracker.domain.errors import ProviderError


def to_rfc3339(moment: datetime) -> str:
    """ISO-8601/RFC 3339 rendering; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.isoformat()


def format_summary_line(start: datetime, summary: QuoteSummary) -> str:
    """Render *summary* as ``start,ticker,$last,change%,$min,$max,$sma``."""
    relative = summary.price_diff.relative if summary.price_diff is not None else 0.0
    last_sma = summary.sma[-1] if summary.sma else 0.0
    return (
        f"{to_rfc3339(start)},{summary.ticker},"
        f"${_or_zero(summary.last_price):.2f},"
        f"{relative * 100.0:.2f}%,"
        f"${_or_zero(summary.min):.2f},"
        f"${_or_zero(summary.max):.2f},"
        f"${last_sma:.2f}"
    )


def format_error_line(ticker: str, error: ProviderError) -> str:
    return f"no quotes found for the symbol {error.ticker or ticker}: {error.description}"


def _or_zero(value):
    return 0.0 if value is None else value
