"""Yahoo Finance real-time quote fetching."""

import logging

from yahooquery import Ticker

from marketfeed.utils import async_threadable

logger = logging.getLogger(__name__)


def _has_invalid_crumb(data: object) -> bool:
    """Check if Yahoo rejected the crumb for all symbols."""
    if not isinstance(data, dict) or not data:
        return False
    return all(isinstance(v, str) and "Invalid Crumb" in v for v in data.values())


@async_threadable
def batch_fetch_quotes(symbols: list[str]) -> dict | list | str:
    """Fetch raw quotes for many symbols in one round-trip.

    yahooquery returns a dict keyed by symbol, but error strings and list
    payloads show up too; the raw value is handed back for normalization.
    """
    if not symbols:
        return {}

    data = Ticker(symbols).quotes

    # Retry once with a fresh session if Yahoo rejected the crumb
    if _has_invalid_crumb(data):
        logger.warning(
            "Yahoo rejected crumb for all %d symbols, retrying with fresh session",
            len(symbols),
        )
        data = Ticker(symbols).quotes

    return data
