"""Yahoo Finance quote summary modules (price, summaryDetail, assetProfile, ...)."""

import logging

from yahooquery import Ticker

from marketfeed.utils import async_threadable

logger = logging.getLogger(__name__)


@async_threadable
def fetch_quote_summary(symbol: str, modules: list[str]) -> dict:
    """Return ``{module_name: data}`` for one symbol.

    Yahoo answers unknown symbols with an error string instead of a dict;
    that case comes back as an empty mapping.
    """
    data = Ticker(symbol).get_modules(modules)
    info = data.get(symbol) if isinstance(data, dict) else None
    if not isinstance(info, dict):
        logger.warning("Yahoo returned no summary for %s: %s", symbol, repr(info)[:200])
        return {}
    return info
