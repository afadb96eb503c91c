"""Normalize raw Yahoo Finance payloads into response models."""

import logging
import math
from datetime import datetime, timezone

import pandas as pd

from marketfeed.constants import NO_DESCRIPTION
from marketfeed.schemas.market import MarketIndex, NewsItem, SpotlightStock, Stock
from marketfeed.utils import safe_number

logger = logging.getLogger(__name__)


def normalize_quotes(raw: object) -> dict[str, dict]:
    """Key a batch quote response by symbol.

    Yahoo hands back either a list of quote dicts or a dict already keyed by
    symbol (with error strings in place of dicts for unknown tickers).
    Anything else yields an empty mapping.
    """
    if isinstance(raw, list):
        return {
            q["symbol"]: q
            for q in raw
            if isinstance(q, dict) and q.get("symbol")
        }
    if isinstance(raw, dict):
        return {sym: q for sym, q in raw.items() if isinstance(q, dict)}
    if raw is not None:
        logger.warning("Unexpected quote payload type from Yahoo: %s", type(raw).__name__)
    return {}


def _name(quote: dict, fallback: str) -> str:
    return quote.get("longName") or quote.get("displayName") or quote.get("shortName") or fallback


def to_market_index(quote: dict, symbol: str) -> MarketIndex:
    return MarketIndex(
        symbol=symbol,
        name=_name(quote, symbol),
        price=safe_number(quote.get("regularMarketPrice")),
        change=safe_number(quote.get("regularMarketChange")),
        change_percent=safe_number(quote.get("regularMarketChangePercent")),
    )


def to_stock(quote: dict, symbol: str) -> Stock:
    return Stock(
        symbol=symbol,
        name=_name(quote, symbol),
        price=safe_number(quote.get("regularMarketPrice")),
        change=safe_number(quote.get("regularMarketChange")),
        change_percent=safe_number(quote.get("regularMarketChangePercent")),
        volume=int(safe_number(quote.get("regularMarketVolume"))),
    )


def to_spotlight(summary: dict, symbol: str) -> SpotlightStock:
    """Build a SpotlightStock from a quote summary that has a ``price`` module."""
    price = summary["price"]
    detail = summary.get("summaryDetail")
    profile = summary.get("assetProfile")
    detail = detail if isinstance(detail, dict) else {}
    profile = profile if isinstance(profile, dict) else {}

    # The price module reports change percent as a fraction (0.0253 -> 2.53%)
    change_pct = safe_number(price.get("regularMarketChangePercent"))

    pe = safe_number(detail.get("trailingPE"), default=None)
    return SpotlightStock(
        symbol=price.get("symbol") or symbol,
        name=price.get("longName") or price.get("shortName") or symbol,
        price=safe_number(price.get("regularMarketPrice")),
        change=safe_number(price.get("regularMarketChange")),
        change_percent=round(change_pct * 100, 2),
        volume=int(safe_number(price.get("regularMarketVolume"))),
        description=profile.get("longBusinessSummary") or NO_DESCRIPTION,
        market_cap=safe_number(detail.get("marketCap")),
        pe_ratio=pe,
        sector=profile.get("sector") or None,
        industry=profile.get("industry") or None,
    )


def publish_epoch(value: object) -> int | None:
    """Resolve ``providerPublishTime`` to epoch seconds.

    Yahoo sends epoch seconds as a number, or occasionally an ISO date string.
    Returns None when the value cannot be interpreted.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            ts = pd.to_datetime(value, utc=True)
        except (ValueError, TypeError):
            return None
        if pd.isna(ts):
            return None
        return int(ts.timestamp())
    return None


def to_news_item(item: dict) -> NewsItem | None:
    """Build a NewsItem, or None when the record lacks title, link or a usable time."""
    if not item.get("title") or not item.get("link"):
        return None
    epoch = publish_epoch(item.get("providerPublishTime"))
    if epoch is None:
        logger.warning("Dropping news item with unusable publish time: %s", item.get("uuid") or item["link"])
        return None
    try:
        published_at = datetime.fromtimestamp(epoch, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        logger.warning("Dropping news item with out-of-range publish time %s: %s", epoch, item.get("uuid") or item["link"])
        return None
    return NewsItem(
        title=item["title"],
        summary=item.get("summary") or "",
        url=item["link"],
        published_at=published_at,
        source=item.get("publisher") or "",
        uuid=item.get("uuid"),
    )
