"""Shared test helpers: mock provider and raw Yahoo payload builders."""

from unittest.mock import AsyncMock, MagicMock

from marketfeed.services.providers import MarketDataProvider


def make_provider(quote=None, summary=None, news=None) -> MagicMock:
    """Create a mock MarketDataProvider whose calls return the given payloads."""
    provider = MagicMock(spec=MarketDataProvider)
    provider.quote = AsyncMock(return_value=quote if quote is not None else {})
    provider.quote_summary = AsyncMock(return_value=summary if summary is not None else {})
    provider.search = AsyncMock(return_value=news if news is not None else {"news": []})
    return provider


def raw_quote(symbol: str, change_pct: float = 1.0, volume: int | None = 1_000_000, **extra) -> dict:
    """A quote dict shaped like yahooquery's ``Ticker.quotes`` entries."""
    quote = {
        "symbol": symbol,
        "longName": f"{symbol} Inc.",
        "regularMarketPrice": 100.0,
        "regularMarketChange": change_pct,
        "regularMarketChangePercent": change_pct,
    }
    if volume is not None:
        quote["regularMarketVolume"] = volume
    quote.update(extra)
    return quote


def raw_summary(**overrides) -> dict:
    """A quote summary with price, summaryDetail and assetProfile modules."""
    summary = {
        "price": {
            "symbol": "AAPL",
            "longName": "Apple Inc.",
            "regularMarketPrice": 189.5,
            "regularMarketChange": 1.2,
            "regularMarketChangePercent": 0.0064,
            "regularMarketVolume": 52_000_000,
        },
        "summaryDetail": {"marketCap": 2.9e12, "trailingPE": 29.4},
        "assetProfile": {
            "longBusinessSummary": "Apple designs smartphones and personal computers.",
            "sector": "Technology",
            "industry": "Consumer Electronics",
        },
    }
    summary.update(overrides)
    return summary


def raw_news(title: str = "Stocks rally", link: str | None = "https://example.com/a", **extra) -> dict:
    item = {
        "uuid": f"uuid-{title}",
        "title": title,
        "publisher": "Reuters",
        "providerPublishTime": 1700000000,
    }
    if link is not None:
        item["link"] = link
    item.update(extra)
    return item
