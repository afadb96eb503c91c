"""Yahoo Finance provider: thin wrapper around the yahoo/ fetch functions."""

from marketfeed.services.providers.base import MarketDataProvider
from marketfeed.services.yahoo import batch_fetch_quotes, fetch_quote_summary, search_news


class YahooMarketProvider(MarketDataProvider):
    """Delegates all upstream calls to the yahoo/ service package."""

    async def quote(self, symbols: list[str]) -> list[dict] | dict[str, dict]:
        return await batch_fetch_quotes(symbols)

    async def quote_summary(self, symbol: str, modules: list[str]) -> dict:
        return await fetch_quote_summary(symbol, modules)

    async def search(self, query: str, news_count: int = 20) -> dict:
        return await search_news(query, news_count=news_count)
