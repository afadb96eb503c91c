"""Market data business logic: retried upstream access with fallbacks."""

import logging
from typing import Awaitable, Callable, TypeVar

from marketfeed.config import Settings
from marketfeed.constants import (
    ACTIVE_SYMBOLS,
    DEFAULT_NEWS_QUERY,
    DEFAULT_SPOTLIGHT_SYMBOL,
    MARKET_INDEX_SYMBOLS,
    MOVER_SYMBOLS,
    NEWS_LIMIT,
    NEWS_SEARCH_COUNT,
    SPOTLIGHT_MODULES,
)
from marketfeed.schemas.market import MarketIndex, NewsItem, SpotlightStock, Stock
from marketfeed.services import fallback
from marketfeed.services.errors import MarketDataError, NoPriceDataError
from marketfeed.services.providers import MarketDataProvider
from marketfeed.services.retry import RetryPolicy, execute_with_retry
from marketfeed.services.transform import (
    normalize_quotes,
    to_market_index,
    to_news_item,
    to_spotlight,
    to_stock,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MarketDataService:
    """Fetches quotes, spotlight details and news from the upstream provider.

    Holds no per-request state: the retry policy and timeout are fixed at
    construction, and every call builds fresh models.
    """

    def __init__(self, settings: Settings, provider: MarketDataProvider):
        self.provider = provider
        self.timeout_ms = settings.yahoo_api_timeout
        self.retry_policy = RetryPolicy(max_attempts=settings.yahoo_api_retry_attempts)

    async def execute_with_retry(self, operation: Callable[[], Awaitable[T]], label: str) -> T:
        return await execute_with_retry(operation, label, self.retry_policy, self.timeout_ms)

    async def _fetch_quotes(self, symbols: list[str], label: str) -> dict[str, dict]:
        raw = await self.execute_with_retry(lambda: self.provider.quote(symbols), label)
        return normalize_quotes(raw)

    async def get_market_indexes(self) -> list[MarketIndex]:
        quotes = await self._fetch_quotes(MARKET_INDEX_SYMBOLS, "getMarketIndexes")
        return [to_market_index(q, sym) for sym, q in quotes.items()]

    async def _get_movers(self, symbols: list[str], label: str) -> list[Stock] | None:
        """Fetch quotes for ``symbols``; None means the caller should serve fallback rows."""
        try:
            quotes = await self._fetch_quotes(symbols, label)
        except MarketDataError as exc:
            logger.warning("%s failed, returning sample data: %s", label, exc)
            return None

        stocks = []
        for sym in symbols:
            quote = quotes.get(sym)
            if quote is None:
                logger.debug("No quote data for symbol: %s", sym)
                continue
            stocks.append(to_stock(quote, sym))

        if not stocks:
            logger.warning("%s returned no usable quotes, returning sample data", label)
            return None
        return stocks

    async def top_gainers(self) -> tuple[list[Stock], bool]:
        """Gainers plus whether they are live (False when sample data was served)."""
        stocks = await self._get_movers(MOVER_SYMBOLS, "getTopGainers")
        if stocks is None:
            return fallback.sample_gainers(), False
        return sorted(stocks, key=lambda s: s.change_percent, reverse=True), True

    async def top_losers(self) -> tuple[list[Stock], bool]:
        stocks = await self._get_movers(MOVER_SYMBOLS, "getTopLosers")
        if stocks is None:
            return fallback.sample_losers(), False
        return sorted(stocks, key=lambda s: s.change_percent), True

    async def most_active(self) -> tuple[list[Stock], bool]:
        stocks = await self._get_movers(ACTIVE_SYMBOLS, "getMostActive")
        if stocks is None:
            return fallback.sample_active(), False
        return sorted(stocks, key=lambda s: s.volume, reverse=True), True

    async def get_top_gainers(self) -> list[Stock]:
        stocks, _ = await self.top_gainers()
        return stocks

    async def get_top_losers(self) -> list[Stock]:
        stocks, _ = await self.top_losers()
        return stocks

    async def get_most_active(self) -> list[Stock]:
        stocks, _ = await self.most_active()
        return stocks

    async def get_spotlight_stock(self, symbol: str | None = None) -> SpotlightStock:
        """Detailed view of one symbol. Raises NoPriceDataError when Yahoo has no price module."""
        symbol = symbol or DEFAULT_SPOTLIGHT_SYMBOL
        summary = await self.execute_with_retry(
            lambda: self.provider.quote_summary(symbol, SPOTLIGHT_MODULES),
            f"getSpotlightStock({symbol})",
        )
        if not isinstance(summary, dict) or not isinstance(summary.get("price"), dict):
            logger.error("Failed to get spotlight stock for %s: no price module", symbol)
            raise NoPriceDataError(symbol)
        return to_spotlight(summary, symbol)

    async def get_latest_news(self, query: str | None = None) -> list[NewsItem]:
        """Latest news for ``query``. Never raises; upstream failures yield an empty list."""
        query = query or DEFAULT_NEWS_QUERY
        try:
            result = await self.execute_with_retry(
                lambda: self.provider.search(query, news_count=NEWS_SEARCH_COUNT),
                f"getLatestNews({query})",
            )
            news = result.get("news") if isinstance(result, dict) else None
            if not news:
                logger.warning("No news found in search results (query=%s)", query)
                return []

            items = []
            for raw in news:
                if not isinstance(raw, dict):
                    continue
                item = to_news_item(raw)
                if item is not None:
                    items.append(item)
            return items[:NEWS_LIMIT]
        except Exception:
            logger.exception("Failed to fetch news (query=%s)", query)
            return []
