"""Abstract base class for upstream market data providers."""

from abc import ABC, abstractmethod


class MarketDataProvider(ABC):
    """Provider interface for quotes, quote summaries, and news search.

    Implementations wrap a specific data source (Yahoo Finance, ...).
    MarketDataService treats them as black boxes and only relies on the
    payload shapes documented here.
    """

    @abstractmethod
    async def quote(self, symbols: list[str]) -> list[dict] | dict[str, dict]:
        """Fetch quotes for many symbols in one call.

        Returns either a list of quote dicts (each carrying ``symbol``) or a
        dict keyed by symbol.
        """

    @abstractmethod
    async def quote_summary(self, symbol: str, modules: list[str]) -> dict:
        """Fetch summary modules for one symbol as ``{module_name: data}``."""

    @abstractmethod
    async def search(self, query: str, news_count: int = 20) -> dict:
        """Search news; returns a dict with the items under ``"news"``."""
