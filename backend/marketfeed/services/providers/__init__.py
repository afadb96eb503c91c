"""Market data provider registry, resolves a provider name to a new instance."""

from marketfeed.services.providers.base import MarketDataProvider
from marketfeed.services.providers.yahoo import YahooMarketProvider

__all__ = ["MarketDataProvider", "create_market_provider"]

_PROVIDERS: dict[str, type[MarketDataProvider]] = {
    "yahoo": YahooMarketProvider,
}


def create_market_provider(name: str) -> MarketDataProvider:
    """Instantiate the provider registered under ``name`` (called once at startup)."""
    cls = _PROVIDERS.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown market provider: {name!r}. Available: {list(_PROVIDERS)}"
        )
    return cls()
