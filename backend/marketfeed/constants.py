"""Shared constants for symbol universes, endpoint defaults and error codes."""

# S&P 500, NASDAQ Composite, Dow Jones Industrial Average, Russell 2000
MARKET_INDEX_SYMBOLS: list[str] = ["^GSPC", "^IXIC", "^DJI", "^RUT"]

# Liquid large caps used to rank gainers and losers.
MOVER_SYMBOLS: list[str] = ["AAPL", "MSFT", "GOOGL", "AMZN", "TSLA", "META", "NVDA", "NFLX", "AMD", "CRM"]

# Typically high-volume names plus a broad-market ETF.
ACTIVE_SYMBOLS: list[str] = ["AAPL", "MSFT", "GOOGL", "AMZN", "TSLA", "META", "NVDA", "AMD", "NFLX", "SPY"]

SPOTLIGHT_MODULES: list[str] = ["price", "summaryDetail", "assetProfile"]

DEFAULT_SPOTLIGHT_SYMBOL = "AAPL"
DEFAULT_NEWS_QUERY = "stock market"
# Default query for GET /news when the client sends none.
DEFAULT_NEWS_ENDPOINT_QUERY = "US stocks"
NEWS_SEARCH_COUNT = 20
NEWS_LIMIT = 5
NO_DESCRIPTION = "No description available"

# Retry backoff bounds (milliseconds)
RETRY_BASE_DELAY_MS = 1000
RETRY_MAX_DELAY_MS = 10000

# Pagination
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 50

# Machine-readable error codes used in error envelopes.
ERROR_VALIDATION = "VALIDATION_ERROR"
ERROR_EXTERNAL_API = "EXTERNAL_API_ERROR"
ERROR_NO_PRICE_DATA = "NO_PRICE_DATA"
ERROR_NOT_FOUND = "NOT_FOUND"
ERROR_INTERNAL = "INTERNAL_SERVER_ERROR"
