"""Error taxonomy for upstream market data access."""


class MarketDataError(Exception):
    """Base class for failures raised by the market data service."""

    code = "MARKET_DATA_ERROR"


class TimeoutExceededError(MarketDataError):
    """A single attempt did not settle within the per-attempt timeout."""

    code = "TIMEOUT_ERROR"

    def __init__(self, timeout_ms: int):
        super().__init__(f"Operation timed out after {timeout_ms}ms")
        self.timeout_ms = timeout_ms


class UpstreamCallFailedError(MarketDataError):
    """Every retry attempt against the upstream provider failed."""

    code = "API_CALL_FAILED"

    def __init__(self, label: str, attempts: int, last_error: BaseException | None = None):
        super().__init__(f"Yahoo Finance API call failed after {attempts} attempts: {label}")
        self.label = label
        self.attempts = attempts
        self.last_error = last_error


class NoPriceDataError(MarketDataError):
    """Quote summary came back without the ``price`` module."""

    code = "NO_PRICE_DATA"

    def __init__(self, symbol: str):
        super().__init__(f"No price data available for symbol: {symbol}")
        self.symbol = symbol
