"""Static sample lists served when live mover data is unavailable.

The rows are fixed demo data, never refreshed. Each accessor returns new
Stock instances so callers can sort or mutate without touching the table.
"""

from marketfeed.schemas.market import Stock

# (symbol, name, price, change, change_percent, volume)
_GAINERS: list[tuple[str, str, float, float, float, int]] = [
    ("AAPL", "Apple Inc.", 175.43, 4.32, 2.53, 45678900),
    ("MSFT", "Microsoft Corporation", 338.11, 7.89, 2.39, 23456789),
    ("GOOGL", "Alphabet Inc.", 138.21, 2.87, 2.12, 34567890),
    ("NVDA", "NVIDIA Corporation", 432.65, 8.43, 1.99, 56789012),
    ("TSLA", "Tesla, Inc.", 248.50, 4.12, 1.68, 67890123),
    ("AMD", "Advanced Micro Devices, Inc.", 102.34, 1.89, 1.88, 45678901),
    ("CRM", "Salesforce, Inc.", 216.78, 3.21, 1.50, 12345678),
    ("ADBE", "Adobe Inc.", 487.23, 6.45, 1.34, 23456789),
    ("NFLX", "Netflix, Inc.", 385.20, 4.80, 1.26, 34567890),
    ("PYPL", "PayPal Holdings, Inc.", 58.45, 0.67, 1.16, 56789012),
    ("INTC", "Intel Corporation", 23.45, 0.25, 1.08, 67890123),
    ("CSCO", "Cisco Systems, Inc.", 47.89, 0.48, 1.01, 78901234),
]

_LOSERS: list[tuple[str, str, float, float, float, int]] = [
    ("META", "Meta Platforms, Inc.", 298.75, -6.45, -2.11, 34567890),
    ("NFLX", "Netflix, Inc.", 385.20, -7.80, -1.98, 23456789),
    ("AMD", "Advanced Micro Devices, Inc.", 102.34, -1.89, -1.81, 45678901),
    ("CRM", "Salesforce, Inc.", 216.78, -3.21, -1.46, 12345678),
    ("AMZN", "Amazon.com, Inc.", 127.89, -1.67, -1.29, 56789012),
    ("PYPL", "PayPal Holdings, Inc.", 58.45, -0.78, -1.32, 45678901),
    ("INTC", "Intel Corporation", 23.45, -0.32, -1.35, 56789012),
    ("CSCO", "Cisco Systems, Inc.", 47.89, -0.67, -1.38, 67890123),
    ("IBM", "International Business Machines Corporation", 142.56, -2.14, -1.48, 78901234),
    ("ORCL", "Oracle Corporation", 108.23, -1.89, -1.72, 89012345),
]

_ACTIVE: list[tuple[str, str, float, float, float, int]] = [
    ("SPY", "SPDR S&P 500 ETF Trust", 428.50, 2.15, 0.50, 89012345),
    ("QQQ", "Invesco QQQ Trust", 367.89, 1.23, 0.34, 78901234),
    ("AAPL", "Apple Inc.", 175.43, 4.32, 2.53, 67890123),
    ("TSLA", "Tesla, Inc.", 248.50, 4.12, 1.68, 56789012),
    ("NVDA", "NVIDIA Corporation", 432.65, 8.43, 1.99, 45678901),
    ("AMD", "Advanced Micro Devices, Inc.", 102.34, 1.89, 1.88, 43567890),
    ("META", "Meta Platforms, Inc.", 298.75, -6.45, -2.11, 42345678),
    ("MSFT", "Microsoft Corporation", 338.11, 7.89, 2.39, 41234567),
    ("GOOGL", "Alphabet Inc.", 138.21, 2.87, 2.12, 40123456),
    ("AMZN", "Amazon.com, Inc.", 127.89, -1.67, -1.29, 39012345),
    ("NFLX", "Netflix, Inc.", 385.20, -7.80, -1.98, 38901234),
    ("CRM", "Salesforce, Inc.", 216.78, -3.21, -1.46, 37890123),
]


def _build(rows: list[tuple[str, str, float, float, float, int]]) -> list[Stock]:
    return [
        Stock(symbol=sym, name=name, price=price, change=change, change_percent=pct, volume=vol)
        for sym, name, price, change, pct, vol in rows
    ]


def sample_gainers() -> list[Stock]:
    return _build(_GAINERS)


def sample_losers() -> list[Stock]:
    return _build(_LOSERS)


def sample_active() -> list[Stock]:
    return _build(_ACTIVE)
