from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from marketfeed.config import Settings
from marketfeed.main import create_app
from marketfeed.services.market_data_service import MarketDataService
from tests.helpers import make_provider


@pytest.fixture
def settings():
    return Settings(
        environment="test",
        yahoo_api_timeout=1000,
        yahoo_api_retry_attempts=3,
        log_level="debug",
    )


@pytest.fixture
def provider():
    return make_provider()


@pytest.fixture
def service(settings, provider):
    return MarketDataService(settings, provider)


@pytest.fixture
def no_sleep():
    """Skip real backoff waits; the mock records the requested delays."""
    with patch("marketfeed.services.retry.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
        yield mock_sleep


@pytest.fixture
async def client(settings, provider, no_sleep):
    app = create_app(settings, provider=provider)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
