"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from marketfeed.config import load_settings
from marketfeed.services.market_data_service import MarketDataService
from tests.helpers import make_provider


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ("PORT", "ENVIRONMENT", "YAHOO_API_TIMEOUT", "YAHOO_API_RETRY_ATTEMPTS",
                 "CACHE_TTL_MARKET", "CACHE_TTL_NEWS", "LOG_LEVEL", "MARKET_PROVIDER"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


def test_defaults():
    s = load_settings()
    assert s.port == 3000
    assert s.environment == "development"
    assert s.yahoo_api_timeout == 10000
    assert s.yahoo_api_retry_attempts == 3
    assert s.cache_ttl_market == 60
    assert s.cache_ttl_news == 300
    assert s.log_level == "info"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("YAHOO_API_TIMEOUT", "5000")
    monkeypatch.setenv("YAHOO_API_RETRY_ATTEMPTS", "5")
    monkeypatch.setenv("ENVIRONMENT", "production")

    s = load_settings()

    assert s.yahoo_api_timeout == 5000
    assert s.yahoo_api_retry_attempts == 5
    assert s.environment == "production"


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert load_settings(port=9000).port == 9000


@pytest.mark.parametrize("name, value", [
    ("PORT", "0"),
    ("YAHOO_API_TIMEOUT", "500"),
    ("YAHOO_API_TIMEOUT", "60001"),
    ("YAHOO_API_RETRY_ATTEMPTS", "0"),
    ("YAHOO_API_RETRY_ATTEMPTS", "abc"),
    ("LOG_LEVEL", "verbose"),
    ("ENVIRONMENT", "staging"),
])
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        load_settings()


def test_service_takes_policy_from_settings():
    service = MarketDataService(load_settings(yahoo_api_retry_attempts=7, yahoo_api_timeout=2000), make_provider())
    assert service.retry_policy.max_attempts == 7
    assert service.retry_policy.base_delay_ms == 1000
    assert service.retry_policy.max_delay_ms == 10000
    assert service.timeout_ms == 2000
