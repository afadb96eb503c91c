from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    port: int = Field(default=3000, ge=1, le=65535)
    environment: Literal["development", "production", "test"] = "development"

    # Upstream API
    market_provider: str = "yahoo"
    yahoo_api_timeout: int = Field(default=10000, ge=1000, le=60000, description="Per-attempt timeout in ms")
    yahoo_api_retry_attempts: int = Field(default=3, ge=1, le=10)

    # Response cache TTLs in seconds
    cache_ttl_market: int = Field(default=60, ge=1, le=3600)
    cache_ttl_news: int = Field(default=300, ge=1, le=3600)

    log_level: Literal["error", "warning", "info", "debug"] = "info"
    allowed_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


def load_settings(**overrides) -> Settings:
    """Build settings from the environment; keyword overrides win over env values."""
    return Settings(**overrides)
