from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    # The mobile client reads camelCase keys (changePercent, marketCap, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MarketIndex(_CamelModel):
    symbol: str = Field(description="Index symbol (e.g. ^GSPC)")
    name: str = Field(description="Long or display name, falling back to the symbol")
    price: float = Field(default=0, description="Latest index level")
    change: float = Field(default=0, description="Absolute change from previous close")
    change_percent: float = Field(default=0, description="Percentage change from previous close")


class Stock(MarketIndex):
    volume: int = Field(default=0, description="Current session trading volume")


class SpotlightStock(Stock):
    description: str = Field(description="Business summary")
    market_cap: float = Field(default=0, description="Market capitalisation")
    pe_ratio: float | None = Field(default=None, description="Trailing P/E, omitted when unknown")
    sector: str | None = Field(default=None, description="Sector, omitted when unknown")
    industry: str | None = Field(default=None, description="Industry, omitted when unknown")


class NewsItem(_CamelModel):
    title: str
    summary: str = ""
    url: str
    published_at: datetime = Field(description="Publication time (UTC)")
    source: str = ""
    uuid: str | None = None


class Pagination(_CamelModel):
    total: int
    limit: int
    offset: int
    has_more: bool
    next_offset: int | None = None


class MarketMovers(_CamelModel):
    title: str = Field(description="List heading, e.g. Top Gainers")
    stocks: list[Stock]
    pagination: Pagination | None = None
