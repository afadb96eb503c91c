from fastapi import APIRouter, Depends, Query

from marketfeed.constants import DEFAULT_SPOTLIGHT_SYMBOL
from marketfeed.routers.deps import (
    PageParams,
    cached,
    get_market_cache,
    get_market_service,
    page_params,
    paginate,
)
from marketfeed.schemas.envelope import ApiResponse
from marketfeed.schemas.market import MarketIndex, MarketMovers, SpotlightStock, Stock
from marketfeed.services.market_data_service import MarketDataService
from marketfeed.utils import TTLCache

router = APIRouter(tags=["market"])


@router.get(
    "/indexes",
    response_model=ApiResponse[list[MarketIndex]],
    response_model_exclude_none=True,
    summary="Major market indexes",
)
async def get_market_indexes(
    service: MarketDataService = Depends(get_market_service),
    cache: TTLCache = Depends(get_market_cache),
):
    """S&P 500, NASDAQ Composite, Dow Jones and Russell 2000 in upstream order.

    Fails with 502 when Yahoo Finance stays unreachable after all retries.
    """
    indexes, hit = await cached(cache, "indexes", service.get_market_indexes)
    return ApiResponse(data=indexes, cached=hit)


def _is_live(result: tuple[list[Stock], bool]) -> bool:
    # Sample data is never cached
    return result[1]


def _movers_response(title: str, stocks: list[Stock], hit: bool, page: PageParams) -> ApiResponse[MarketMovers]:
    items, pagination = paginate(stocks, page.limit, page.offset)
    return ApiResponse(data=MarketMovers(title=title, stocks=items, pagination=pagination), cached=hit)


@router.get(
    "/gainers",
    response_model=ApiResponse[MarketMovers],
    response_model_exclude_none=True,
    summary="Top gaining stocks",
)
async def get_top_gainers(
    page: PageParams = Depends(page_params),
    service: MarketDataService = Depends(get_market_service),
    cache: TTLCache = Depends(get_market_cache),
):
    """Tracked large caps sorted by change percent, highest first.

    Serves a fixed sample list when live quotes are unavailable.
    """
    (stocks, _), hit = await cached(cache, "gainers", service.top_gainers, should_store=_is_live)
    return _movers_response("Top Gainers", stocks, hit, page)


@router.get(
    "/losers",
    response_model=ApiResponse[MarketMovers],
    response_model_exclude_none=True,
    summary="Top losing stocks",
)
async def get_top_losers(
    page: PageParams = Depends(page_params),
    service: MarketDataService = Depends(get_market_service),
    cache: TTLCache = Depends(get_market_cache),
):
    """Tracked large caps sorted by change percent, most negative first."""
    (stocks, _), hit = await cached(cache, "losers", service.top_losers, should_store=_is_live)
    return _movers_response("Top Losers", stocks, hit, page)


@router.get(
    "/active",
    response_model=ApiResponse[MarketMovers],
    response_model_exclude_none=True,
    summary="Most actively traded stocks",
)
async def get_most_active(
    page: PageParams = Depends(page_params),
    service: MarketDataService = Depends(get_market_service),
    cache: TTLCache = Depends(get_market_cache),
):
    """Typically active names plus SPY, sorted by session volume."""
    (stocks, _), hit = await cached(cache, "active", service.most_active, should_store=_is_live)
    return _movers_response("Most Active", stocks, hit, page)


@router.get(
    "/spotlight",
    response_model=ApiResponse[SpotlightStock],
    response_model_exclude_none=True,
    summary="Featured stock with company details",
)
async def get_spotlight_stock(
    symbol: str = Query(
        DEFAULT_SPOTLIGHT_SYMBOL,
        max_length=10,
        pattern=r"^[A-Za-z0-9.\-]*$",
        description="Ticker symbol (defaults to AAPL when empty)",
    ),
    service: MarketDataService = Depends(get_market_service),
    cache: TTLCache = Depends(get_market_cache),
):
    """Price, market cap, P/E, sector, industry and business summary for one symbol.

    Returns 404 when Yahoo has no price data for the symbol. `peRatio`,
    `sector` and `industry` are omitted when unknown.
    """
    symbol = symbol.upper() or DEFAULT_SPOTLIGHT_SYMBOL
    stock, hit = await cached(cache, f"spotlight:{symbol}", lambda: service.get_spotlight_stock(symbol))
    return ApiResponse(data=stock, cached=hit)
