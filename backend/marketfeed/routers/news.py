from fastapi import APIRouter, Depends, Query

from marketfeed.constants import DEFAULT_NEWS_ENDPOINT_QUERY
from marketfeed.routers.deps import PageParams, cached, get_market_service, get_news_cache, page_params, paginate
from marketfeed.schemas.envelope import ApiResponse
from marketfeed.schemas.market import NewsItem
from marketfeed.services.market_data_service import MarketDataService
from marketfeed.utils import TTLCache

router = APIRouter(tags=["news"])


@router.get(
    "/news",
    response_model=ApiResponse[list[NewsItem]],
    response_model_exclude_none=True,
    summary="Latest financial news",
)
async def get_latest_news(
    q: str = Query(DEFAULT_NEWS_ENDPOINT_QUERY, max_length=100, description="Search query (defaults to US stocks when empty)"),
    page: PageParams = Depends(page_params),
    service: MarketDataService = Depends(get_market_service),
    cache: TTLCache = Depends(get_news_cache),
):
    """Up to five recent articles matching `q`. Upstream failures yield an empty list."""
    q = q.strip() or DEFAULT_NEWS_ENDPOINT_QUERY
    # Empty results (including swallowed upstream failures) are not cached
    news, hit = await cached(cache, f"news:{q.lower()}", lambda: service.get_latest_news(q), should_store=bool)
    items, pagination = paginate(news, page.limit, page.offset)
    return ApiResponse(data=items, cached=hit, pagination=pagination)
