import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketfeed.config import Settings, load_settings
from marketfeed.constants import (
    ERROR_EXTERNAL_API,
    ERROR_INTERNAL,
    ERROR_NO_PRICE_DATA,
    ERROR_NOT_FOUND,
    ERROR_VALIDATION,
)
from marketfeed.routers import market, news
from marketfeed.schemas.envelope import ApiResponse, ErrorDetail, ErrorResponse, utc_timestamp
from marketfeed.services.errors import MarketDataError, NoPriceDataError, UpstreamCallFailedError
from marketfeed.services.market_data_service import MarketDataService
from marketfeed.services.providers import MarketDataProvider, create_market_provider
from marketfeed.utils import TTLCache

logger = logging.getLogger(__name__)

# Cached entries per response cache; market keys are few, news keys grow with queries.
_CACHE_MAX_SIZE = 256


def _error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def _market_data_error_handler(request: Request, exc: MarketDataError) -> JSONResponse:
    if isinstance(exc, NoPriceDataError):
        return _error_response(404, ERROR_NO_PRICE_DATA, str(exc))
    if isinstance(exc, UpstreamCallFailedError):
        logger.error("Upstream failure on %s %s: %s", request.method, request.url.path, exc)
        return _error_response(502, ERROR_EXTERNAL_API, str(exc))
    logger.error("Market data error on %s %s: %s", request.method, request.url.path, exc)
    return _error_response(500, ERROR_INTERNAL, str(exc))


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        f"Query parameter '{err['loc'][-1]}': {err['msg']}" for err in exc.errors()
    ]
    return _error_response(400, ERROR_VALIDATION, "Invalid request parameters", details)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return _error_response(404, ERROR_NOT_FOUND, f"Route {request.method} {request.url.path} not found")
    return _error_response(exc.status_code, ERROR_INTERNAL, str(exc.detail))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, ERROR_INTERNAL, "An unexpected error occurred")


def create_app(settings: Settings | None = None, provider: MarketDataProvider | None = None) -> FastAPI:
    """Build the application.

    Settings are read once here and handed to the service; nothing else
    reads the environment. Pass ``provider`` to swap the upstream client.
    """
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Marketfeed",
        summary="Stock market data and news proxy for the mobile client.",
        description=(
            "Marketfeed re-serves Yahoo Finance quotes and news as small JSON envelopes.\n\n"
            "- Upstream calls are retried with exponential backoff and a per-attempt timeout.\n"
            "- Gainers, losers and most-active lists fall back to fixed sample data when "
            "Yahoo is unavailable; indexes and spotlight report the failure instead.\n"
            "- Responses are cached in-process for a short TTL.\n"
        ),
        version="1.0.0",
        openapi_tags=[
            {"name": "market", "description": "Indexes, market movers and the spotlight stock."},
            {"name": "news", "description": "Latest financial news by search query."},
            {"name": "system", "description": "Health checks and operational endpoints."},
        ],
    )

    app.state.settings = settings
    app.state.market_service = MarketDataService(
        settings, provider or create_market_provider(settings.market_provider)
    )
    app.state.market_cache = TTLCache(default_ttl=settings.cache_ttl_market, max_size=_CACHE_MAX_SIZE)
    app.state.news_cache = TTLCache(default_ttl=settings.cache_ttl_news, max_size=_CACHE_MAX_SIZE)
    app.state.started_at = time.monotonic()

    origins = settings.allowed_origins if settings.environment == "production" else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        max_age=86400,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.monotonic()
        response = await call_next(request)
        elapsed_ms = (time.monotonic() - start) * 1000
        log = logger.warning if response.status_code >= 400 else logger.info
        log("%s %s -> %d (%.0fms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    app.add_exception_handler(MarketDataError, _market_data_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(market.router)
    app.include_router(news.router)

    @app.get(
        "/health",
        response_model=ApiResponse[dict],
        response_model_exclude_none=True,
        summary="Health check",
        tags=["system"],
    )
    async def health():
        """Report service status, current time and process uptime in seconds."""
        uptime = round(time.monotonic() - app.state.started_at, 3)
        return ApiResponse(data={"status": "healthy", "timestamp": utc_timestamp(), "uptime": uptime})

    logger.info(
        "Marketfeed configured (environment=%s, provider=%s, timeout=%dms, retries=%d)",
        settings.environment, settings.market_provider,
        settings.yahoo_api_timeout, settings.yahoo_api_retry_attempts,
    )
    return app
