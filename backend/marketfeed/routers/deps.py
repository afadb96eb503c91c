"""Shared router dependencies and helpers."""

import re
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from fastapi import Query, Request

from marketfeed.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from marketfeed.schemas.market import Pagination
from marketfeed.services.market_data_service import MarketDataService
from marketfeed.utils import TTLCache

T = TypeVar("T")

_LEADING_INT = re.compile(r"\s*[-+]?\d+")


def get_market_service(request: Request) -> MarketDataService:
    return request.app.state.market_service


def get_market_cache(request: Request) -> TTLCache:
    return request.app.state.market_cache


def get_news_cache(request: Request) -> TTLCache:
    return request.app.state.news_cache


@dataclass(frozen=True)
class PageParams:
    limit: int
    offset: int


def _leading_int(value: str | None) -> int | None:
    """Parse a leading integer (``"12abc"`` -> 12); None when there is none."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group()) if match else None


def page_params(
    limit: str | None = Query(None, description=f"Page size (default {DEFAULT_PAGE_LIMIT}, clamped to 1..{MAX_PAGE_LIMIT})"),
    offset: str | None = Query(None, description="Number of items to skip (default 0)"),
) -> PageParams:
    """Parse limit/offset leniently.

    Out-of-range values are clamped and unparseable ones fall back to the
    defaults; neither is rejected.
    """
    parsed_limit = _leading_int(limit)
    parsed_offset = _leading_int(offset)
    limit = DEFAULT_PAGE_LIMIT if not parsed_limit else min(max(parsed_limit, 1), MAX_PAGE_LIMIT)
    offset = max(parsed_offset or 0, 0)
    return PageParams(limit=limit, offset=offset)


def paginate(items: list[T], limit: int, offset: int) -> tuple[list[T], Pagination]:
    """Slice ``items`` and describe the page."""
    total = len(items)
    has_more = offset + limit < total
    return items[offset:offset + limit], Pagination(
        total=total,
        limit=limit,
        offset=offset,
        has_more=has_more,
        next_offset=offset + limit if has_more else None,
    )


async def cached(
    cache: TTLCache,
    key: str,
    fetch: Callable[[], Awaitable[T]],
    should_store: Callable[[T], bool] | None = None,
) -> tuple[T, bool]:
    """Return ``(value, hit)``, calling ``fetch`` on a miss.

    A fetched value is stored only when ``should_store`` (if given) accepts it.
    """
    value = cache.get_value(key)
    if value is not None:
        return value, True
    value = await fetch()
    if should_store is None or should_store(value):
        cache.set_value(key, value)
    return value, False
