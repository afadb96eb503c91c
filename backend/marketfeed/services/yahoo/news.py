"""Yahoo Finance news search."""

from yahooquery import search as _yq_search

from marketfeed.utils import async_threadable


@async_threadable
def search_news(query: str, news_count: int = 20) -> dict:
    """Search Yahoo Finance and return the raw payload (news under ``"news"``)."""
    return _yq_search(query, news_count=news_count, quotes_count=0)
