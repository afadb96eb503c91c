"""Yahoo Finance data fetching via yahooquery.

- quotes: batch real-time quotes
- summary: per-symbol quote summary modules
- news: news search

All blocking yahooquery calls run in worker threads; callers ``await`` them.
"""

from marketfeed.services.yahoo.news import search_news
from marketfeed.services.yahoo.quotes import batch_fetch_quotes
from marketfeed.services.yahoo.summary import fetch_quote_summary

__all__ = [
    "batch_fetch_quotes",
    "fetch_quote_summary",
    "search_news",
]
