"""Tests for raw payload normalization helpers."""

import math

from marketfeed.services.transform import normalize_quotes, publish_epoch, to_news_item, to_stock
from marketfeed.utils import safe_number
from tests.helpers import raw_news, raw_quote


# ── normalize_quotes ─────────────────────────────────────────────────


def test_list_rekeyed_by_symbol():
    result = normalize_quotes([raw_quote("AAPL"), raw_quote("MSFT")])
    assert list(result) == ["AAPL", "MSFT"]
    assert result["MSFT"]["symbol"] == "MSFT"


def test_list_entries_without_symbol_dropped():
    result = normalize_quotes([{"regularMarketPrice": 1.0}, None, raw_quote("AAPL")])
    assert list(result) == ["AAPL"]


def test_mapping_drops_error_strings():
    result = normalize_quotes({"AAPL": raw_quote("AAPL"), "BAD": "Quote not found"})
    assert list(result) == ["AAPL"]


def test_unexpected_payload_is_empty():
    assert normalize_quotes("No data found") == {}
    assert normalize_quotes(None) == {}


# ── to_stock ─────────────────────────────────────────────────────────


def test_stock_name_fallbacks():
    assert to_stock({"displayName": "Apple"}, "AAPL").name == "Apple"
    assert to_stock({}, "AAPL").name == "AAPL"


def test_stock_nan_becomes_zero():
    stock = to_stock({"regularMarketPrice": math.nan, "regularMarketVolume": math.inf}, "AAPL")
    assert stock.price == 0
    assert stock.volume == 0


def test_safe_number_rejects_non_numeric():
    assert safe_number("n/a") == 0
    assert safe_number(None, default=None) is None
    assert safe_number("12.5") == 12.5


# ── publish time / news ──────────────────────────────────────────────


def test_epoch_seconds_used_directly():
    assert publish_epoch(1700000000) == 1700000000
    assert publish_epoch(1700000000.9) == 1700000000


def test_date_string_converted_to_epoch():
    assert publish_epoch("2023-11-14T22:13:20Z") == 1700000000
    assert publish_epoch("2023-11-14T23:13:20+01:00") == 1700000000


def test_unusable_publish_time():
    assert publish_epoch("not a date") is None
    assert publish_epoch(None) is None
    assert publish_epoch(True) is None


def test_news_item_requires_title_and_link():
    assert to_news_item(raw_news(title="")) is None
    assert to_news_item(raw_news(link=None)) is None


def test_news_item_dropped_when_time_unusable():
    assert to_news_item(raw_news(providerPublishTime="garbage")) is None


def test_news_item_missing_summary_is_empty_string():
    item = to_news_item(raw_news())
    assert item.summary == ""
    assert item.url == "https://example.com/a"


def test_non_finite_epoch_is_unusable():
    assert publish_epoch(math.nan) is None
    assert publish_epoch(math.inf) is None
    assert publish_epoch(-math.inf) is None


def test_news_item_dropped_when_epoch_out_of_range():
    assert to_news_item(raw_news(providerPublishTime=10**20)) is None
