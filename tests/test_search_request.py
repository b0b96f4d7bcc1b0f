import pytest

from eventure.config import SEARCH_MAX_LIMIT
from eventure.schemas.search import OrderField, SearchRequest, SortOrder


def test_defaults():
    req = SearchRequest.from_query()
    assert req.zip_code is None
    assert req.radius_miles is None
    assert req.category is None
    assert req.order_by == OrderField.STARTS_AT
    assert req.order == SortOrder.ASC
    assert req.limit is None
    assert not req.geo_requested


def test_zip_is_stripped_but_not_validated():
    assert SearchRequest.from_query(zip=" 02903 ").zip_code == "02903"
    assert SearchRequest.from_query(zip="abc").zip_code == "abc"
    assert SearchRequest.from_query(zip="   ").zip_code is None


@pytest.mark.parametrize(
    "raw, expected",
    [("25", 25), ("5.0", 5), ("10abc", 10), (" 15", 15), ("0", None), ("-5", None), ("ten", None), (None, None)],
)
def test_radius_parsing(raw, expected):
    assert SearchRequest.from_query(radius=raw).radius_miles == expected


@pytest.mark.parametrize("raw", ["All", "", "  "])
def test_category_all_or_empty_means_no_filter(raw):
    assert SearchRequest.from_query(category=raw).category is None


def test_category_is_case_sensitive_value():
    assert SearchRequest.from_query(category="music").category == "music"


def test_order_by_created_at_desc():
    req = SearchRequest.from_query(order_by="created_at", order="DESC")
    assert req.order_by == OrderField.CREATED_AT
    assert req.order == SortOrder.DESC


def test_unknown_order_by_falls_back_to_starts_at_asc():
    req = SearchRequest.from_query(order_by="title", order="DESC")
    assert req.order_by == OrderField.STARTS_AT
    assert req.order == SortOrder.ASC


def test_order_other_than_desc_is_asc():
    assert SearchRequest.from_query(order_by="starts_at", order="desc").order == SortOrder.ASC


@pytest.mark.parametrize(
    "raw, expected",
    [("10", 10), ("20x", 20), ("0", None), ("-1", None), ("many", None), (str(SEARCH_MAX_LIMIT + 50), SEARCH_MAX_LIMIT)],
)
def test_limit_parsing(raw, expected):
    assert SearchRequest.from_query(limit=raw).limit == expected


def test_request_is_immutable():
    req = SearchRequest.from_query(zip="02903")
    with pytest.raises(Exception):
        req.zip_code = "10001"
