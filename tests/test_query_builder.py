import pytest

from munchmap.core.errors import MissingQueryError
from munchmap.models.request_models import SearchFilters
from munchmap.services.query_builder import (
    build_query_text,
    build_text_search_params,
    clamp_radius,
    valid_price,
)


def test_clamp_radius_examples():
    assert clamp_radius(500) == 1000
    assert clamp_radius(100000) == 50000
    assert clamp_radius(5000) == 5000


def test_clamp_radius_defaults_when_missing_or_zero():
    assert clamp_radius(None) == 5000
    assert clamp_radius(0) == 5000
    assert clamp_radius(float("nan")) == 5000
    assert clamp_radius(None, default=3000) == 3000


def test_clamp_radius_negative_goes_to_minimum():
    assert clamp_radius(-20) == 1000


def test_coordinates_drop_location_text():
    f = SearchFilters(query="pizza", lat=42.33, lng=-83.05, location="Detroit, MI", radius_m=500)
    params = build_text_search_params(f, "k")

    assert "Detroit" not in params["query"]
    assert params["location"] == "42.33,-83.05"
    assert params["radius"] == "1000"


def test_location_text_used_without_coordinates():
    f = SearchFilters(query="pizza", location="Detroit, MI", radius_m=20000)
    params = build_text_search_params(f, "k")

    assert params["query"] == "pizza Detroit, MI restaurant"
    assert "location" not in params
    assert "radius" not in params


def test_half_a_coordinate_pair_counts_as_none():
    f = SearchFilters(query="pizza", lat=42.33, location="Detroit")
    params = build_text_search_params(f, "k")

    assert "location" not in params
    assert "Detroit" in params["query"]


def test_diet_and_bias_term_appended_in_order():
    f = SearchFilters(query="  tacos  ", diets="Vegan")
    assert build_query_text(f) == "tacos Vegan restaurant"


def test_whitespace_collapses():
    f = SearchFilters(query="late   night\ttacos", location="Ann  Arbor")
    assert build_query_text(f) == "late night tacos Ann Arbor restaurant"


def test_price_bounds_included_when_valid():
    f = SearchFilters(query="sushi", price_min="0", price_max="2")
    params = build_text_search_params(f, "k")
    assert params["minprice"] == "0"
    assert params["maxprice"] == "2"


def test_invalid_price_is_dropped():
    f = SearchFilters(query="sushi", price_min="7")
    params = build_text_search_params(f, "k")
    assert "minprice" not in params
    assert "maxprice" not in params


@pytest.mark.parametrize("value", ["5", "-1", "02", "two", "", None])
def test_valid_price_rejects(value):
    assert valid_price(value) is None


def test_open_now_only_when_true():
    assert "opennow" not in build_text_search_params(SearchFilters(query="x"), "k")
    params = build_text_search_params(SearchFilters(query="x", open_now=True), "k")
    assert params["opennow"] == "true"


def test_key_is_sent():
    params = build_text_search_params(SearchFilters(query="x"), "secret")
    assert params["key"] == "secret"


def test_blank_query_raises():
    with pytest.raises(MissingQueryError):
        build_text_search_params(SearchFilters(query="   ", lat=1, lng=2, open_now=True), "k")


def test_chain_and_late_night_filters_not_sent():
    f = SearchFilters(query="ramen", hide_chains=True, open_after="22:00")
    params = build_text_search_params(f, "k")
    assert set(params) == {"query", "key"}
