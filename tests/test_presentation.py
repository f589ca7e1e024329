from munchmap.services.presentation import (
    category_chips,
    filters_from_form,
    format_distance,
    format_rating,
    maps_details_url,
    maps_search_url,
    price_symbols,
    to_meters,
    ui_state,
)


def test_to_meters():
    assert to_meters(5, "mi") == 8047
    assert to_meters(5, "km") == 5000


def test_fresh_page_defaults():
    state = ui_state({})
    assert state["location"] == "Detroit, MI"
    assert state["unit"] == "mi"
    assert state["radius"] == 5
    assert state["no_chains"] is True
    assert state["open_now"] is False


def test_radius_slider_is_bounded_by_unit():
    assert ui_state({"unit": "mi", "radius": "90"})["radius"] == 25
    assert ui_state({"unit": "km", "radius": "1"})["radius"] == 2
    assert ui_state({"unit": "parsec", "radius": "x"})["unit"] == "mi"


def test_budget_chip_sets_low_price_band():
    f = filters_from_form({"query": "tacos", "budget": "true"})
    assert (f.price_min, f.price_max) == ("0", "2")


def test_fancy_chip_sets_high_price_band():
    f = filters_from_form({"query": "tacos", "fancy": "on"})
    assert (f.price_min, f.price_max) == ("3", "4")


def test_budget_and_fancy_cancel_out():
    f = filters_from_form({"query": "tacos", "budget": "true", "fancy": "true"})
    assert f.price_min is None and f.price_max is None


def test_chips_map_to_filters():
    f = filters_from_form(
        {"query": "tacos", "vegan": "true", "late_night": "true", "no_chains": "true", "open_now": "true"}
    )
    assert f.diets == "Vegan"
    assert f.open_after == "22:00"
    assert f.hide_chains is True
    assert f.open_now is True


def test_coordinates_replace_location_text():
    f = filters_from_form(
        {"query": "tacos", "lat": "42.33", "lng": "-83.04", "location": "Detroit, MI", "radius": "10", "unit": "km"}
    )
    assert f.has_coordinates
    assert f.location is None
    assert f.radius_m == 10000


def test_location_text_without_coordinates():
    f = filters_from_form({"query": "tacos", "location": "Ann Arbor, MI"})
    assert not f.has_coordinates
    assert f.location == "Ann Arbor, MI"
    assert f.radius_m is None


def test_price_symbols():
    assert price_symbols(3) == "$$$"
    assert price_symbols(0) == "—"
    assert price_symbols(None) == ""


def test_format_rating():
    assert format_rating(4.56) == "4.6"
    assert format_rating(None) == "—"


def test_format_distance():
    assert format_distance(5.0, "mi") == "3.1 mi"
    assert format_distance(5.0, "km") == "5.0 km"
    assert format_distance(None) == ""


def test_category_chips_skip_generic_tags():
    types = ["point_of_interest", "meal_takeaway", "restaurant", "establishment", "bar", "cafe"]
    assert category_chips(types) == ["Meal takeaway", "Restaurant", "Bar"]
    assert category_chips(None) == []


def test_maps_links():
    assert maps_search_url("ChIJ/x y") == "https://www.google.com/maps/search/?api=1&query_place_id=ChIJ%2Fx%20y"
    assert maps_details_url("p1") == "https://www.google.com/maps/place/?q=place_id:p1"
