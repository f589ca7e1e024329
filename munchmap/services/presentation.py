# munchmap/services/presentation.py

"""
presentation.py
Glue between the search page and the pipeline:
- UI state (chips, unit, radius slider, location box) -> SearchFilters
- small formatters used by the result cards
"""

from typing import Dict, List, Mapping, Optional
from urllib.parse import quote

from munchmap.models.request_models import SearchFilters
from munchmap.services.geopy_service import km_to_unit

DEFAULT_LOCATION_TEXT = "Detroit, MI"
METERS_PER_UNIT = {"mi": 1609.34, "km": 1000.0}
RADIUS_RANGE = {"mi": (1, 25), "km": (2, 40)}

LATE_NIGHT_AFTER = "22:00"
VEGAN_DIET = "Vegan"

# Google tags every place with these; they say nothing on a card
GENERIC_TYPES = {"point_of_interest", "establishment", "food", "store"}

MAPS_SEARCH_URL = "https://www.google.com/maps/search/"
MAPS_PLACE_URL = "https://www.google.com/maps/place/"


def _flag(form: Mapping[str, str], name: str) -> bool:
    return (form.get(name) or "").lower() in ("1", "true", "on", "yes")


def to_meters(value: float, unit: str) -> int:
    return int(round(value * METERS_PER_UNIT.get(unit, METERS_PER_UNIT["mi"])))


def normalize_unit(unit: Optional[str]) -> str:
    return unit if unit in METERS_PER_UNIT else "mi"


def ui_state(form: Mapping[str, str]) -> Dict[str, object]:
    """Current form state, with defaults, for re-rendering the page."""
    unit = normalize_unit(form.get("unit"))
    lo, hi = RADIUS_RANGE[unit]
    try:
        radius_value = int(float(form.get("radius") or 5))
    except (ValueError, OverflowError):
        radius_value = 5
    radius_value = max(lo, min(radius_value, hi))

    location = form.get("location")
    return {
        "query": (form.get("query") or "").strip(),
        "location": DEFAULT_LOCATION_TEXT if location is None else location.strip(),
        "lat": (form.get("lat") or "").strip(),
        "lng": (form.get("lng") or "").strip(),
        "unit": unit,
        "radius": radius_value,
        "radius_min": lo,
        "radius_max": hi,
        "open_now": _flag(form, "open_now"),
        # default on, like the chip
        "no_chains": _flag(form, "no_chains") if "query" in form else True,
        "late_night": _flag(form, "late_night"),
        "vegan": _flag(form, "vegan"),
        "budget": _flag(form, "budget"),
        "fancy": _flag(form, "fancy"),
    }


def filters_from_form(form: Mapping[str, str]) -> SearchFilters:
    state = ui_state(form)

    price_min = price_max = None
    # both or neither selected -> all price levels
    if state["budget"] and not state["fancy"]:
        price_min, price_max = "0", "2"
    if state["fancy"] and not state["budget"]:
        price_min, price_max = "3", "4"

    payload = {
        "query": state["query"],
        "open_now": state["open_now"],
        "hide_chains": state["no_chains"],
        "open_after": LATE_NIGHT_AFTER if state["late_night"] else None,
        "diets": VEGAN_DIET if state["vegan"] else None,
        "price_min": price_min,
        "price_max": price_max,
    }

    if state["lat"] and state["lng"]:
        payload["lat"] = state["lat"]
        payload["lng"] = state["lng"]
        payload["radius_m"] = to_meters(state["radius"], state["unit"])
    else:
        payload["location"] = state["location"]

    return SearchFilters(**payload)


# ---------------------------------------------
# Card formatters
# ---------------------------------------------
def price_symbols(level: Optional[int]) -> str:
    if level is None:
        return ""
    return "$" * level or "—"


def format_rating(rating: Optional[float]) -> str:
    return f"{rating:.1f}" if rating else "—"


def format_distance(km: Optional[float], unit: str = "mi") -> str:
    if km is None:
        return ""
    return f"{km_to_unit(km, unit):.1f} {normalize_unit(unit)}"


def category_chips(types: Optional[List[str]], limit: int = 3) -> List[str]:
    chips = []
    for t in types or []:
        if t in GENERIC_TYPES:
            continue
        chips.append(t.replace("_", " ").capitalize())
        if len(chips) >= limit:
            break
    return chips


def maps_search_url(place_id: str) -> str:
    return f"{MAPS_SEARCH_URL}?api=1&query_place_id={quote(place_id, safe='')}"


def maps_details_url(place_id: str) -> str:
    return f"{MAPS_PLACE_URL}?q=place_id:{quote(place_id, safe='')}"
