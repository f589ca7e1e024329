# munchmap/services/query_builder.py

"""
Turns SearchFilters into Google Places Text Search parameters.

Text Search only takes one free-text `query`, so everything that is not a
native parameter (diet keyword, typed location) is folded into that text:

    "tacos" + diets="Vegan" + location="Detroit, MI"
        -> query="tacos Vegan Detroit, MI restaurant"

Coordinates are the exception: they go out as `location` + `radius`, and the
typed location is dropped so the two never contradict each other.
"""

import logging
import math
import re
from typing import Dict, Optional

from munchmap.core.errors import MissingQueryError
from munchmap.models.request_models import SearchFilters

logger = logging.getLogger(__name__)

MIN_RADIUS_M = 1000
MAX_RADIUS_M = 50_000   # Text Search ignores anything wider
DEFAULT_RADIUS_M = 5000
BIAS_TERM = "restaurant"

_PRICE_RE = re.compile(r"^[0-4]$")
_WS_RE = re.compile(r"\s+")


def clamp_radius(radius_m: Optional[float], default: int = DEFAULT_RADIUS_M) -> int:
    """Missing, zero or NaN radius -> default, then clamp to [1000, 50000]."""
    if not radius_m or math.isnan(radius_m):
        radius_m = default
    return int(round(max(MIN_RADIUS_M, min(radius_m, MAX_RADIUS_M))))


def valid_price(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value if _PRICE_RE.match(value) else None


def build_query_text(filters: SearchFilters) -> str:
    parts = [filters.query]
    if filters.diets:
        parts.append(filters.diets)
    if not filters.has_coordinates and filters.location:
        parts.append(filters.location)
    parts.append(BIAS_TERM)
    return _WS_RE.sub(" ", " ".join(parts)).strip()


def build_text_search_params(
    filters: SearchFilters,
    api_key: str,
    default_radius_m: int = DEFAULT_RADIUS_M,
) -> Dict[str, str]:
    if not (filters.query or "").strip():
        raise MissingQueryError()

    params: Dict[str, str] = {
        "query": build_query_text(filters),
        "key": api_key,
    }

    if filters.has_coordinates:
        params["location"] = f"{filters.lat},{filters.lng}"
        params["radius"] = str(clamp_radius(filters.radius_m, default_radius_m))

    price_min = valid_price(filters.price_min)
    price_max = valid_price(filters.price_max)
    if price_min is not None:
        params["minprice"] = price_min
    if price_max is not None:
        params["maxprice"] = price_max

    if filters.open_now:
        params["opennow"] = "true"

    # TODO: send hide_chains / open_after upstream once product decides how
    # chains and late-night hours should be expressed to Text Search.
    if filters.hide_chains or filters.open_after:
        logger.debug(
            "Not forwarded upstream: hide_chains=%s open_after=%s",
            filters.hide_chains,
            filters.open_after,
        )

    return params
