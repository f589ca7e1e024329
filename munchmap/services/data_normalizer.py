# munchmap/services/data_normalizer.py
from typing import Iterable, List, Optional, Tuple

from munchmap.models.response_models import LatLng, NormalizedPlace
from munchmap.services.geopy_service import distance_km


def _as_float(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_int(value) -> Optional[int]:
    f = _as_float(value)
    return int(f) if f is not None else None


def normalize_google_place(item: dict, origin: Optional[Tuple[float, float]] = None) -> NormalizedPlace:
    """
    Convert one raw Text Search record to NormalizedPlace.

    Fields the provider did not send stay None (dropped from JSON later);
    a missing rating is "unrated", not 0.
    """
    hours = item.get("opening_hours") or {}
    open_now = hours.get("open_now") if isinstance(hours, dict) else None

    geo = (item.get("geometry") or {}).get("location") or {}
    lat = _as_float(geo.get("lat"))
    lng = _as_float(geo.get("lng"))
    location = LatLng(lat=lat, lng=lng) if lat is not None and lng is not None else None

    types = item.get("types") or []
    if not isinstance(types, list):
        types = []

    dist = None
    if origin is not None and location is not None:
        dist = distance_km(origin[0], origin[1], location.lat, location.lng)

    return NormalizedPlace(
        place_id=item.get("place_id"),
        name=item.get("name"),
        formatted_address=item.get("formatted_address"),
        rating=_as_float(item.get("rating")),
        user_ratings_total=_as_int(item.get("user_ratings_total")),
        price_level=_as_int(item.get("price_level")),
        open_now=open_now if isinstance(open_now, bool) else None,
        location=location,
        types=[str(t) for t in types],
        distance_km=round(dist, 3) if dist is not None else None,
    )


def normalize_results(items: Iterable[dict], origin: Optional[Tuple[float, float]] = None) -> List[NormalizedPlace]:
    # provider order, no dedupe
    return [normalize_google_place(it, origin) for it in items if isinstance(it, dict)]
