from geopy.distance import geodesic

KM_TO_MI = 0.621371


def distance_km(lat1, lon1, lat2, lon2):
    """Geodesic distance in kilometres, None when any coordinate is missing."""
    if None in (lat1, lon1, lat2, lon2):
        return None

    try:
        return geodesic((float(lat1), float(lon1)), (float(lat2), float(lon2))).km
    except ValueError:
        # out-of-range latitude
        return None


def km_to_unit(km: float, unit: str = "mi") -> float:
    return km * KM_TO_MI if unit == "mi" else km
