# munchmap/models/request_models.py
from pydantic import BaseModel, field_validator
from typing import Optional


class SearchFilters(BaseModel):
    query: str = ""

    # Coordinates win over the free-text location when both are set
    lat: Optional[float] = None
    lng: Optional[float] = None
    location: Optional[str] = None
    radius_m: Optional[float] = None

    open_now: bool = False
    # Raw "0".."4"; anything else means "no price filter"
    price_min: Optional[str] = None
    price_max: Optional[str] = None
    diets: Optional[str] = None

    # Computed by the page, not sent upstream
    hide_chains: bool = False
    open_after: Optional[str] = None

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _blank_coordinate(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("radius_m", mode="before")
    @classmethod
    def _lenient_radius(cls, v):
        # Unparseable radius falls back to the default instead of rejecting the search
        if v is None or v == "":
            return None
        try:
            return float(v)
        except (TypeError, ValueError):
            return None

    @field_validator("query", "location", "diets", mode="before")
    @classmethod
    def _strip_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None
