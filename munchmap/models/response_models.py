from pydantic import BaseModel
from typing import List, Optional


class LatLng(BaseModel):
    lat: float
    lng: float


class NormalizedPlace(BaseModel):
    place_id: Optional[str] = None
    name: Optional[str] = None
    formatted_address: Optional[str] = None
    rating: Optional[float] = None
    user_ratings_total: Optional[int] = None
    price_level: Optional[int] = None
    open_now: Optional[bool] = None
    location: Optional[LatLng] = None
    types: List[str] = []
    distance_km: Optional[float] = None


class SearchResponse(BaseModel):
    ok: bool = True
    query: str
    count: int
    results: List[NormalizedPlace]
    google_status: Optional[str] = None

    def to_json(self) -> dict:
        # Absent fields stay absent in the payload
        return self.model_dump(exclude_none=True)
