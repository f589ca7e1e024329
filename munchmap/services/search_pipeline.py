# munchmap/services/search_pipeline.py
import logging
from typing import Optional

from munchmap.core.config import Settings
from munchmap.core.errors import MissingQueryError
from munchmap.models.request_models import SearchFilters
from munchmap.models.response_models import SearchResponse
from munchmap.services.data_normalizer import normalize_results
from munchmap.services.places_service import GooglePlacesClient
from munchmap.services.query_builder import build_text_search_params

logger = logging.getLogger(__name__)


def run_search(
    filters: SearchFilters,
    config: Settings,
    client: Optional[GooglePlacesClient] = None,
) -> SearchResponse:
    """
    filters -> params -> one Text Search call -> NormalizedPlace list.

    Raises MissingQueryError before touching the key or the network, then
    ConfigurationError for a missing key, then any UpstreamError.
    """
    if not filters.query:
        raise MissingQueryError()

    api_key = config.require_api_key()
    params = build_text_search_params(filters, api_key, config.DEFAULT_RADIUS_METERS)

    client = client or GooglePlacesClient.from_settings(config)
    raw = client.text_search(params)

    origin = (filters.lat, filters.lng) if filters.has_coordinates else None
    places = normalize_results(raw.results, origin=origin)

    logger.info(
        "search query=%r coords=%s status=%s count=%d",
        filters.query,
        filters.has_coordinates,
        raw.status,
        len(places),
    )

    return SearchResponse(
        ok=True,
        query=filters.query,
        count=len(places),
        results=places,
        google_status=raw.status,
    )
