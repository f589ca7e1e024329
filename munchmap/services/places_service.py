# munchmap/services/places_service.py
"""
Google Places Text Search client.

One GET per search: no retry, no caching. A timeout is a failure like any
other transport error.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests

from munchmap.core.config import GOOGLE_TEXTSEARCH_URL, Settings
from munchmap.core.errors import (
    UpstreamHTTPError,
    UpstreamStatusError,
    UpstreamTransportError,
)

# https://developers.google.com/maps/documentation/places/web-service/search-text#PlacesSearchStatus
OK_STATUSES = {"OK", "ZERO_RESULTS"}


@dataclass
class TextSearchResult:
    status: Optional[str]
    results: List[dict] = field(default_factory=list)


class GooglePlacesClient:
    def __init__(
        self,
        base_url: str = GOOGLE_TEXTSEARCH_URL,
        timeout_s: float = 8.0,
    ):
        self.base_url = base_url
        self.timeout_s = timeout_s
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, config: Settings) -> "GooglePlacesClient":
        return cls(
            base_url=config.GOOGLE_PLACES_URL,
            timeout_s=config.SEARCH_TIMEOUT_MS / 1000.0,
        )

    def text_search(self, params: Dict[str, str]) -> TextSearchResult:
        self.logger.debug(
            "GooglePlacesClient.text_search: query=%r params=%s",
            params.get("query"),
            sorted(k for k in params if k != "key"),
        )
        try:
            resp = requests.get(
                self.base_url,
                params=params,
                headers={"Cache-Control": "no-cache"},
                timeout=self.timeout_s,
            )
        except requests.Timeout as e:
            raise UpstreamTransportError(
                f"Google Places timed out after {self.timeout_s:g}s"
            ) from e
        except requests.RequestException as e:
            raise UpstreamTransportError(f"Google Places request failed: {e}") from e

        if not resp.ok:
            raise UpstreamHTTPError(resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamTransportError("Google Places returned a non-JSON body") from e

        if not isinstance(data, dict):
            data = {}

        status = data.get("status")
        if status and status not in OK_STATUSES:
            raise UpstreamStatusError(status, data.get("error_message"))

        results = data.get("results")
        if not isinstance(results, list):
            results = []

        self.logger.debug(
            "GooglePlacesClient.text_search: status=%s got %d results",
            status,
            len(results),
        )
        return TextSearchResult(status=status, results=results)
