# munchmap/core/errors.py

"""
Error taxonomy shared by the search endpoint, the page and the proxy.

Every error knows the HTTP status it maps to, so handlers can turn it into
the `{ok: false, error}` envelope without a lookup table.
"""

from typing import Optional


class MunchmapError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingQueryError(MunchmapError):
    """Blank search text. Raised before any network call."""

    status_code = 400

    def __init__(self, message: str = "Missing query"):
        super().__init__(message)


class ConfigurationError(MunchmapError):
    status_code = 500


class UpstreamError(MunchmapError):
    status_code = 502


class UpstreamTransportError(UpstreamError):
    """Timeout, connection failure or an unreadable body."""


class UpstreamHTTPError(UpstreamError):
    def __init__(self, status: int, body: str):
        super().__init__(f"Google Places HTTP {status}: {body}")
        self.status = status
        self.body = body


class UpstreamStatusError(UpstreamError):
    def __init__(self, provider_status: str, provider_message: Optional[str] = None):
        super().__init__(
            f"Google Places status {provider_status}: {provider_message or 'No message'}"
        )
        self.provider_status = provider_status
        self.provider_message = provider_message
