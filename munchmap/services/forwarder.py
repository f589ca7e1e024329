# munchmap/services/forwarder.py

"""
Generic /api/* forwarder.

Only a handful of headers cross the proxy in either direction; in particular
`host` and `origin` never leave, so the backend cannot tell it is behind us.
Bodies are buffered, not streamed.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional
from urllib.parse import quote, urlsplit

import requests

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"
BODY_METHODS = {"POST", "PUT"}
FORWARDED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
RESPONSE_HEADER_ALLOWLIST = ("content-type", "cache-control", "x-chat-model", "x-embed-model")

# pchar punctuation left as is when re-escaping a decoded path
PATH_SAFE = "/:@!$&'()*+,;=-._~"
# the raw query is already escaped, so "%" stays
QUERY_SAFE = PATH_SAFE + "%?[]"


@dataclass
class ForwardEnvelope:
    url: str
    method: str
    headers: Dict[str, str]
    body: Optional[bytes] = None

    # filled in once the backend answers
    status: Optional[int] = None
    response_body: bytes = b""
    response_headers: Dict[str, str] = field(default_factory=dict)


def raw_request_path(environ: Mapping[str, str], decoded_path: str) -> str:
    """
    The request path as the client sent it, still percent-encoded.

    WSGI only guarantees a decoded PATH_INFO, which turns %3F into "?" and
    %2F into "/". Most servers also pass the raw request line, so prefer
    that; otherwise re-escape the decoded path.
    """
    raw = environ.get("RAW_URI") or environ.get("REQUEST_URI")
    if raw:
        if not raw.startswith("/"):
            # absolute-form request target
            raw = urlsplit(raw).path or "/"
        return raw.split("?", 1)[0]
    return quote(decoded_path, safe=PATH_SAFE)


def raw_query_string(query_string: bytes) -> str:
    """Query bytes as ASCII; bytes that are not URL-safe become %XX of the same byte."""
    return quote(query_string, safe=QUERY_SAFE)


def build_target_url(api_base: str, path: str, query_string: str = "", prefix: str = API_PREFIX) -> str:
    """/api/widgets/7 + "x=1" -> {api_base}/api/widgets/7?x=1"""
    rest = path[len(prefix):] if path.startswith(prefix) else path.lstrip("/")
    target = f"{api_base.rstrip('/')}{prefix}{rest}"
    if query_string:
        target = f"{target}?{query_string}"
    return target


def build_envelope(
    api_base: str,
    method: str,
    path: str,
    query_string: str,
    incoming_headers: Mapping[str, str],
    body: Optional[bytes] = None,
) -> ForwardEnvelope:
    method = method.upper()
    headers = {"accept": incoming_headers.get("accept") or "application/json"}

    if method in BODY_METHODS:
        headers["content-type"] = incoming_headers.get("content-type") or "application/json"
        body = body or b""
    else:
        body = None

    return ForwardEnvelope(
        url=build_target_url(api_base, path, query_string),
        method=method,
        headers=headers,
        body=body,
    )


def forward(envelope: ForwardEnvelope) -> ForwardEnvelope:
    """
    Send the envelope and copy the answer back into it.

    requests.RequestException propagates; the caller turns it into a single
    error response.
    """
    logger.debug("forward %s %s", envelope.method, envelope.url)

    resp = requests.request(
        envelope.method,
        envelope.url,
        headers=envelope.headers,
        data=envelope.body,
    )

    envelope.status = resp.status_code
    envelope.response_body = resp.content
    envelope.response_headers = {
        k: resp.headers[k] for k in RESPONSE_HEADER_ALLOWLIST if resp.headers.get(k)
    }
    return envelope
