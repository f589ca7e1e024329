import logging

import requests
from flask import Blueprint, Response, current_app, jsonify, request

from munchmap.core.errors import ConfigurationError
from munchmap.services.forwarder import (
    FORWARDED_METHODS,
    build_envelope,
    forward,
    raw_query_string,
    raw_request_path,
)

logger = logging.getLogger(__name__)

proxy_bp = Blueprint("proxy", __name__)


@proxy_bp.route("/<path:path>", methods=FORWARDED_METHODS)
def proxy(path):
    try:
        api_base = current_app.config["SETTINGS"].api_base
    except ConfigurationError as e:
        return jsonify({"ok": False, "error": e.message}), e.status_code

    body = request.get_data() if request.method in ("POST", "PUT") else None

    envelope = build_envelope(
        api_base=api_base,
        method=request.method,
        path=raw_request_path(request.environ, request.path),
        query_string=raw_query_string(request.query_string),
        incoming_headers=request.headers,
        body=body,
    )

    try:
        forward(envelope)
    except requests.RequestException as e:
        logger.warning("proxy %s %s failed: %s", envelope.method, envelope.url, e)
        return jsonify({"ok": False, "error": f"Backend unreachable: {e}"}), 502

    resp = Response(
        envelope.response_body,
        status=envelope.status,
        headers=envelope.response_headers,
    )
    # Flask would otherwise invent text/html
    if "content-type" not in envelope.response_headers:
        resp.headers.pop("Content-Type", None)
    return resp
