# munchmap/api/endpoints/search.py

import logging

from flask import Blueprint, current_app, jsonify, request

from munchmap.core.errors import MissingQueryError, MunchmapError
from munchmap.models.request_models import SearchFilters
from munchmap.services.search_pipeline import run_search

logger = logging.getLogger(__name__)

bp = Blueprint("search", __name__)


def _error(message, status):
    return jsonify({"ok": False, "error": message}), status


def filters_from_args(args) -> SearchFilters:
    """Query-string params -> SearchFilters. Raises on non-numeric lat/lng."""
    return SearchFilters(
        query=args.get("query") or args.get("q") or "",
        lat=args.get("lat"),
        lng=args.get("lng"),
        radius_m=args.get("radius_m"),
        open_now=(args.get("open_now") or "false").lower() == "true",
        price_min=args.get("price_min"),
        price_max=args.get("price_max"),
        diets=args.get("diets"),
        location=args.get("location"),
        hide_chains=(args.get("hide_chains") or "false").lower() == "true",
        open_after=args.get("open_after"),
    )


@bp.route("/search", methods=["GET"])
def search():
    # Blank query is rejected before anything else is looked at
    query = (request.args.get("query") or request.args.get("q") or "").strip()
    if not query:
        return _error(MissingQueryError().message, 400)

    try:
        filters = filters_from_args(request.args)
    except Exception as e:
        return jsonify({"ok": False, "error": "Invalid request", "details": str(e)}), 400

    try:
        result = run_search(filters, current_app.config["SETTINGS"])
    except MunchmapError as e:
        logger.warning("search failed (%s): %s", e.status_code, e.message)
        return _error(e.message, e.status_code)
    except Exception as e:
        logger.exception("search crashed")
        return _error(str(e) or "Unknown error", 500)

    return jsonify(result.to_json()), 200
