# munchmap/api/endpoints/pages.py

import logging

from flask import Blueprint, current_app, render_template, request

from munchmap.core.errors import MunchmapError
from munchmap.services.presentation import filters_from_form, ui_state
from munchmap.services.search_pipeline import run_search

logger = logging.getLogger(__name__)

pages_bp = Blueprint("pages", __name__)


@pages_bp.route("/", methods=["GET"])
def index():
    state = ui_state(request.args)
    partial = request.args.get("partial") == "1"

    results, error, searched = [], None, False

    if state["query"]:
        searched = True
        try:
            filters = filters_from_form(request.args)
            results = run_search(filters, current_app.config["SETTINGS"]).results
        except MunchmapError as e:
            error = e.message
        except Exception as e:
            logger.exception("page search crashed")
            error = str(e) or "Failed to search"

    template = "_results.html" if partial else "index.html"
    return render_template(
        template,
        state=state,
        results=results,
        error=error,
        searched=searched,
    )
