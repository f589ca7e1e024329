import logging

from flask import Flask, jsonify
from flask_cors import CORS

from munchmap.api.routes import register_api
from munchmap.core.config import Settings, settings
from munchmap.services import presentation

logger = logging.getLogger(__name__)


def create_app(config: Settings = None):
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(
        __name__,
        template_folder="munchmap/templates",
        static_folder="munchmap/static",
    )
    app.config["SECRET_KEY"] = config.SECRET_KEY
    app.config["SETTINGS"] = config

    if not config.GOOGLE_MAPS_API_KEY:
        logger.warning("GOOGLE_MAPS_API_KEY is not set; /api/search will fail until it is.")

    # Only the search endpoint is ours; proxied responses keep the backend's headers
    CORS(
        app,
        resources={r"/api/search": {"origins": "*"}},
        supports_credentials=False,
    )

    app.add_template_filter(presentation.price_symbols, "price_symbols")
    app.add_template_filter(presentation.format_rating, "format_rating")
    app.add_template_filter(presentation.format_distance, "format_distance")
    app.add_template_filter(presentation.category_chips, "category_chips")
    app.add_template_filter(presentation.maps_search_url, "maps_search_url")
    app.add_template_filter(presentation.maps_details_url, "maps_details_url")

    register_api(app)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=3000, debug=not settings.is_production)
