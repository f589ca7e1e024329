# munchmap/api/routes.py

from munchmap.api.endpoints.pages import pages_bp
from munchmap.api.endpoints.proxy import proxy_bp
from munchmap.api.endpoints.search import bp as search_bp


def register_api(app):
    # /api/search is matched before the catch-all proxy rule
    app.register_blueprint(search_bp, url_prefix="/api")
    app.register_blueprint(proxy_bp, url_prefix="/api")
    app.register_blueprint(pages_bp)
