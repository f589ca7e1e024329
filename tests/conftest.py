import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from main import create_app  # noqa: E402
from munchmap.core.config import Settings  # noqa: E402


@pytest.fixture
def make_settings(monkeypatch):
    def _make(**env):
        for name in ("GOOGLE_MAPS_API_KEY", "API_BASE", "APP_ENV", "PRODUCTION_API_BASE"):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return Settings()

    return _make


@pytest.fixture
def app(make_settings):
    config = make_settings(GOOGLE_MAPS_API_KEY="test-key", API_BASE="http://backend.test")
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
