import os
from dotenv import load_dotenv

from munchmap.core.errors import ConfigurationError

load_dotenv()

DEV_API_BASE = "http://127.0.0.1:8000"
GOOGLE_TEXTSEARCH_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"


class Settings:
    def __init__(self) -> None:
        self.APP_ENV = os.getenv("APP_ENV", "development").lower()
        self.GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY")
        self.GOOGLE_PLACES_URL = os.getenv("GOOGLE_PLACES_URL", GOOGLE_TEXTSEARCH_URL)
        self.API_BASE = os.getenv("API_BASE")
        self.PRODUCTION_API_BASE = os.getenv("PRODUCTION_API_BASE")
        self.SECRET_KEY = os.getenv("SECRET_KEY", "secret")
        self.SEARCH_TIMEOUT_MS = int(os.getenv("SEARCH_TIMEOUT_MS", 8000))
        self.DEFAULT_RADIUS_METERS = int(os.getenv("DEFAULT_RADIUS_METERS", 5000))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    def require_api_key(self) -> str:
        """Return the Places key or fail loudly; an unset key must never look like zero results."""
        if not self.GOOGLE_MAPS_API_KEY:
            raise ConfigurationError(
                "GOOGLE_MAPS_API_KEY is not set. Add it to the environment or to .env."
            )
        return self.GOOGLE_MAPS_API_KEY

    @property
    def api_base(self) -> str:
        """
        Backend origin for the /api proxy.

        API_BASE overrides everything; otherwise development talks to the
        local backend and production to PRODUCTION_API_BASE.
        """
        base = self.API_BASE
        if not base:
            if self.is_production:
                base = self.PRODUCTION_API_BASE
                if not base:
                    raise ConfigurationError(
                        "PRODUCTION_API_BASE is not set and APP_ENV=production. "
                        "Set it (or API_BASE) to the backend origin."
                    )
            else:
                base = DEV_API_BASE
        return base.rstrip("/")


settings = Settings()
