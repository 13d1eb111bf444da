"""Application settings loaded from the environment.

Values are read from process environment variables. Entry points load a
``.env`` file from the working directory before this module is used.
"""

import os
from functools import lru_cache

DEFAULT_ENGINE = "google"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings:
    """Application configuration loaded from environment variables."""

    @property
    def serp_api_key(self) -> str:
        """SerpAPI key. Empty when unset."""
        return os.getenv("SERP_API_KEY", "").strip()

    @property
    def serp_engine(self) -> str:
        """SerpAPI engine selector."""
        return os.getenv("SERP_ENGINE", DEFAULT_ENGINE).strip() or DEFAULT_ENGINE

    @property
    def http_timeout_seconds(self) -> float:
        """HTTP client timeout in seconds."""
        return float(os.getenv("HTTP_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))

    @property
    def log_level(self) -> str:
        """Logging level name, INFO when unset or unrecognised."""
        level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        return level if level in VALID_LOG_LEVELS else DEFAULT_LOG_LEVEL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
