"""
Service configuration loaded from the environment.
"""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables
load_dotenv()


class Settings(BaseModel):
    """Runtime settings for the counter service."""

    host: str = "127.0.0.1"
    port: int = 8080
    database_url: str = "sqlite:///db/count.db"
    assets_path: str = "assets/theme"
    default_theme: str = "moebooru"
    api_auth_token: Optional[str] = None  # Required for /api/set
    log_level: str = "INFO"
    debug: bool = False


def _database_url() -> str:
    """
    Database URL from ``DATABASE_URL``, falling back to a SQLite file at
    ``DB_PATH`` for deployments configured with a plain path.
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    db_path = os.getenv("DB_PATH", "db/count.db")
    return f"sqlite:///{db_path}"


@lru_cache
def get_settings() -> Settings:
    """
    Build settings from environment variables.

    Cached so every request sees the same instance; tests replace it
    through ``app.dependency_overrides``.
    """
    return Settings(
        host=os.getenv("BIND_ADDRESS", "127.0.0.1"),
        port=int(os.getenv("BIND_PORT", "8080")),
        database_url=_database_url(),
        assets_path=os.getenv("ASSETS_PATH", "assets/theme"),
        default_theme=os.getenv("DEFAULT_THEME", "moebooru"),
        api_auth_token=os.getenv("API_AUTH_TOKEN") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        debug=os.getenv("DEBUG", "false").lower() == "true",
    )
