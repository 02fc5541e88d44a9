"""Environment-driven settings."""

import os
from typing import List

DEFAULT_DATABASE_URL = "postgresql+psycopg2:///biztime"


def get_database_url() -> str:
    """Database URL from DATABASE_URL, else the local biztime database.

    With BIZTIME_ENV=test the default points at biztime_test instead.
    """
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url
    if os.getenv("BIZTIME_ENV") == "test":
        return f"{DEFAULT_DATABASE_URL}_test"
    return DEFAULT_DATABASE_URL


def get_cors_origins() -> List[str]:
    """Comma-separated CORS_ORIGINS, defaulting to the local frontend."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    return [origin.strip() for origin in origins.split(",") if origin.strip()]
