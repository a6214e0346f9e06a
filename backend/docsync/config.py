from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "DocSync Field API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Local offline store (one SQLite file per device)
    database_url: str = "sqlite:///data/docsync.db"

    # Reference central ingest database behind POST /api/v1/documents/sync
    central_database_url: str = "sqlite:///data/central.db"

    # Remote sync endpoint
    sync_endpoint_url: str = "http://localhost:8030/api/v1/documents/sync"
    sync_timeout_seconds: float = 60.0

    # Document list
    page_size: int = 10

    # Image compression policy
    image_max_dimension: int = 2560
    image_quality: int = 85
    image_format: str = "WEBP"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_sync: str = "INFO"             # SyncEngine batch progress

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
