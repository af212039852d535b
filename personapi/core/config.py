"""
Configuration helpers for the Person API.

Settings are read once from environment variables so that routers, services
and the database layer do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_DATABASE_URL = "sqlite:///./personapi.db"
DEFAULT_BIRTH_DATE_FORMAT = "%d-%m-%Y"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    log_file: str | None
    birth_date_format: str
    auto_create_schema: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL).strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
        birth_date_format=os.getenv("BIRTH_DATE_FORMAT") or DEFAULT_BIRTH_DATE_FORMAT,
        auto_create_schema=_bool(os.getenv("AUTO_CREATE_SCHEMA"), True),
    )
