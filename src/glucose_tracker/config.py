"""Application configuration."""

import os
from datetime import datetime, tzinfo
from typing import Literal
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: Literal["memory", "file", "supabase"] = "file"
    storage_dir: str = "var"
    storage_key: str = "SavedMealEntries"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "meal_blobs"
    timezone: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_timezone(name: str | None) -> tzinfo:
    """Return the configured zone, or the system local zone when unset."""
    if name is None or not name.strip():
        local = datetime.now().astimezone().tzinfo
        return local if local is not None else ZoneInfo("UTC")
    return ZoneInfo(name.strip())
