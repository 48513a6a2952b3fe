"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEMO_USER_ID = "00000000-0000-0000-0000-000000000001"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: Literal["local", "supabase"] = "local"
    local_storage_dir: Path = Path(".diet_tracker")
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_user_id: str = DEMO_USER_ID
    timezone: str = "UTC"
    chart_window_days: int = 30
    chart_label_every: int = 5
    log_level: str = "INFO"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
