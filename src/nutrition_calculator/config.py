"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    debug: bool = False
    portion_store_backend: Literal["file", "supabase"] = "file"
    portion_store_path: Path = Path(".nutri_calc_state.json")
    portion_store_key: str = "nutriCalcState:v1"
    supabase_url: str | None = None
    supabase_service_key: str | None = None

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
