"""
Application settings.

Read from ``DARKSKY_*`` environment variables or a ``.env`` file. Only the
CLI reads settings; the library takes everything as arguments.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from darksky_api.client import API_BASE
from darksky_api.schemas import Language, Units
from darksky_api.services.http import DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Settings for the ``darksky-api`` command."""

    model_config = SettingsConfigDict(env_prefix="DARKSKY_", env_file=".env", extra="ignore")

    app_name: str = "darksky-api"
    debug: bool = False
    log_level: str = "WARNING"

    api_key: str | None = Field(default=None, description="Dark Sky developer API token")
    base_url: str = API_BASE
    timeout: float = DEFAULT_TIMEOUT

    units: Units = Units.AUTO
    lang: Language = Language.ENGLISH

    # London, Ontario
    lat: float = Field(default=42.984, ge=-90, le=90)
    lon: float = Field(default=-81.245, ge=-180, le=180)


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
