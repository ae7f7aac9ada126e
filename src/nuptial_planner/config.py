"""
Application settings.

Values come from environment variables prefixed ``NUPTIAL_`` (or a local
``.env`` file), e.g. ``NUPTIAL_LAT=45.5 NUPTIAL_DEBUG=true``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the forecaster and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="NUPTIAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "nuptial-planner"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Default location (Portland, OR)
    lat: float = Field(default=45.5, ge=-90, le=90)
    lon: float = Field(default=-122.6, ge=-180, le=180)

    default_days: int = Field(default=7, ge=1)
    max_forecast_days: int = Field(default=16, ge=1)
    lookback_hours: int = Field(default=72, ge=0)

    data_dir: Path = Path("data")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings (cached after first call)."""
    return Settings()
