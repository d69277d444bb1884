"""
Configuration settings for Interview Analytics.

Uses Pydantic Settings to load environment variables (and an optional `.env`
file) for logging and for the reference date used to classify interviews as
completed or upcoming.
"""
from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Analysis
    reference_date: Optional[date] = Field(None, alias="REFERENCE_DATE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def resolve_today(self, override: Optional[date] = None) -> date:
        """
        Pick the reference "today": explicit override, then REFERENCE_DATE,
        then the wall clock.
        """
        if override is not None:
            return override
        if self.reference_date is not None:
            return self.reference_date
        return date.today()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
