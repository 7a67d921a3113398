"""Centralised configuration handling for RenewalVault."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CURRENCY = "€"
DEFAULT_TIMEZONE = "UTC"


class Settings(BaseSettings):
    """Engine settings sourced from ``RENEWALVAULT_*`` environment variables."""

    default_currency: str = Field(default=DEFAULT_CURRENCY, min_length=1)
    timezone: str = DEFAULT_TIMEZONE
    reminder_hour: int = Field(default=9, ge=0, le=23)
    reminder_minute: int = Field(default=0, ge=0, le=59)
    renewal_interval_days: int = Field(default=365, ge=1)

    model_config = SettingsConfigDict(env_prefix="RENEWALVAULT_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
