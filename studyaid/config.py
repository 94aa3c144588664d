"""
Centralized configuration management for studyaid.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_MINUTES_INPUT,
    DEFAULT_SECONDS_INPUT,
    DEFAULT_TICK_INTERVAL_SECONDS,
)


class Settings(BaseSettings):
    """
    Defines application settings, loaded from environment variables or .env files.

    Every field can be overridden with a STUDYAID_-prefixed variable,
    e.g. STUDYAID_TICK_INTERVAL_SECONDS=0.5.
    """

    model_config = SettingsConfigDict(
        env_prefix="STUDYAID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Timer ---
    tick_interval_seconds: float = Field(
        default=DEFAULT_TICK_INTERVAL_SECONDS, ge=0
    )
    # Kept as text: the timer command parses them leniently.
    default_minutes: str = DEFAULT_MINUTES_INPUT
    default_seconds: str = DEFAULT_SECONDS_INPUT

    # --- Deck ---
    load_sample_cards: bool = True

    # --- Logging ---
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
