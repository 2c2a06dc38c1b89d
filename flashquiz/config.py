"""
Application settings, loaded from environment variables or a .env file.
"""
import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Defines flashquiz settings. Every field can be overridden with a
    FLASHQUIZ_-prefixed environment variable (e.g. FLASHQUIZ_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_prefix="FLASHQUIZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Diagnostics ---
    # Level for the flashquiz logger. Diagnostics go to stderr so they never
    # mix with the console protocol on stdout.
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    # --- Quiz ---
    # Seed for card selection; unset means system randomness.
    random_seed: Optional[int] = None

    # --- Files ---
    file_encoding: str = Field(default="utf-8", min_length=1)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: '{v}'.")
        return level


def get_settings(**overrides) -> Settings:
    """
    Load settings from the current environment.

    Keyword arguments take precedence over environment variables and .env.
    """
    return Settings(**overrides)
