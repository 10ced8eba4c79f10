"""
Client settings - pydantic-settings configuration.

This module defines co-registration client configuration using
pydantic-settings for environment variable loading with validation and
defaults. Variables are prefixed with ``COREG_``.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="COREG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Zip/city lookup
    zip_city_min_term_length: int = Field(3, ge=1)  # Documented minimum search term length
    enforce_zip_city_term_length: bool = False  # Reject short terms before dispatch


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
