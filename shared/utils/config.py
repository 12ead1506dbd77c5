"""
Configuration management using pydantic-settings.
Loads configuration from environment variables and .env file.
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from ORM_IDGEN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ORM_IDGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    DEBUG: bool = False
    LOG_LEVEL: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FILE: str | None = None  # Optional: also write logs to this file

    # Generator provider defaults
    GENERATOR_PROVIDER_EXCLUSIONS: str | None = None  # Used when the host passes no exclusions
    STRING_MIN_LENGTH: int = 3
    STRING_MAX_LENGTH: int = 10


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()


# Global settings instance
settings = get_settings()
