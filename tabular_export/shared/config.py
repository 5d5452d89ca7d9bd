"""
Tabular Export - Shared Configuration Module

Centralized settings management using Pydantic Settings.
Loads configuration from environment variables and .env files.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tabular_export.shared.constants import (
    DEFAULT_COMPANY_NAME,
    DEFAULT_OUTPUT_ENCODING,
    DEFAULT_TIMESTAMP_FORMAT,
)


class AppSettings(BaseSettings):
    """Core application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "tabular-export"
    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


class ExportSettings(BaseSettings):
    """Document defaults and output settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="EXPORT_", extra="ignore")

    company_name: str = DEFAULT_COMPANY_NAME
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    output_encoding: str = DEFAULT_OUTPUT_ENCODING


class Settings(BaseSettings):
    """Aggregated settings from all configuration classes."""

    app: AppSettings = Field(default_factory=AppSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()


# Convenience exports
settings = get_settings()
