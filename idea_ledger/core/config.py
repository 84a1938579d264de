"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Application
    app_name: str = "Idea Ledger"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # API
    api_prefix: str = "/api/v1"

    # Storage
    storage_url: str = Field(default="sqlite:///./idea_ledger.db")
    storage_enabled: bool = True  # False runs purely in memory
    storage_echo: bool = False  # Log SQL queries


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
