# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   app = create_app(get_settings())
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Settings are handed to create_app() explicitly; request handlers never read
# a module-level settings object.
# =============================================================================

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development
    """

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------
    # Any SQLAlchemy URL whose dialect supports RETURNING
    # (sqlite, postgresql+psycopg, mssql+pyodbc, ...)

    DATABASE_URL: str = Field(
        default="sqlite:///./example_models.db",
        description="SQLAlchemy connection URL for the relational store"
    )

    DATABASE_ECHO: bool = Field(
        default=False,
        description="Log every SQL statement emitted by the engine"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Don't fail if .env doesn't exist
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def log_level(self) -> int:
        """Logging level derived from DEBUG."""
        return logging.DEBUG if self.DEBUG else logging.INFO


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
