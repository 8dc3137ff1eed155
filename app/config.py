# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.API_PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Every value has a default, so the server starts with no environment at all
# and listens on 0.0.0.0:3000 serving ./public.
# =============================================================================

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance, or passed
    explicitly to create_app() / serve().
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )

    API_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the server"
    )

    # -------------------------------------------------------------------------
    # Static Assets
    # -------------------------------------------------------------------------

    STATIC_DIR: Path = Field(
        default=PROJECT_ROOT / "public",
        description="Directory whose files are served verbatim by path"
    )

    # -------------------------------------------------------------------------
    # Form Decoding
    # -------------------------------------------------------------------------
    # Applies to urlencoded request bodies and to query strings.

    FORM_EXTENDED: bool = Field(
        default=True,
        description="Parse bracket notation (a[b]=1, a[]=1) into nested values"
    )

    FORM_DEPTH: int = Field(
        default=5,
        ge=0,
        le=32,
        description="Maximum bracket nesting depth in extended mode"
    )

    FORM_PARAMETER_LIMIT: int = Field(
        default=1000,
        ge=1,
        description="Maximum number of fields decoded from one body or query"
    )

    MAX_BODY_BYTES: int = Field(
        default=100 * 1024,
        ge=0,
        description="Request bodies larger than this are not decoded"
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
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def log_level(self) -> int:
        """Logging level implied by DEBUG."""
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


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
