"""
Configuration settings for the Apixu client.

This module provides type-safe configuration management using Pydantic.
Settings are loaded from environment variables and .env file.

Usage:
    from config.settings import get_settings

    settings = get_settings()
    print(settings.apixu_base_url)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apixu.api.constants import (
    BASE_URL,
    DEFAULT_LANGUAGE,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_QUERY_LENGTH,
    SUPPORTED_LANGUAGES,
)


class Settings(BaseSettings):
    """
    Application settings with validation.

    Settings are loaded from environment variables, with fallback to a
    .env file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    apixu_api_key: str = Field(
        default="",
        description="Apixu API key"
    )

    apixu_base_url: str = Field(
        default=BASE_URL,
        description="Base URL for the Apixu API"
    )

    request_timeout: int = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        ge=1,
        le=120,
        description="API request timeout in seconds"
    )

    # ==========================================================================
    # Request Defaults
    # ==========================================================================
    max_query_length: int = Field(
        default=MAX_QUERY_LENGTH,
        ge=1,
        description="Maximum length of a location query"
    )

    default_language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="Language used when a command doesn't ask for one"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    # ==========================================================================
    # Validators
    # ==========================================================================
    @field_validator("apixu_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL ending with a slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://: {v}")
        return v if v.endswith("/") else f"{v}/"

    @field_validator("default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Strip and lowercase the language code, then check it is supported."""
        v = v.strip().lower()
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Language not supported: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    # ==========================================================================
    # Properties
    # ==========================================================================
    @property
    def has_api_key(self) -> bool:
        """Check if a valid API key is configured."""
        return bool(self.apixu_api_key and self.apixu_api_key != "your_api_key_here")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance (cached for performance)

    Note:
        Uses lru_cache to avoid re-reading .env file on every call.
        Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Force reload settings from environment.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()
