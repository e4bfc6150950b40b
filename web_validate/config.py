"""
Configuration management for web_validate.

Uses pydantic-settings for type-safe configuration with automatic
environment variable loading and validation. Variables are prefixed with
WEB_VALIDATE_ (e.g. WEB_VALIDATE_TLD_SOURCE_URL).
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from web_validate.constants import (
    DEFAULT_CACHE_TTL_DAYS,
    DEFAULT_REQUEST_TIMEOUT,
    IANA_TLD_LIST_URL,
)


class Settings(BaseSettings):
    """Settings for the TLD registry source and its cache."""

    model_config = SettingsConfigDict(
        env_prefix="WEB_VALIDATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    tld_source_url: str = Field(
        default=IANA_TLD_LIST_URL,
        description="URL or path of the TLD list used by refresh",
    )
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        description="HTTP timeout in seconds when fetching the TLD list",
    )
    cache_dir: Path = Field(
        default=Path("data/cache"),
        description="Directory for the TLD list cache",
    )
    cache_ttl_days: int | None = Field(
        default=DEFAULT_CACHE_TTL_DAYS,
        ge=0,
        description="Days a cached TLD list stays valid (empty or 0 = no expiry)",
    )
    use_cache: bool = Field(
        default=True,
        description="Store refreshed lists on disk and load them at startup",
    )

    @field_validator("tld_source_url", mode="before")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from string values."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("cache_ttl_days", mode="before")
    @classmethod
    def empty_string_to_none(cls, v: str | int | None) -> str | int | None:
        """Convert empty strings to None for optional fields."""
        if isinstance(v, str):
            v = v.strip()
            return v if v else None
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
