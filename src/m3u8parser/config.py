"""Configuration settings using pydantic-settings for environment variable loading."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from `M3U8_*` environment variables or a .env file.

    Environment variables take precedence over the .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="M3U8_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # HTTP retrieval; None waits for the full body however long it takes
    fetch_timeout: float | None = Field(default=None, gt=0)
    user_agent: str = "m3u8-parser/0.1.0"

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
