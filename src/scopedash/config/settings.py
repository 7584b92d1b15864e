"""
Application settings using Pydantic.

Provides environment-based configuration loading with SCOPEDASH_ prefix.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Management server
    base_url: str = "https://localhost"
    api_prefix: str = "/vmturbo/rest"

    # Existing session (JSESSIONID) established by the operator
    session_cookie: str | None = None

    # HTTP client settings
    http_timeout: float = 30.0
    verify_ssl: bool = True

    # Logging
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    log_format: Literal["console", "json"] = "console"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "SCOPEDASH_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
