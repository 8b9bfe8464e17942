"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Remote auth authority
    api_base_url: str = "https://back-end-443z.onrender.com"
    request_timeout_seconds: float = 10.0
    check_login_path: str = "/api/Auth/check-login"
    register_path: str = "/api/Auth/register"
    login_path: str = "/api/Auth/login"

    # Form behaviour
    debounce_ms: int = 400  # Quiet period before a login availability check
    min_login_length: int = 3  # Shorter logins are never checked remotely

    # Form sessions untouched for this long are closed on the next open
    form_idle_timeout_seconds: float = 1800.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
