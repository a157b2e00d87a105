"""Configuration management for the Users apps."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the common-py project directory (apps/common-py/.env).

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is in apps/common-py/src/common/config/settings.py
    # So we go up 4 levels to get to apps/common-py/
    current_file = Path(__file__)
    common_py_dir = current_file.parent.parent.parent.parent
    return str(common_py_dir / ".env")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "users-http-trigger"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "info"

    # API (local FastAPI host)
    api_host: str = "localhost"
    api_port: int = 8000

    # UI
    ui_url: str | None = None

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
