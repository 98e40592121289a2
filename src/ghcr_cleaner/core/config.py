"""Application settings, read from the environment and `.env` files.

The CLI and the adapters share one `AppSettings` instance.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ghcr_cleaner import __app_name__, __version__


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / __app_name__
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / __app_name__

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / __app_name__
    return Path.home() / ".config" / __app_name__


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Settings prefixed with `GHCR_CLEANER_`.

    The token is also read from the plain `GITHUB_TOKEN` variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="GHCR_CLEANER_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    github_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("GHCR_CLEANER_TOKEN", "GITHUB_TOKEN"),
        description="GitHub token used when --token is not given.",
    )
    api_base_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL of the GitHub REST API.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default=f"{__app_name__}/{__version__}",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    log_level: str | None = Field(
        default=None,
        description="Logging level name; overrides --verbose when set.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown logging level: {value}")
        return value

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
