"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI layer.
- Lets adapters (HTTP, DNS discovery, auth) read configuration consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "adlist-search"
APP_VERSION = "0.1.0"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, .env) instead of inside the core.
    - A single configuration contract for the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ADLIST_SEARCH_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url: str | None = Field(
        default=None,
        description="Explicit FTL API base URL (e.g. http://pi.hole/api/). Skips discovery.",
    )
    discovery_server: str = Field(
        default="127.0.0.1",
        min_length=1,
        description="DNS server asked for the CHAOS TXT local.api.ftl record.",
    )
    discovery_timeout_seconds: float = Field(
        default=2.0,
        gt=0,
        description="Resolver lifetime for API discovery (seconds).",
    )
    fallback_api_url: str = Field(
        default="http://localhost/api/",
        min_length=8,
        description="API base URL used when discovery returns nothing.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    verify_tls: bool = Field(
        default=False,
        description="Verify TLS certificates (FTL usually serves a self-signed one).",
    )
    user_agent: str = Field(
        default=f"{APP_NAME}/{APP_VERSION}",
        min_length=1,
        description="User-Agent sent to the API.",
    )

    password: str | None = Field(
        default=None,
        description="App password; when set, neither the password file nor a prompt is used.",
    )
    password_file: Path = Field(
        default=Path("/etc/pihole/cli_pw"),
        description="CLI password file written by FTL, tried before prompting.",
    )

    default_max_results: int = Field(
        default=20,
        gt=0,
        description="Result cap without --all.",
    )
    max_results_ceiling: int = Field(
        default=10000,
        gt=0,
        description="FTL hard limit, used by --all.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level for diagnostics on stderr (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_log_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"unknown log level: {value!r}")
        return level
