"""Runtime configuration for jarfetch."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_local_repository() -> Path:
    return Path.home() / "repo"


class Settings(BaseSettings):
    """Configuration values mapped from ``JARFETCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JARFETCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "jarfetch"
    version: str = "0.1.0"

    # Remote repository
    remote_base_url: str = "https://repo1.maven.org/"
    remote_layout: str = "maven2"
    remote_username: Optional[str] = None
    remote_password: Optional[str] = None
    http_timeout: float = 30.0
    http_verify: bool = True

    # Local repository
    local_repository_path: Path = Field(default_factory=_default_local_repository)
    binary_extension: str = "jar"
    manifest_extension: str = "pom"

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
