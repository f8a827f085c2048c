"""Runtime configuration loaded from environment variables."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__

# Served root shipped with the package; the container copies its own over it.
DEFAULT_STATIC_ROOT = Path(__file__).resolve().parent / "public"


class Settings(BaseSettings):
    # TCP port the listener binds; the container exposes the same one.
    port: int = Field(default=8080, ge=1, le=65535)
    # Interface to bind; all interfaces inside a container.
    host: str = "0.0.0.0"
    # Directory whose contents are exposed verbatim over HTTP.
    static_root: Path = DEFAULT_STATIC_ROOT
    log_level: str = "INFO"
    app_version: str = __version__

    # Also load values from a local .env file when present.
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
