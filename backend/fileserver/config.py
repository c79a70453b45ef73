"""Fileserver configuration — Pydantic BaseSettings loaded from env / .env."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOME = "/home/selenium"
DOWNLOADS_SUBDIR = "Downloads"


def default_downloads_dir() -> str:
    """``$HOME/Downloads``, falling back to the selenium user's home."""
    home = os.environ.get("HOME") or DEFAULT_HOME
    return str(Path(home) / DOWNLOADS_SUBDIR)


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "fileserver"
    debug: bool = False
    log_level: str = "INFO"

    # Network
    host: str = "0.0.0.0"
    port: int = 8080
    uvicorn_workers: int = 1

    # Served directory — derived from HOME unless set explicitly
    downloads_dir: str = ""

    # Read size used when hashing files
    hash_chunk_size: int = 64 * 1024

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FILESERVER_",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _resolve_downloads_dir(self) -> "Settings":
        if not self.downloads_dir:
            self.downloads_dir = default_downloads_dir()
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
