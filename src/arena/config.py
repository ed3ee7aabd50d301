"""Lightweight configuration for the Arena service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings read from ``ARENA_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ARENA_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    max_battle_rounds: int = Field(
        default=1000,
        description="Rounds a battle may last before it is aborted as inconclusive",
        gt=0,
    )
    default_pagination_limit: int = Field(
        default=10, description="Page size used when a listing omits `limit`", gt=0
    )
    max_pagination_limit: int = Field(
        default=100, description="Upper bound applied to the requested page size", gt=0
    )
    data_dir: Path | None = Field(
        default=None,
        description="Directory for JSON character snapshots; keep characters in memory when unset",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )
    log_level: str = Field(default="INFO", description="Root log level for the dev server")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    if settings.data_dir is not None:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings
