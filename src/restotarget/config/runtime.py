"""Pydantic-based runtime settings for the targeting engine.

Loads from environment variables (with optional .env file).
Invalid values fail fast on first access.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class RuntimeSettings(BaseSettings):
    """All configuration for the targeting engine, validated at startup."""

    model_config = {
        "env_prefix": "RESTOTARGET_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # --- Persistence ---
    store_db_path: str = Field(
        default="data/targeting.db",
        description="SQLite path for persisted targeting relations",
    )

    # --- Candidate selection ---
    candidate_cache_size: int = Field(
        default=64,
        ge=1,
        le=10_000,
        description="Maximum memoised candidate lists per selector",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
