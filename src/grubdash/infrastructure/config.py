"""Application settings from environment variables (prefix ``GRUBDASH_``)."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="GRUBDASH_", env_file=".env", case_sensitive=False
    )

    # Seed / snapshot files; stores start empty when unset
    data_dir: Path | None = None

    # Observability
    log_level: str = "WARNING"
    log_format: str = "text"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
