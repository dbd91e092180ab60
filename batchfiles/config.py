from __future__ import annotations

import tempfile
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_root(kind: str) -> Path:
    return Path(tempfile.gettempdir()).resolve() / "batch" / kind


class Settings(BaseSettings):
    """Directory roots for the file repository, parsed from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BATCH_",
        extra="ignore",
    )

    output_dir: Path = Field(
        default_factory=lambda: _default_root("files"),
        description="Root directory that holds producer-created files.",
    )
    trigger_dir: Path = Field(
        default_factory=lambda: _default_root("triggers"),
        description="Root directory mirrored by trigger files signalling that a stored file is ready.",
    )

    @field_validator("output_dir", "trigger_dir", mode="before")
    @classmethod
    def expand_root(cls, value: Path) -> Path:
        """Expand user and resolve directory roots to absolute paths."""
        return Path(value).expanduser().resolve()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached `Settings` instance to avoid reparsing the environment."""
    return Settings()
