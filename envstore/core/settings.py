"""Loader settings powered by Pydantic."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory (one level up from envstore/)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Package directory; the cache lives beside the loader code
PACKAGE_DIR = Path(__file__).resolve().parent.parent

DEFAULT_SOURCE_FILE = BASE_DIR / ".env"
DEFAULT_CACHE_FILE = PACKAGE_DIR / "cache" / "env.json"


class LoaderSettings(BaseSettings):
    """Where the loader reads its source and keeps its cache."""

    model_config = SettingsConfigDict(
        env_prefix="ENVSTORE_",
        case_sensitive=False,
        extra="ignore",
    )

    source_file: Path = Field(default=DEFAULT_SOURCE_FILE)
    source_encoding: str = Field(default="utf-8")
    cache_file: Path = Field(default=DEFAULT_CACHE_FILE)
    log_level: str = Field(default="INFO")

    @field_validator("source_file", "cache_file", mode="after")
    @classmethod
    def resolve_path(cls, value: Path) -> Path:
        """Anchor relative paths at the project root."""
        if not value.is_absolute():
            value = BASE_DIR / value
        return value.resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> str:
        if value is None:
            return "INFO"
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        raise ValueError("ENVSTORE_LOG_LEVEL must be a level name")

    @property
    def cache_dir(self) -> Path:
        return self.cache_file.parent
