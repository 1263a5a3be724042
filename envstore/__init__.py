"""Parses, caches and serves values from the project's .env file."""

from __future__ import annotations

from .casting import CastOptions, cast_values
from .environment import EnvironmentWriter, MappingEnvironmentWriter, OsEnvironWriter
from .exceptions import (
    CacheReadError,
    CacheWriteError,
    EnvStoreError,
    KeyNotFoundError,
    SourceNotFoundError,
    SourceParseError,
)
from .parser import SourceParser, parse_env_file
from .store import EnvStore

__all__ = [
    "CastOptions",
    "cast_values",
    "EnvironmentWriter",
    "MappingEnvironmentWriter",
    "OsEnvironWriter",
    "CacheReadError",
    "CacheWriteError",
    "EnvStoreError",
    "KeyNotFoundError",
    "SourceNotFoundError",
    "SourceParseError",
    "SourceParser",
    "parse_env_file",
    "EnvStore",
]
