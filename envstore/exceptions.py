"""Errors raised while loading and reading environment values."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class EnvStoreError(Exception):
    """Base class for every envstore failure."""


class SourceNotFoundError(EnvStoreError, FileNotFoundError):
    """Raised when the .env definition file does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Environment file not found: {self.path}")

    def __str__(self) -> str:
        return self.args[0]


class SourceParseError(EnvStoreError, ValueError):
    """Raised when a line of the .env file cannot be parsed."""

    def __init__(
        self, path: str | Path, line: Optional[int], statement: str
    ) -> None:
        self.path = Path(path)
        self.line = line
        self.statement = statement
        location = f"{self.path}:{line}" if line is not None else str(self.path)
        super().__init__(f"Could not parse statement at {location}: {statement!r}")


class KeyNotFoundError(EnvStoreError, KeyError):
    """Raised when a requested key is not part of the loaded environment."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            f"The {key} environment variable does not exist or could not be loaded"
        )

    def __str__(self) -> str:
        # KeyError would otherwise print the repr of the message
        return self.args[0]


class CacheReadError(EnvStoreError, ValueError):
    """Raised when the cache artifact exists but cannot be loaded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Unreadable environment cache {self.path}: {reason}")


class CacheWriteError(EnvStoreError, OSError):
    """Raised when the cache artifact cannot be written or removed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Could not write environment cache {self.path}: {reason}")

    def __str__(self) -> str:
        return self.args[0]
