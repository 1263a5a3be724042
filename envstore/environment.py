"""Writers that export loaded values into an ambient environment table."""

from __future__ import annotations

import os
from typing import MutableMapping, Optional, Protocol

from .casting import EnvValue


class EnvironmentWriter(Protocol):
    """Protocol describing a sink for exported environment values."""

    def write(self, key: str, value: EnvValue) -> None: ...


def stringify(value: EnvValue) -> str:
    """Render a typed value the way it would appear in a .env file."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class OsEnvironWriter:
    """Export values into ``os.environ`` (strings only)."""

    def __init__(self, target: Optional[MutableMapping[str, str]] = None) -> None:
        self.target = os.environ if target is None else target

    def write(self, key: str, value: EnvValue) -> None:
        self.target[key] = stringify(value)


class MappingEnvironmentWriter:
    """Keep exported values, types intact, in a private dictionary."""

    def __init__(self) -> None:
        self.values: dict[str, EnvValue] = {}

    def write(self, key: str, value: EnvValue) -> None:
        self.values[key] = value
