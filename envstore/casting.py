"""Type coercion for raw ``.env`` string values."""

from __future__ import annotations

import re
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

EnvValue = str | bool | int

DEFAULT_BOOL_CASTS: frozenset[str] = frozenset({"true", "false", "0", "1"})
TRUTHY_STRINGS: frozenset[str] = frozenset({"1", "true", "yes", "on"})

_NON_DIGITS = re.compile(r"[^0-9]")


class CastOptions(BaseModel):
    """Which raw strings get converted, fixed once a store is built."""

    model_config = ConfigDict(frozen=True)

    bool_casts: frozenset[str] = Field(default=DEFAULT_BOOL_CASTS)
    cast_ints: bool = True

    @field_validator("bool_casts", mode="before")
    @classmethod
    def expand_bool_casts(cls, value: object) -> object:
        """Accept True (default literals), False (none) or a set of literals."""
        if value is True or value is None:
            return DEFAULT_BOOL_CASTS
        if value is False:
            return frozenset()
        if isinstance(value, str):
            raise ValueError("bool_casts must be a collection of literals, not a string")
        return value

    @property
    def enabled(self) -> bool:
        return bool(self.bool_casts) or self.cast_ints


def to_bool(value: str) -> bool:
    """Parse a truthy string; anything unrecognised is False."""
    return value.strip().lower() in TRUTHY_STRINGS


def is_digit_string(value: str) -> bool:
    """True when stripping non-digits leaves ``value`` unchanged.

    The empty string qualifies and casts to ``0``.
    """
    return len(_NON_DIGITS.sub("", value)) == len(value)


def cast_value(value: str, options: CastOptions) -> EnvValue:
    if value in options.bool_casts:
        return to_bool(value)
    if options.cast_ints and is_digit_string(value):
        return int(value) if value else 0
    return value


def cast_values(values: Mapping[str, str], options: CastOptions) -> dict[str, EnvValue]:
    """Return a new mapping with booleans and integers converted.

    The boolean check runs first, so with the default literals ``"1"``
    becomes ``True`` rather than ``1``.
    """
    if not options.enabled:
        return dict(values)
    return {key: cast_value(value, options) for key, value in values.items()}
