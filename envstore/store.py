"""Memoized, cached access to values defined in the project's .env file."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping, Optional, TypeVar

from .cache import clear_cache as _clear_cache_file
from .cache import read_cache, write_cache
from .casting import CastOptions, EnvValue, cast_values
from .core import get_settings
from .core.settings import LoaderSettings
from .environment import EnvironmentWriter, OsEnvironWriter
from .exceptions import CacheReadError, KeyNotFoundError
from .parser import SourceParser

logger = logging.getLogger(__name__)

ConfigTarget = TypeVar("ConfigTarget")


class EnvStore:
    """Read-only view over the resolved environment.

    Build one with :meth:`load` at process start, then read values with
    :meth:`get`. A missing key raises instead of falling back to a default.
    """

    def __init__(
        self,
        create_env_vars: bool,
        cast_bools: bool | Iterable[str],
        cast_ints: bool,
        settings: LoaderSettings,
        environment: EnvironmentWriter,
    ) -> None:
        self.settings = settings
        self.cast_options = CastOptions(bool_casts=cast_bools, cast_ints=cast_ints)
        self.environment = environment
        self.cache_hit = False
        self._values: dict[str, EnvValue] = self._load_env(create_env_vars)

    @classmethod
    def load(
        cls,
        create_env_vars: bool = False,
        cast_bools: bool | Iterable[str] = True,
        cast_ints: bool = True,
        *,
        settings: Optional[LoaderSettings] = None,
        environment: Optional[EnvironmentWriter] = None,
    ) -> "EnvStore":
        """Load values from the cache, or from the .env file when not cached.

        Args:
            create_env_vars: Also export every value through ``environment``
            cast_bools: True for the default literals, False to disable, or a
                set of literals to convert to booleans
            cast_ints: Convert digit-only values to integers
            settings: Source/cache locations (defaults to ``get_settings()``)
            environment: Export target (defaults to ``os.environ``)

        Returns:
            A ready store

        Raises:
            SourceNotFoundError: If nothing is cached and the .env file is missing
            SourceParseError: If nothing is cached and the .env file is malformed
            CacheWriteError: If the cache cannot be written
        """
        return cls(
            create_env_vars,
            cast_bools,
            cast_ints,
            settings=settings if settings is not None else get_settings(),
            environment=environment if environment is not None else OsEnvironWriter(),
        )

    def get(self, key: str) -> EnvValue:
        """Retrieve a value by key.

        Raises:
            KeyNotFoundError: If the key was not loaded
        """
        try:
            return self._values[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def push_to_config(
        self, config: ConfigTarget, associations: Optional[Mapping[str, str]] = None
    ) -> ConfigTarget:
        """Assign env values onto attributes of a host configuration object.

        Args:
            config: Any object accepting attribute assignment
            associations: Attribute name -> env key

        Returns:
            The same ``config`` object

        Raises:
            KeyNotFoundError: On the first missing key; attributes assigned
                before it keep their new values
        """
        for config_property, env_key in (associations or {}).items():
            setattr(config, config_property, self.get(env_key))
        return config

    def to_dict(self) -> dict[str, EnvValue]:
        """Get all values as a new dictionary."""
        return dict(self._values)

    @staticmethod
    def clear_cache(settings: Optional[LoaderSettings] = None) -> None:
        """Delete the cached environment if it exists."""
        if settings is None:
            settings = get_settings()
        _clear_cache_file(settings.cache_file)

    def _load_env(self, create_env_vars: bool) -> dict[str, EnvValue]:
        values = self._get_cached_env()

        if values:
            self.cache_hit = True
            logger.debug(f"Loaded {len(values)} variables from {self.settings.cache_file}")
        else:
            values = self._get_from_env()
            values = cast_values(values, self.cast_options)

        write_cache(self.settings.cache_file, values)

        if create_env_vars:
            self._push_to_environment(values)

        return values

    def _get_cached_env(self) -> Optional[dict[str, EnvValue]]:
        try:
            return read_cache(self.settings.cache_file)
        except CacheReadError as exc:
            logger.warning(f"Ignoring environment cache: {exc}")
            return None

    def _get_from_env(self) -> dict[str, str]:
        logger.debug(f"Environment cache miss, parsing {self.settings.source_file}")
        parser = SourceParser(
            self.settings.source_file, encoding=self.settings.source_encoding
        )
        return parser.parse()

    def _push_to_environment(self, values: Mapping[str, EnvValue]) -> None:
        for key, value in values.items():
            self.environment.write(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        source = "cache" if self.cache_hit else str(self.settings.source_file)
        return f"<EnvStore {len(self._values)} keys from {source}>"

