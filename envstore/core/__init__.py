"""Core loader infrastructure (settings, logging)."""

from functools import lru_cache

from .settings import LoaderSettings


@lru_cache(maxsize=1)
def get_settings() -> LoaderSettings:
    """Return cached loader settings."""
    return LoaderSettings()
