"""Flask extension exposing an EnvStore to a host application."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask, current_app
from flask.cli import AppGroup

from .core.logging import configure_logging
from .store import EnvStore

EXTENSION_NAME = "envstore"


class EnvStoreExtension:
    """Attach a loaded EnvStore to a Flask app.

    Usage::

        env = EnvStoreExtension()
        env.init_app(app, associations={"SECRET_KEY": "APP_SECRET"})
    """

    def __init__(self, app: Optional[Flask] = None, **kwargs: Any) -> None:
        self.store: Optional[EnvStore] = None
        if app is not None:
            self.init_app(app, **kwargs)

    def init_app(
        self,
        app: Flask,
        store: Optional[EnvStore] = None,
        associations: Optional[Mapping[str, str]] = None,
        **load_kwargs: Any,
    ) -> EnvStore:
        """Load (or adopt) a store and wire it into ``app``.

        Args:
            app: Flask application
            store: Already loaded store; loaded with ``load_kwargs`` when omitted
            associations: Flask config key -> env key, copied into ``app.config``

        Returns:
            The store registered on the app

        Raises:
            KeyNotFoundError: If an association names a missing env key
        """
        if store is None:
            store = EnvStore.load(**load_kwargs)
        self.store = store

        app.extensions[EXTENSION_NAME] = store
        app.config["ENV_STORE"] = store
        for config_key, env_key in (associations or {}).items():
            app.config[config_key] = store.get(env_key)

        app.cli.add_command(_build_cli(store))
        return store


def get_store(app: Optional[Flask] = None) -> EnvStore:
    """Return the EnvStore registered on ``app`` (or the current app)."""
    app = app or current_app
    try:
        return app.extensions[EXTENSION_NAME]
    except KeyError as exc:
        raise RuntimeError("EnvStoreExtension has not been initialized on this app") from exc


def _build_cli(store: EnvStore) -> AppGroup:
    def _configure_cli_logging():
        configure_logging(store.settings.log_level)

    env_cli = AppGroup(
        "env",
        help="Inspect and manage the cached environment.",
        callback=_configure_cli_logging,
    )

    @env_cli.command("clear-cache")
    def clear_cache():
        """Delete the cached environment file."""
        EnvStore.clear_cache(store.settings)
        print(f"✓ Environment cache cleared ({store.settings.cache_file})")

    @env_cli.command("show")
    def show():
        """List loaded keys and their value types."""
        for key, value in store.to_dict().items():
            print(f"{key}: {type(value).__name__}")

    return env_cli
