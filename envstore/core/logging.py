"""Basic logging configuration for envstore."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once with a consistent format.

    The level comes from ``level`` when given, otherwise from
    ``ENVSTORE_LOG_LEVEL`` via the loader settings.
    """
    if level is None:
        from . import get_settings

        level = get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
