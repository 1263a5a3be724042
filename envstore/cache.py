"""On-disk cache of the already coerced environment mapping."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, StrictBool, StrictInt, StrictStr, ValidationError

from .casting import EnvValue
from .exceptions import CacheReadError, CacheWriteError

logger = logging.getLogger(__name__)

CACHE_FORMAT_VERSION = 1


class CacheArtifact(BaseModel):
    """Serialized snapshot; strict types keep True from reading back as 1."""

    version: int = CACHE_FORMAT_VERSION
    values: dict[str, StrictBool | StrictInt | StrictStr]


def read_cache(path: str | Path) -> Optional[dict[str, EnvValue]]:
    """Load cached values.

    Returns:
        The cached mapping, or None when no cache file exists

    Raises:
        CacheReadError: If the file exists but is not a valid artifact
    """
    cache_path = Path(path)
    if not cache_path.is_file():
        return None

    try:
        raw = cache_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CacheReadError(cache_path, str(exc)) from exc

    try:
        artifact = CacheArtifact.model_validate_json(raw)
    except ValidationError as exc:
        raise CacheReadError(cache_path, f"{exc.error_count()} validation error(s)") from exc

    if artifact.version != CACHE_FORMAT_VERSION:
        raise CacheReadError(cache_path, f"unsupported version {artifact.version}")
    return dict(artifact.values)


def write_cache(path: str | Path, values: Mapping[str, EnvValue]) -> None:
    """Persist ``values``, replacing any previous cache file.

    The payload is written to a sibling temporary file first and moved into
    place, so readers see either the old file or the new one.

    Raises:
        CacheWriteError: If the directory or file cannot be written
    """
    cache_path = Path(path)
    payload = CacheArtifact(values=dict(values)).model_dump_json(indent=2)

    try:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=cache_path.parent, prefix=f".{cache_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.write("\n")
            os.replace(tmp_name, cache_path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except OSError as exc:
        raise CacheWriteError(cache_path, str(exc)) from exc

    logger.info(f"Environment cache written to {cache_path} ({len(values)} keys)")


def clear_cache(path: str | Path) -> bool:
    """Delete the cache file.

    Returns:
        True if a file was removed, False if there was nothing to delete
    """
    cache_path = Path(path)
    if not cache_path.exists():
        return False

    try:
        cache_path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise CacheWriteError(cache_path, str(exc)) from exc

    logger.info(f"Environment cache cleared: {cache_path}")
    return True
