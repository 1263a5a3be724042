"""
Pytest configuration and shared fixtures for envstore testing.

Every test runs against a temporary .env file and cache location so the
package's own cache directory is never touched.
"""

from pathlib import Path

import pytest

from envstore.core import get_settings
from envstore.core.settings import LoaderSettings

SAMPLE_ENV = """\
# Database
DB_HOST=localhost
DB_NAME=site
DB_PORT=3306
DB_ENGINE=InnoDB

# Flags
DEBUG=true
USE_PAGE_CLASSES=1
TEMPLATE_COMPILE=false
USE_MARKUP_REGIONS=0

CHMOD_DIR=0755
TIMEZONE=America/Los_Angeles
VERSION=1.2.3
"""


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Point the default loader settings at a temporary directory."""
    monkeypatch.setenv("ENVSTORE_SOURCE_FILE", str(tmp_path / ".env"))
    monkeypatch.setenv("ENVSTORE_CACHE_FILE", str(tmp_path / "cache" / "env.json"))
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def settings(isolated_settings) -> LoaderSettings:
    return isolated_settings


@pytest.fixture
def write_env(settings):
    """Factory writing .env contents to the configured source path."""

    def _write(contents: str = SAMPLE_ENV) -> Path:
        settings.source_file.write_text(contents, encoding="utf-8")
        return settings.source_file

    return _write


@pytest.fixture
def source_file(write_env) -> Path:
    return write_env()
