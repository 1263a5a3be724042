"""Tests for the on-disk environment cache."""

import json

import pytest

from envstore.cache import clear_cache, read_cache, write_cache
from envstore.exceptions import CacheReadError, CacheWriteError


class TestCacheRoundTrip:
    """Cached values must come back with the same types."""

    def test_types_survive(self, tmp_path):
        path = tmp_path / "env.json"
        values = {"DEBUG": True, "SSL": False, "PORT": 3306, "HOST": "db", "FLAG": "true"}
        write_cache(path, values)
        loaded = read_cache(path)
        assert loaded == values
        assert loaded["DEBUG"] is True
        assert loaded["SSL"] is False
        assert type(loaded["PORT"]) is int
        assert loaded["FLAG"] == "true"

    def test_order_survives(self, tmp_path):
        path = tmp_path / "env.json"
        write_cache(path, {"Z": 1, "A": 2})
        assert list(read_cache(path)) == ["Z", "A"]

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "cache" / "env.json"
        write_cache(path, {"A": "b"})
        assert path.is_file()

    def test_overwrites_and_leaves_no_temp_files(self, tmp_path):
        path = tmp_path / "env.json"
        write_cache(path, {"A": "old"})
        write_cache(path, {"A": "new"})
        assert read_cache(path) == {"A": "new"}
        assert [p.name for p in tmp_path.iterdir()] == ["env.json"]


class TestReadCache:
    def test_missing_file_returns_none(self, tmp_path):
        assert read_cache(tmp_path / "absent.json") is None

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "env.json"
        path.write_text("<?php return [];")
        with pytest.raises(CacheReadError):
            read_cache(path)

    def test_wrong_shape_raises(self, tmp_path):
        path = tmp_path / "env.json"
        path.write_text(json.dumps({"values": {"A": [1, 2]}}))
        with pytest.raises(CacheReadError):
            read_cache(path)

    def test_unknown_version_raises(self, tmp_path):
        path = tmp_path / "env.json"
        path.write_text(json.dumps({"version": 99, "values": {}}))
        with pytest.raises(CacheReadError):
            read_cache(path)


class TestClearCache:
    def test_removes_file(self, tmp_path):
        path = tmp_path / "env.json"
        write_cache(path, {"A": 1})
        assert clear_cache(path) is True
        assert not path.exists()

    def test_absent_file_is_noop(self, tmp_path):
        assert clear_cache(tmp_path / "env.json") is False


def test_unwritable_location_raises_cache_write_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    with pytest.raises(CacheWriteError) as exc_info:
        write_cache(blocker / "env.json", {"A": 1})
    assert isinstance(exc_info.value, OSError)
