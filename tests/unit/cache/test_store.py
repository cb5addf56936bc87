"""Unit tests for the versioned directory cache."""

from __future__ import annotations

import gzip
import json

import pytest

from planetstat.cache import CacheEnvelope, CacheStore
from planetstat.core import CacheError
from planetstat.models import SystemInfo


class TestCacheStoreSetup:
    """Test directory preparation."""

    def test_creates_type_directories(self, tmp_path):
        root = tmp_path / "cache"
        CacheStore(root, cache_types=("chunk", "system"))
        assert (root / "chunk").is_dir()
        assert (root / "system").is_dir()

    def test_rejects_file_as_root(self, tmp_path):
        root = tmp_path / "cache"
        root.write_text("not a directory")
        with pytest.raises(CacheError):
            CacheStore(root)

    def test_rejects_file_as_type_directory(self, tmp_path):
        root = tmp_path / "cache"
        root.mkdir()
        (root / "chunk").write_text("oops")
        with pytest.raises(CacheError):
            CacheStore(root)

    def test_max_age_is_kept(self, tmp_path):
        store = CacheStore(tmp_path, max_age=60)
        assert store.max_age == 60


class TestCacheStoreReadWrite:
    """Test store/find behaviour."""

    def test_round_trip(self, tmp_path):
        store = CacheStore(tmp_path)
        info = SystemInfo(name="Sol", id64=10477373803)

        assert store.store(3, info) is True
        assert store.find(3, info.cache_key, SystemInfo) == info

    def test_envelope_on_disk(self, tmp_path):
        store = CacheStore(tmp_path)
        info = SystemInfo(name="Sol", id64=1)
        store.store(7, info)

        raw = json.loads(gzip.decompress(store.path_for("system/1").read_bytes()))
        envelope = CacheEnvelope.model_validate(raw)
        assert envelope.version == 7
        assert envelope.timestamp > 0
        assert json.loads(envelope.content)["name"] == "Sol"

    def test_explicit_key(self, tmp_path):
        store = CacheStore(tmp_path)
        info = SystemInfo(name="Sol", id64=1)
        store.store(1, info, key="system/sol")
        assert store.find(1, "system/sol", SystemInfo) == info
        assert store.find(1, "system/1", SystemInfo) is None

    def test_missing_entry(self, tmp_path):
        store = CacheStore(tmp_path)
        assert store.find(1, "system/nothing", SystemInfo) is None

    def test_version_mismatch_deletes_entry(self, tmp_path):
        store = CacheStore(tmp_path)
        info = SystemInfo(name="Sol", id64=1)
        store.store(1, info)

        assert store.find(2, info.cache_key, SystemInfo) is None
        assert not store.path_for(info.cache_key).exists()
        assert store.find(1, info.cache_key, SystemInfo) is None

    def test_corrupt_gzip_is_a_miss(self, tmp_path):
        store = CacheStore(tmp_path)
        store.path_for("system/bad").write_bytes(b"definitely not gzip")

        assert store.find(1, "system/bad", SystemInfo) is None
        assert not store.path_for("system/bad").exists()

    def test_corrupt_envelope_is_a_miss(self, tmp_path):
        store = CacheStore(tmp_path)
        store.path_for("system/bad").write_bytes(gzip.compress(b'{"version": "x"}'))
        assert store.find(1, "system/bad", SystemInfo) is None

    def test_payload_of_wrong_shape_is_a_miss(self, tmp_path):
        store = CacheStore(tmp_path)
        envelope = CacheEnvelope(timestamp=0, version=1, content='{"bodies": 5}')
        store.path_for("system/odd").write_bytes(gzip.compress(envelope.model_dump_json().encode()))

        assert store.find(1, "system/odd", SystemInfo) is None
        assert not store.path_for("system/odd").exists()

    def test_overwrite_replaces_entry(self, tmp_path):
        store = CacheStore(tmp_path)
        store.store(1, SystemInfo(name="Old", id64=9))
        store.store(1, SystemInfo(name="New", id64=9))
        assert store.find(1, "system/9", SystemInfo).name == "New"
        assert not list((tmp_path / "system").glob(".tmp-*"))

    def test_write_failure_is_not_raised(self, tmp_path):
        store = CacheStore(tmp_path)
        (tmp_path / "system").rmdir()
        (tmp_path / "system").write_text("blocking file")
        assert store.store(1, SystemInfo(name="Sol", id64=1)) is False
