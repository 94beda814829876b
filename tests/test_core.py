"""Tests for building a coordinator from configuration."""

import pytest

from tiercache.cache.disk import DiskStore
from tiercache.cache.manager import CacheCoordinator
from tiercache.cache.memory import MemoryStore
from tiercache.codecs import BytesCodec, ImageCodec
from tiercache.core import open_cache, resolve_config
from tiercache.errors.exceptions import CacheConfigError


class TestOpenCache:
    def test_builds_both_tiers(self, cache_dir):
        cache = open_cache(directory=cache_dir, memory_count_limit=3, memory_cost_limit_mb=1)
        assert isinstance(cache, CacheCoordinator)
        assert isinstance(cache.memory, MemoryStore)
        assert isinstance(cache.disk, DiskStore)
        assert cache.memory.count_limit == 3
        assert cache.memory.total_cost_limit == 1024 * 1024
        assert cache.disk.directory == cache_dir
        assert cache_dir.is_dir()

    def test_image_codec_settings(self, cache_dir):
        cache = open_cache(directory=cache_dir, image_format="png", image_quality=55)
        codec = cache.disk.codec
        assert isinstance(codec, ImageCodec)
        assert codec.format == "PNG"
        assert codec.quality == 55

    def test_bytes_codec(self, cache_dir):
        cache = open_cache(directory=cache_dir, codec="bytes")
        assert isinstance(cache.disk.codec, BytesCodec)

    def test_project_file_used(self, tmp_path, cache_dir):
        (tmp_path / "tiercache.yaml").write_text(f"directory: {cache_dir}\ncodec: bytes\n")
        cache = open_cache()
        assert cache.disk.directory == cache_dir

    async def test_round_trip(self, cache_dir):
        cache = open_cache(directory=cache_dir, codec="bytes")
        await cache.put("https://example.com/data.bin", b"payload")
        reopened = open_cache(directory=cache_dir, codec="bytes")
        assert await reopened.get("https://example.com/data.bin") == b"payload"


class TestResolveConfig:
    def test_invalid_setting_raises_config_error(self):
        with pytest.raises(CacheConfigError) as exc_info:
            resolve_config(image_quality=500)
        assert exc_info.value.setting == "image_quality"
        assert exc_info.value.value == 500

    def test_bad_env_value_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("TIERCACHE_MEMORY_COUNT_LIMIT", "lots")
        with pytest.raises(CacheConfigError):
            resolve_config()

    def test_unusable_directory_raises_config_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        with pytest.raises(CacheConfigError):
            open_cache(directory=blocker)
