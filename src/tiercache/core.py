"""Top-level entry points: build a CacheCoordinator from configuration."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from tiercache.cache.disk import DiskStore
from tiercache.cache.manager import CacheCoordinator
from tiercache.cache.memory import MemoryStore
from tiercache.codecs import BytesCodec, ImageCodec, ObjectCodec
from tiercache.config.hierarchy import load_config_hierarchy
from tiercache.config.schema import CacheConfig, CodecKind
from tiercache.errors.exceptions import CacheConfigError

logger = logging.getLogger(__name__)


def resolve_config(**overrides: Any) -> CacheConfig:
    """Merge every config layer and validate the result.

    Raises CacheConfigError when a setting fails validation.
    """
    raw = load_config_hierarchy(**overrides)
    try:
        return CacheConfig(**raw)
    except ValidationError as e:
        first = e.errors()[0]
        setting = ".".join(str(part) for part in first.get("loc", ()))
        raise CacheConfigError(
            f"Invalid cache configuration: {e}",
            setting=setting or None,
            value=first.get("input"),
        ) from e


def build_codec(config: CacheConfig) -> ObjectCodec:
    if config.codec == CodecKind.BYTES:
        return BytesCodec()
    return ImageCodec(format=config.image_format.value, quality=config.image_quality)


def create_coordinator(config: CacheConfig) -> CacheCoordinator:
    """Compose memory and disk tiers according to ``config``."""
    memory = MemoryStore(
        count_limit=config.memory_count_limit,
        total_cost_limit=config.memory_cost_limit_bytes,
    )
    disk = DiskStore(directory=config.directory, codec=build_codec(config))
    logger.info(
        "Cache ready: %s (memory: %d entries / %.1f MB, codec: %s)",
        config.directory,
        config.memory_count_limit,
        config.memory_cost_limit_mb,
        config.codec.value,
    )
    return CacheCoordinator(memory=memory, disk=disk)


def open_cache(**overrides: Any) -> CacheCoordinator:
    """Resolve configuration (defaults → files → env → overrides) and build a cache."""
    return create_coordinator(resolve_config(**overrides))
