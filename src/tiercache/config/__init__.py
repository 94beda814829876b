"""Configuration — defaults, schema and layered loading."""

from tiercache.config.hierarchy import load_config_hierarchy
from tiercache.config.schema import CacheConfig, CodecKind

__all__ = ["CacheConfig", "CodecKind", "load_config_hierarchy"]
