"""tiercache — two-tier (memory + disk) object cache."""

from tiercache.cache import CacheCoordinator, CacheStats, DiskStore, MemoryStore, hash_key
from tiercache.core import open_cache

__all__ = [
    "CacheCoordinator",
    "CacheStats",
    "DiskStore",
    "MemoryStore",
    "hash_key",
    "open_cache",
]
