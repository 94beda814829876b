"""Cache subsystem — two-tier (memory + disk) with content-addressed keys."""

from tiercache.cache.disk import DiskStore
from tiercache.cache.keys import hash_key, is_storage_token
from tiercache.cache.manager import CacheCoordinator
from tiercache.cache.memory import MemoryStore
from tiercache.cache.protocol import ObjectStore
from tiercache.cache.stats import CacheStats

__all__ = [
    "CacheCoordinator",
    "CacheStats",
    "DiskStore",
    "MemoryStore",
    "ObjectStore",
    "hash_key",
    "is_storage_token",
]
