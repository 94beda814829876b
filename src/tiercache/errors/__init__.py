"""Error handling — exception hierarchy for tiercache."""

from tiercache.errors.exceptions import CacheConfigError, TierCacheError

__all__ = [
    "TierCacheError",
    "CacheConfigError",
]
