"""Cache coordinator — orchestrates L1 (memory) and L2 (disk) tiers."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from tiercache.cache.disk import DiskStore
from tiercache.cache.memory import MemoryStore
from tiercache.cache.protocol import ObjectStore
from tiercache.cache.stats import CacheStats

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheCoordinator:
    """Two-tier cache: L1 in-memory → L2 on-disk.

    Lookups hit memory first and fall back to disk; a disk hit is promoted
    into memory. Stores write memory then disk. Each tier is best-effort: a
    failure in one is logged and never undoes or blocks the other.
    """

    def __init__(
        self,
        memory: ObjectStore | None = None,
        disk: ObjectStore | None = None,
    ) -> None:
        self._l1 = memory if memory is not None else MemoryStore()
        self._l2 = disk if disk is not None else DiskStore()
        self._stats = CacheStats()

    @property
    def memory(self) -> ObjectStore:
        return self._l1

    @property
    def disk(self) -> ObjectStore:
        return self._l2

    async def get(self, key: str) -> Any | None:
        """Look up a key. L1 first, then L2 (with promotion)."""
        obj = await self._attempt("memory get", self._l1.get(key))
        if obj is not None:
            self._stats.memory_hits += 1
            return obj

        obj = await self._attempt("disk get", self._l2.get(key))
        if obj is not None:
            # Promote to L1; L2 already holds it
            await self._attempt("promotion", self._l1.put(key, obj))
            self._stats.disk_hits += 1
            logger.debug("Promoted %s from disk to memory", key)
            return obj

        self._stats.misses += 1
        return None

    async def put(self, key: str, obj: Any) -> None:
        """Store in L1 and L2."""
        await self._attempt("memory put", self._l1.put(key, obj))
        await self._attempt("disk put", self._l2.put(key, obj))
        self._stats.stores += 1

    async def remove(self, key: str) -> None:
        await self._attempt("memory remove", self._l1.remove(key))
        await self._attempt("disk remove", self._l2.remove(key))

    async def clear(self) -> None:
        """Clear both tiers and reset statistics."""
        await self._attempt("memory clear", self._l1.clear())
        await self._attempt("disk clear", self._l2.clear())
        self._stats = CacheStats()

    async def get_or_load(
        self,
        key: str,
        loader: Callable[[], Awaitable[Any]],
    ) -> Any | None:
        """Return the cached object, or await ``loader`` on a full miss.

        A non-None loader result is stored in both tiers before returning.
        Errors raised by the loader propagate to the caller.
        """
        obj = await self.get(key)
        if obj is not None:
            return obj
        loaded = await loader()
        if loaded is not None:
            await self.put(key, loaded)
        return loaded

    async def stats(self) -> CacheStats:
        """Return counters plus a snapshot of tier sizes."""
        snapshot = self._stats.model_copy()
        if isinstance(self._l1, MemoryStore):
            snapshot.memory_entries = len(self._l1)
            snapshot.memory_cost_bytes = self._l1.total_cost
        if isinstance(self._l2, DiskStore):
            snapshot.disk_entries = await self._l2.entry_count()
        return snapshot

    @staticmethod
    async def _attempt(action: str, pending: Awaitable[T]) -> T | None:
        try:
            return await pending
        except Exception:
            logger.warning("Cache %s failed", action, exc_info=True)
            return None
