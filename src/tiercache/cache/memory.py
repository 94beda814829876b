"""L1 in-memory LRU store with count and cost limits."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from tiercache.codecs import estimate_cost
from tiercache.errors.exceptions import CacheConfigError

logger = logging.getLogger(__name__)

_DEFAULT_COUNT_LIMIT = 100
_DEFAULT_TOTAL_COST_LIMIT = 50 * 1024 * 1024  # 50 MB


@dataclass(slots=True)
class _Entry:
    obj: Any
    cost: int


class MemoryStore:
    """Bounded LRU object store.

    Entries are evicted least-recently-used first until both ``count_limit``
    and ``total_cost_limit`` hold (0 disables a limit). Eviction is silent:
    this is a best-effort cache, so ``put`` never fails.
    """

    def __init__(
        self,
        count_limit: int = _DEFAULT_COUNT_LIMIT,
        total_cost_limit: int = _DEFAULT_TOTAL_COST_LIMIT,
        cost_fn: Callable[[Any], int] = estimate_cost,
    ) -> None:
        if count_limit < 0:
            raise CacheConfigError(
                f"count_limit must be >= 0, got {count_limit}",
                setting="count_limit",
                value=count_limit,
            )
        if total_cost_limit < 0:
            raise CacheConfigError(
                f"total_cost_limit must be >= 0, got {total_cost_limit}",
                setting="total_cost_limit",
                value=total_cost_limit,
            )
        self._count_limit = count_limit
        self._total_cost_limit = total_cost_limit
        self._cost_fn = cost_fn
        self._store: OrderedDict[str, _Entry] = OrderedDict()
        self._total_cost = 0
        self._lock = asyncio.Lock()

    @property
    def count_limit(self) -> int:
        return self._count_limit

    @property
    def total_cost_limit(self) -> int:
        return self._total_cost_limit

    @property
    def total_cost(self) -> int:
        return self._total_cost

    def __len__(self) -> int:
        return len(self._store)

    async def get(self, key: str) -> Any | None:
        async with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            # Move to end (most recently used)
            self._store.move_to_end(key)
            return entry.obj

    async def put(self, key: str, obj: Any) -> None:
        cost = self._cost_of(key, obj)
        async with self._lock:
            self._remove(key)
            if self._total_cost_limit and cost > self._total_cost_limit:
                logger.debug(
                    "Not caching %s in memory: cost %d exceeds limit %d",
                    key, cost, self._total_cost_limit,
                )
                return
            self._store[key] = _Entry(obj=obj, cost=cost)
            self._total_cost += cost
            self._evict_to_limits()

    async def remove(self, key: str) -> None:
        async with self._lock:
            self._remove(key)

    async def clear(self) -> None:
        async with self._lock:
            self._store.clear()
            self._total_cost = 0

    def _cost_of(self, key: str, obj: Any) -> int:
        try:
            return max(0, int(self._cost_fn(obj)))
        except Exception as e:
            logger.warning("Cost estimate failed for %s, using getsizeof: %s", key, e)
            return sys.getsizeof(obj)

    def _remove(self, key: str) -> None:
        entry = self._store.pop(key, None)
        if entry is not None:
            self._total_cost -= entry.cost

    def _over_limits(self) -> bool:
        if self._count_limit and len(self._store) > self._count_limit:
            return True
        return bool(self._total_cost_limit and self._total_cost > self._total_cost_limit)

    def _evict_to_limits(self) -> None:
        while self._store and self._over_limits():
            key, entry = self._store.popitem(last=False)
            self._total_cost -= entry.cost
            logger.debug("Evicted %s from memory (cost %d)", key, entry.cost)
