"""Cache statistics model."""

from __future__ import annotations

from pydantic import BaseModel


class CacheStats(BaseModel):
    """Aggregate counters and tier snapshots for a CacheCoordinator."""

    memory_hits: int = 0
    disk_hits: int = 0
    misses: int = 0
    stores: int = 0
    memory_entries: int = 0
    memory_cost_bytes: int = 0
    disk_entries: int = 0

    @property
    def hits(self) -> int:
        return self.memory_hits + self.disk_hits

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    @property
    def memory_cost_mb(self) -> float:
        return self.memory_cost_bytes / (1024 * 1024)
