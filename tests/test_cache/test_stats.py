"""Tests for the cache statistics model."""

from tiercache.cache.stats import CacheStats


class TestCacheStats:
    def test_defaults(self):
        stats = CacheStats()
        assert stats.hits == 0
        assert stats.misses == 0
        assert stats.memory_entries == 0
        assert stats.disk_entries == 0

    def test_hits_sum_both_tiers(self):
        stats = CacheStats(memory_hits=3, disk_hits=2)
        assert stats.hits == 5

    def test_hit_rate_zero_when_no_requests(self):
        assert CacheStats().hit_rate == 0.0

    def test_hit_rate_calculation(self):
        stats = CacheStats(memory_hits=2, disk_hits=1, misses=1)
        assert stats.hit_rate == 0.75

    def test_memory_cost_mb(self):
        stats = CacheStats(memory_cost_bytes=2 * 1024 * 1024)
        assert stats.memory_cost_mb == 2.0
