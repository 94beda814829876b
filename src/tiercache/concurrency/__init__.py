"""Concurrency — async locking primitives for the cache tiers."""

from tiercache.concurrency.rwlock import ReadWriteLock

__all__ = ["ReadWriteLock"]
