"""Async reader/writer lock for stores with torn-read hazards."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class ReadWriteLock:
    """Shared/exclusive lock for asyncio tasks.

    Any number of readers may hold the lock together. A writer holds it
    alone. Once a writer is waiting, new readers queue behind it so a steady
    stream of reads cannot starve writes.
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0
        self._wakeups: set[asyncio.Task[None]] = set()

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer_active

    async def acquire_read(self) -> None:
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer_active and self._writers_waiting == 0
            )
            self._readers += 1

    async def release_read(self) -> None:
        # State changes before any await so a cancelled release still frees the lock
        self._readers -= 1
        if self._readers == 0:
            await self._wake_waiters()

    async def acquire_write(self) -> None:
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer_active and self._readers == 0
                )
            except BaseException:
                # Readers queued behind this writer must be released
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer_active = True

    async def release_write(self) -> None:
        self._writer_active = False
        await self._wake_waiters()

    async def _wake_waiters(self) -> None:
        """Notify waiters from a separate task that outlives a cancelled caller."""
        task = asyncio.ensure_future(self._notify_all())
        self._wakeups.add(task)
        task.add_done_callback(self._wakeups.discard)
        await asyncio.shield(task)

    async def _notify_all(self) -> None:
        async with self._cond:
            self._cond.notify_all()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        await self.acquire_read()
        try:
            yield
        finally:
            await self.release_read()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        await self.acquire_write()
        try:
            yield
        finally:
            await self.release_write()
