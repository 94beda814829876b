"""L2 disk store — one file per hashed key under a single directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from tiercache.cache.keys import hash_key, is_storage_token
from tiercache.codecs import ImageCodec, ObjectCodec
from tiercache.concurrency.rwlock import ReadWriteLock
from tiercache.errors.exceptions import CacheConfigError
from tiercache.storage.blob import BlobStore, LocalBlobStore

logger = logging.getLogger(__name__)

_DEFAULT_DIRECTORY = Path.home() / ".tiercache" / "cache"


class DiskStore:
    """Persistent store writing encoded objects to ``directory/<token>``.

    Reads run concurrently; writes, removals and clears are exclusive so a
    reader never observes a file mid-write. All I/O and codec failures are
    logged and reported as misses.
    """

    def __init__(
        self,
        directory: Path | str | None = None,
        blob_store: BlobStore | None = None,
        codec: ObjectCodec | None = None,
    ) -> None:
        self._directory = Path(directory) if directory is not None else _DEFAULT_DIRECTORY
        self._blobs = blob_store if blob_store is not None else LocalBlobStore()
        self._codec = codec if codec is not None else ImageCodec()
        self._lock = ReadWriteLock()
        try:
            self._blobs.create_directory(self._directory)
        except OSError as e:
            raise CacheConfigError(
                f"Cannot create cache directory {self._directory}: {e}",
                setting="directory",
                value=str(self._directory),
            ) from e

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def codec(self) -> ObjectCodec:
        return self._codec

    def path_for(self, key: str) -> Path:
        return self._directory / hash_key(key)

    async def read_bytes(self, key: str) -> bytes | None:
        path = self.path_for(key)
        async with self._lock.read():
            return await asyncio.to_thread(self._blobs.read_file, path)

    async def get(self, key: str) -> Any | None:
        data = await self.read_bytes(key)
        if data is None:
            logger.debug("Disk miss for %s", key)
            return None
        return await asyncio.to_thread(self._codec.decode, data)

    async def put(self, key: str, obj: Any) -> None:
        data = await asyncio.to_thread(self._codec.encode, obj)
        if data is None:
            logger.warning("Skipping disk write for %s: encoding failed", key)
            return
        await self.write_bytes(key, data)

    async def write_bytes(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        async with self._lock.write():
            written = await asyncio.to_thread(self._blobs.write_file, path, data)
        if not written:
            logger.warning("Disk write failed for %s", key)

    async def remove(self, key: str) -> None:
        path = self.path_for(key)
        async with self._lock.write():
            await asyncio.to_thread(self._blobs.delete_file, path)

    async def clear(self) -> None:
        async with self._lock.write():
            removed, failed = await asyncio.to_thread(self._delete_all)
        if failed:
            logger.warning("Cleared %d disk entries, %d could not be deleted", removed, failed)
        else:
            logger.debug("Cleared %d disk entries", removed)

    async def entry_count(self) -> int:
        async with self._lock.read():
            files = await asyncio.to_thread(self._blobs.list_files, self._directory)
        return sum(1 for f in files if is_storage_token(f.name))

    def _delete_all(self) -> tuple[int, int]:
        removed = failed = 0
        for path in self._blobs.list_files(self._directory):
            if self._blobs.delete_file(path):
                removed += 1
            else:
                failed += 1
        return removed, failed
