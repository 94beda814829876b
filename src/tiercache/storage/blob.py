"""Persistent blob interface and its local filesystem implementation."""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

_TMP_SUFFIX = ".tmp"


@runtime_checkable
class BlobStore(Protocol):
    """Narrow byte-addressable store the disk tier depends on.

    Every method except ``create_directory`` is total: failures come back as
    None / False / an empty list rather than exceptions.
    """

    def read_file(self, path: Path) -> bytes | None: ...

    def write_file(self, path: Path, data: bytes) -> bool: ...

    def delete_file(self, path: Path) -> bool: ...

    def list_files(self, directory: Path) -> list[Path]: ...

    def create_directory(self, path: Path) -> None: ...


class LocalBlobStore:
    """BlobStore on the local filesystem via pathlib."""

    def read_file(self, path: Path) -> bytes | None:
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("Failed to read %s: %s", path, e)
            return None

    def write_file(self, path: Path, data: bytes) -> bool:
        """Write via a temp file + rename so readers never see a partial file."""
        tmp_path: Path | None = None
        try:
            fd, name = tempfile.mkstemp(
                dir=path.parent, prefix=path.name + ".", suffix=_TMP_SUFFIX
            )
            tmp_path = Path(name)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.warning("Failed to write %s: %s", path, e)
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    tmp_path.unlink(missing_ok=True)
            return False
        return True

    def delete_file(self, path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning("Failed to delete %s: %s", path, e)
            return False
        return True

    def list_files(self, directory: Path) -> list[Path]:
        try:
            return sorted(p for p in directory.iterdir() if p.is_file())
        except OSError as e:
            logger.warning("Failed to list %s: %s", directory, e)
            return []

    def create_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)
