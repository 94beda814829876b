from pathlib import Path

import pytest
from PIL import Image

from tiercache.config import hierarchy
from tiercache.storage.blob import LocalBlobStore


class CountingBlobStore(LocalBlobStore):
    """LocalBlobStore that records how often each operation runs."""

    def __init__(self) -> None:
        self.reads = 0
        self.writes = 0
        self.deletes = 0

    def read_file(self, path: Path) -> bytes | None:
        self.reads += 1
        return super().read_file(path)

    def write_file(self, path: Path, data: bytes) -> bool:
        self.writes += 1
        return super().write_file(path, data)

    def delete_file(self, path: Path) -> bool:
        self.deletes += 1
        return super().delete_file(path)


class FailingWriteBlobStore(LocalBlobStore):
    """Simulates a full or read-only disk."""

    def write_file(self, path: Path, data: bytes) -> bool:
        return False


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config files and TIERCACHE_* variables out of every test."""
    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "global-config.yaml")
    for env_key in hierarchy._ENV_MAP:
        monkeypatch.delenv(env_key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "cache"


@pytest.fixture
def counting_blobs():
    return CountingBlobStore()


@pytest.fixture
def failing_blobs():
    return FailingWriteBlobStore()


@pytest.fixture
def sample_image():
    """Small solid-colour RGB image."""
    return Image.new("RGB", (8, 6), color=(200, 30, 30))


@pytest.fixture
def other_image():
    return Image.new("RGB", (4, 4), color=(30, 30, 200))


@pytest.fixture
def sample_png_bytes():
    """Minimal valid PNG for testing (1x1 white pixel)."""
    import base64
    return base64.b64decode(
        "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR4"
        "nGP4z8BQDwAEgAF/pooBPQAAAABJRU5ErkJggg=="
    )
