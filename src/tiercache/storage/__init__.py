"""Storage — persistent blob interface used by the disk tier."""

from tiercache.storage.blob import BlobStore, LocalBlobStore

__all__ = ["BlobStore", "LocalBlobStore"]
