"""Storage token derivation — content-addressed filenames for cache keys."""

from __future__ import annotations

import hashlib
import re

_TOKEN_PATTERN = re.compile(r"^[0-9a-f]{64}$")


def hash_key(key: str) -> str:
    """Map a logical cache key (usually a URL) to a SHA256 storage token.

    The token is 64 lowercase hex characters: fixed length, free of path
    separators and safe on case-insensitive filesystems.
    """
    return hashlib.sha256(key.encode("utf-8")).hexdigest()


def is_storage_token(name: str) -> bool:
    """Return True if a filename looks like a token produced by hash_key."""
    return bool(_TOKEN_PATTERN.match(name))
