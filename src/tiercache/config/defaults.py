"""Package-level default configuration values."""

from __future__ import annotations

from pathlib import Path
from typing import Any

# Disk tier
DEFAULT_CACHE_DIRECTORY = Path.home() / ".tiercache" / "cache"

# Memory tier
DEFAULT_MEMORY_COUNT_LIMIT = 100
DEFAULT_MEMORY_COST_LIMIT_MB = 50.0

# Codec
DEFAULT_CODEC = "image"
DEFAULT_IMAGE_FORMAT = "JPEG"
DEFAULT_IMAGE_QUALITY = 80

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "directory": DEFAULT_CACHE_DIRECTORY,
        "memory_count_limit": DEFAULT_MEMORY_COUNT_LIMIT,
        "memory_cost_limit_mb": DEFAULT_MEMORY_COST_LIMIT_MB,
        "codec": DEFAULT_CODEC,
        "image_format": DEFAULT_IMAGE_FORMAT,
        "image_quality": DEFAULT_IMAGE_QUALITY,
        "log_level": DEFAULT_LOG_LEVEL,
    }
