"""Pydantic model for cache configuration."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from tiercache.config.defaults import (
    DEFAULT_CACHE_DIRECTORY,
    DEFAULT_IMAGE_QUALITY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MEMORY_COST_LIMIT_MB,
    DEFAULT_MEMORY_COUNT_LIMIT,
)


class CodecKind(StrEnum):
    IMAGE = "image"
    BYTES = "bytes"


class ImageFormat(StrEnum):
    JPEG = "JPEG"
    PNG = "PNG"
    WEBP = "WEBP"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CacheConfig(BaseModel):
    """Resolved settings for building a CacheCoordinator."""

    model_config = {"extra": "ignore"}

    directory: Path = DEFAULT_CACHE_DIRECTORY
    memory_count_limit: int = Field(default=DEFAULT_MEMORY_COUNT_LIMIT, ge=0)
    memory_cost_limit_mb: float = Field(default=DEFAULT_MEMORY_COST_LIMIT_MB, ge=0)
    codec: CodecKind = CodecKind.IMAGE
    image_format: ImageFormat = ImageFormat.JPEG
    image_quality: int = Field(default=DEFAULT_IMAGE_QUALITY, ge=1, le=95)
    log_level: LogLevel = LogLevel(DEFAULT_LOG_LEVEL)

    @field_validator("directory", mode="before")
    @classmethod
    def _expand_directory(cls, value: object) -> object:
        if isinstance(value, str):
            return Path(value).expanduser()
        if isinstance(value, Path):
            return value.expanduser()
        return value

    @field_validator("image_format", "log_level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def memory_cost_limit_bytes(self) -> int:
        return int(self.memory_cost_limit_mb * 1024 * 1024)
