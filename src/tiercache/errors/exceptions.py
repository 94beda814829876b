"""Custom exception hierarchy for tiercache."""

from __future__ import annotations

from typing import Any


class TierCacheError(Exception):
    """Base exception for all tiercache errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class CacheConfigError(TierCacheError):
    """Configuration error — raised at construction time only.

    Examples: cache directory path points at a file, directory cannot be
    created, negative memory limits.
    """

    def __init__(
        self,
        message: str = "",
        setting: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.setting = setting
        self.value = value
