"""Store protocol shared by the memory and disk tiers."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ObjectStore(Protocol):
    """Async key → object store.

    Implementations never raise for a missing key: ``get`` returns None and
    ``remove`` is a no-op.
    """

    async def get(self, key: str) -> Any | None:
        """Return the cached object for ``key``, or None on a miss."""
        ...

    async def put(self, key: str, obj: Any) -> None:
        """Store ``obj`` under ``key``, replacing any previous value."""
        ...

    async def remove(self, key: str) -> None:
        """Drop the entry for ``key`` if present."""
        ...

    async def clear(self) -> None:
        """Drop every entry."""
        ...
