"""Durable storage contracts.

The client persists exactly one record (connection credentials and the
selected model), so the storage abstraction is a plain string key/value
store, the same surface a browser's ``localStorage`` offers.

Failure semantics:
- ``get`` returns ``None`` for missing keys; it never raises for absence.
- Implementations raise only for genuine I/O failures.
- No cross-process locking: read-then-write, last writer wins.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """String key/value storage surviving across sessions."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value for ``key`` or ``None``."""
        ...

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value stored under ``key``."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key`` if present (idempotent)."""
        ...


__all__ = ["KeyValueStore"]
