"""In-memory implementation of :class:`KeyValueStore`.

Suitable for tests and for embedding the client in a process that manages
persistence itself. Not shared between instances.
"""

from __future__ import annotations

from typing import Dict, Optional


class InMemoryKeyValueStore:
    """Dictionary-backed key/value store.

    ``writes`` counts ``set``/``delete`` calls so tests can assert that an
    operation left storage untouched.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        self._data[key] = value

    def delete(self, key: str) -> None:
        self.writes += 1
        self._data.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._data)


__all__ = ["InMemoryKeyValueStore"]
