"""Durable storage for the client's connection record.

Public API:
    - :class:`KeyValueStore` protocol
    - :class:`InMemoryKeyValueStore`, :class:`SqliteKeyValueStore`
    - :class:`PersistedConfig`, :class:`PersistedConfigRepository`
"""

from .interfaces import KeyValueStore
from .memory_store import InMemoryKeyValueStore
from .sqlite import SqliteKeyValueStore
from .config_store import PersistedConfig, PersistedConfigRepository

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SqliteKeyValueStore",
    "PersistedConfig",
    "PersistedConfigRepository",
]
