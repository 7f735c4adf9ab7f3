"""SQLite persistence backend."""

from .engine import create_connection, db_session, get_db_path, init_schema
from .kv_store import SqliteKeyValueStore

__all__ = ["create_connection", "db_session", "get_db_path", "init_schema", "SqliteKeyValueStore"]
