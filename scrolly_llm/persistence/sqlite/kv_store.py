"""SQLite-backed implementation of :class:`KeyValueStore`.

Each write is committed immediately: the store holds a single small record
and callers expect it to survive a crash right after ``set``.
"""

from __future__ import annotations

import sqlite3
from typing import Optional

from .engine import create_connection, init_schema


class SqliteKeyValueStore:
    """Key/value store persisted in the ``kv_store`` table.

    Parameters
    ----------
    conn:
        Open connection with the schema initialized (see
        :func:`~scrolly_llm.persistence.sqlite.engine.init_schema`).
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    @classmethod
    def open(cls, db_path: Optional[str] = None) -> "SqliteKeyValueStore":
        """Open (creating if needed) the database at ``db_path``."""
        conn = create_connection(db_path)
        init_schema(conn)
        return cls(conn)

    def get(self, key: str) -> Optional[str]:
        row = self.conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        self.conn.execute(
            "INSERT INTO kv_store(key, value, updated_at) VALUES(?, ?, CURRENT_TIMESTAMP) "
            "ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=CURRENT_TIMESTAMP",
            (key, value),
        )
        self.conn.commit()

    def delete(self, key: str) -> None:
        self.conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "SqliteKeyValueStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["SqliteKeyValueStore"]
