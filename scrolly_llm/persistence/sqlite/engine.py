"""Opening the local SQLite database that holds the saved configuration.

Connections get WAL journaling, ``synchronous=NORMAL`` and a busy timeout so
that two CLI processes touching the same file wait for each other instead of
failing with ``database is locked``. Nothing runs at import time.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ...config.defaults import (
    DEFAULT_DB_PATH,
    SQLITE_BUSY_TIMEOUT_MS,
    SQLITE_JOURNAL_MODE,
    SQLITE_SYNCHRONOUS,
)

_PRAGMAS = (
    ("journal_mode", SQLITE_JOURNAL_MODE),
    ("synchronous", SQLITE_SYNCHRONOUS),
    ("busy_timeout", SQLITE_BUSY_TIMEOUT_MS),
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


def get_db_path(db_path: Optional[str] = None) -> Path:
    """Resolve ``db_path`` (or the default location), expanding ``~``."""
    return Path(db_path or DEFAULT_DB_PATH).expanduser()


def create_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Connect to the database file, creating its directory if needed."""
    path = get_db_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    for name, value in _PRAGMAS:
        conn.execute(f"PRAGMA {name}={value};")
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    conn.execute(_SCHEMA)
    conn.commit()


@contextmanager
def db_session(db_path: Optional[str] = None) -> Iterator[sqlite3.Connection]:
    """Connection scoped to a ``with`` block.

    The schema is ensured on entry. A clean exit commits; an exception rolls
    back and propagates. The connection is closed either way.
    """
    conn = create_connection(db_path)
    try:
        init_schema(conn)
        yield conn
    except Exception:
        conn.rollback()
        raise
    else:
        conn.commit()
    finally:
        conn.close()


__all__ = ["get_db_path", "create_connection", "init_schema", "db_session"]
