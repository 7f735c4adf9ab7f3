"""Shared fixtures for SQLite persistence tests.

Provides a ``conn`` fixture backed by an isolated on-disk database per test,
closed after the test completes.
"""
from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Iterator

import pytest

from scrolly_llm.persistence.sqlite.engine import create_connection, init_schema


@pytest.fixture()
def conn(tmp_path: Path) -> Iterator[sqlite3.Connection]:
    connection = create_connection(str(tmp_path / "scrolly.db"))
    init_schema(connection)
    try:
        yield connection
    finally:
        connection.close()
