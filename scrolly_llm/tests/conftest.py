"""Shared fixtures for the scrolly-llm test suite.

Every test runs with the ``SCROLLY_*`` environment cleared and no ``.env``
file, and the pooled HTTP clients are closed afterwards.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from scrolly_llm.base.http import close_all_clients
from scrolly_llm.catalog import ModelCatalog, default_catalog
from scrolly_llm.config.settings import ClientSettings
from scrolly_llm.persistence import InMemoryKeyValueStore

_ENV_VARS = (
    "SCROLLY_APP_TITLE",
    "SCROLLY_REFERER",
    "SCROLLY_STORAGE_KEY",
    "SCROLLY_DB_PATH",
    "SCROLLY_CATALOG_FILE",
    "SCROLLY_TEMPERATURE",
    "SCROLLY_LOG_LEVEL",
    "SCROLLY_TIMEOUT_CONNECT_SECONDS",
    "SCROLLY_TIMEOUT_READ_SECONDS",
    "SCROLLY_TIMEOUT_WRITE_SECONDS",
    "SCROLLY_TIMEOUT_POOL_SECONDS",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    yield
    close_all_clients()


@pytest.fixture()
def catalog() -> ModelCatalog:
    return default_catalog()


@pytest.fixture()
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def settings() -> ClientSettings:
    """Settings with fixed attribution headers, independent of the environment."""
    return ClientSettings(app_title="Test App", referer="http://localhost:8000")
