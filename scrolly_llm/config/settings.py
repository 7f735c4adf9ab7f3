"""Process settings for the client.

Merge order (later wins):
    1. Built-in defaults (:mod:`scrolly_llm.config.defaults`)
    2. A ``.env`` file (path from ``DOTENV_FILE``, default ``./.env``); it only
       fills variables that are unset or hold placeholder values
    3. Environment variables
    4. In-code overrides passed to :func:`get_settings`

Environment variables
---------------------
SCROLLY_APP_TITLE, SCROLLY_REFERER, SCROLLY_STORAGE_KEY, SCROLLY_DB_PATH,
SCROLLY_CATALOG_FILE, SCROLLY_TEMPERATURE
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .defaults import APP_TITLE, DEFAULT_DB_PATH, DEFAULT_REFERER, STORAGE_KEY

_DOTENV_LOADED = False

ENV_FIELD_MAP = {
    "app_title": "SCROLLY_APP_TITLE",
    "referer": "SCROLLY_REFERER",
    "storage_key": "SCROLLY_STORAGE_KEY",
    "db_path": "SCROLLY_DB_PATH",
    "catalog_file": "SCROLLY_CATALOG_FILE",
    "temperature": "SCROLLY_TEMPERATURE",
}


@dataclass(frozen=True)
class ClientSettings:
    """Resolved settings.

    Attributes:
        app_title: Sent as ``X-Title`` on completion requests.
        referer: Sent as ``HTTP-Referer`` (the origin of the calling app).
        storage_key: Key of the persisted connection record.
        db_path: SQLite file used by the CLI for durable storage.
        catalog_file: Optional JSON/YAML catalog document.
        temperature: Optional temperature overriding the catalog default.
    """

    app_title: str = APP_TITLE
    referer: str = DEFAULT_REFERER
    storage_key: str = STORAGE_KEY
    db_path: str = DEFAULT_DB_PATH
    catalog_file: Optional[str] = None
    temperature: Optional[float] = None


def is_placeholder(val: Optional[str]) -> bool:
    """True for template values such as ``changeme`` or ``<your-key>``."""
    text = (val or "").strip().lower()
    if not text:
        return False
    return any(marker in text for marker in ("placeholder", "changeme")) or (text[0] == "<" and text[-1] == ">")


def _parse_dotenv_line(line: str) -> Optional[Tuple[str, str]]:
    """Split ``KEY=VALUE`` (optionally quoted); blanks and comments give ``None``."""
    text = line.strip()
    if text.startswith("#"):
        return None
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return key, value


def _load_dotenv_once() -> None:
    """Apply ``DOTENV_FILE`` (default ``./.env``) to unset or placeholder variables, once per process."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    env_file = Path(os.getenv("DOTENV_FILE", ".env"))
    if not env_file.is_file():
        return
    for entry in env_file.read_text(encoding="utf-8").splitlines():
        parsed = _parse_dotenv_line(entry)
        if parsed is None:
            continue
        key, value = parsed
        current = os.environ.get(key)
        if current is None or is_placeholder(current):
            os.environ[key] = value


def _parse_temperature(raw: str) -> Optional[float]:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if 0.0 <= value <= 2.0 else None


def _env_overrides() -> Dict[str, Any]:
    found: Dict[str, Any] = {}
    for field_name, env_name in ENV_FIELD_MAP.items():
        raw = (os.getenv(env_name) or "").strip()
        if not raw:
            continue
        value = _parse_temperature(raw) if field_name == "temperature" else raw
        if value is not None:
            found[field_name] = value
    return found


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> ClientSettings:
    """Return merged :class:`ClientSettings` (see module docstring for order)."""
    _load_dotenv_once()
    explicit = {k: v for k, v in (overrides or {}).items() if v is not None}
    return replace(ClientSettings(), **{**_env_overrides(), **explicit})


__all__ = ["ClientSettings", "get_settings", "is_placeholder", "ENV_FIELD_MAP"]
