"""scrolly_llm.config.defaults
===========================

Small, stable default values shared by the configuration, persistence and
transport layers. Every value can be overridden through the environment (see
:mod:`scrolly_llm.config.settings`).

Only plain constants live here; this module imports nothing from the rest of
the package except the catalog's default temperature.
"""

from __future__ import annotations

from ..catalog.defaults import DEFAULT_TEMPERATURE

# ---- Durable storage ----
# Storage key holding the JSON record {baseUrl, apiKey, selectedModel}.
STORAGE_KEY = "csv_scrollytelling_llm_config"
# SQLite database used by the CLI for durable storage.
DEFAULT_DB_PATH = "~/.scrolly_llm/scrolly.db"

# ---- Request attribution headers ----
# Some gateways (OpenRouter and its mirrors) attribute traffic by these.
APP_TITLE = "CSV Scrollytelling Generator"
DEFAULT_REFERER = "http://localhost"

# ---- Configuration prompt copy ----
PROMPT_TITLE = "OpenRouter API Configuration"
PROMPT_HELP = (
    "Select an OpenRouter-compatible provider and enter your API key. "
    "You'll be able to choose from our curated selection of top AI models."
)

# ---- SQLite ----
SQLITE_BUSY_TIMEOUT_MS = 5000
SQLITE_JOURNAL_MODE = "WAL"
SQLITE_SYNCHRONOUS = "NORMAL"


__all__ = [
    "DEFAULT_TEMPERATURE",
    "STORAGE_KEY",
    "DEFAULT_DB_PATH",
    "APP_TITLE",
    "DEFAULT_REFERER",
    "PROMPT_TITLE",
    "PROMPT_HELP",
    "SQLITE_BUSY_TIMEOUT_MS",
    "SQLITE_JOURNAL_MODE",
    "SQLITE_SYNCHRONOUS",
]
