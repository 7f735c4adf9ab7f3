"""Helpers shared by the CLI handlers: log level names, quiet streaming, prompt input."""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from ...base.errors import ConfigurationError
from ...base.logging import BASE_LOGGER_NAME

_LEVEL_ALIASES = {
    "verbose": "DEBUG",
    "warn": "WARNING",
    "quiet": "ERROR",
    "silent": "CRITICAL",
}
_CANONICAL_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_verbosity(value: str) -> Optional[str]:
    """Turn ``--log-level`` input into a level name, or ``None`` if unrecognized.

    Level names are accepted in any case, as are the aliases ``verbose``,
    ``warn``, ``quiet`` and ``silent``.
    """
    word = value.strip()
    alias = _LEVEL_ALIASES.get(word.lower())
    if alias is not None:
        return alias
    return word.upper() if word.upper() in _CANONICAL_LEVELS else None


@contextlib.contextmanager
def suppress_console_logs() -> Iterator[None]:
    """Keep stderr log lines out of streamed completion text.

    Console handlers of the ``scrolly`` logger are detached for the duration;
    log files set up by ``configure_logger`` keep receiving records.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    detached: List[Tuple[logging.Handler, int]] = []
    try:
        for handler in list(base.handlers):
            if getattr(handler, "_scrolly_file_handler", False):
                continue
            if isinstance(handler, logging.StreamHandler):
                handler.flush()
                detached.append((handler, handler.level))
                base.removeHandler(handler)
        yield
    finally:
        for handler, level in detached:
            handler.setLevel(level)
            base.addHandler(handler)


def read_prompt(text: Optional[str], path: Optional[str]) -> str:
    """Return the prompt text from ``--prompt-file`` or ``--prompt``.

    Raises:
        ConfigurationError: If neither yields non-blank text.
    """
    if path:
        try:
            text = Path(path).expanduser().read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read prompt file: {path}") from e
    if not text or not text.strip():
        raise ConfigurationError("A prompt is required")
    return text


__all__ = ["parse_verbosity", "suppress_console_logs", "read_prompt"]
