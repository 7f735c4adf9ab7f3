"""Logging setup shared by every module of the client.

All records flow through one ``scrolly`` logger that writes a JSON object
per line to stderr. Modules ask :func:`get_logger` for a child logger and
report through :func:`log_event` (free-form fields) or
:func:`normalized_log_event` (fixed lifecycle keys), so downstream tooling
can rely on flat, stable payloads.

``SCROLLY_LOG_LEVEL`` selects the level; without it the library stays at
``WARNING`` and only the CLI turns it up. API keys never reach these helpers.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Iterable, Mapping, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "scrolly"
LEVEL_ENV = "SCROLLY_LOG_LEVEL"

_READY_MARK = "_scrolly_logger_initialized"
_CONSOLE_MARK = "_scrolly_console_handler"
_FILE_MARK = "_scrolly_file_handler"
_TEXT_LAYOUT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_ROTATE_BYTES = 5 * 1024 * 1024
_ROTATE_KEEP = 3

_LEVEL_NAMES = {
    name: getattr(logging, name)
    for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
}
_LEVEL_NAMES["WARN"] = logging.WARNING


def _parse_level(value: str | None, default: int = logging.WARNING) -> int:
    """Translate a level name such as ``"debug"`` into its number."""
    key = (value or "").strip().upper()
    return _LEVEL_NAMES.get(key, default)


def _formatter(json_mode: bool) -> logging.Formatter:
    if json_mode:
        return JsonFormatter()
    return logging.Formatter(_TEXT_LAYOUT)


def _marked(handlers: Iterable[logging.Handler], mark: str) -> list[logging.Handler]:
    return [h for h in handlers if getattr(h, mark, False)]


def _discard(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.removeHandler(handler)
    with contextlib.suppress(OSError):
        handler.close()


def _install(logger: logging.Logger, json_mode: bool, level: int) -> None:
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_formatter(json_mode))
    console.setLevel(level)
    setattr(console, _CONSOLE_MARK, True)
    logger.handlers[:] = [console]
    logger.setLevel(level)
    logger.propagate = False
    setattr(logger, _READY_MARK, True)


def _refresh(logger: logging.Logger) -> None:
    """Point console handlers at the current stderr and apply an env level."""
    pinned = os.getenv(LEVEL_ENV)
    if pinned:
        logger.setLevel(_parse_level(pinned, default=logger.level))
    for console in _marked(logger.handlers, _CONSOLE_MARK):
        # pytest's capsys swaps sys.stderr between tests.
        if isinstance(console, logging.StreamHandler):
            with contextlib.suppress(ValueError):
                console.setStream(sys.stderr)
        if pinned:
            console.setLevel(logger.level)


def _base_logger(json_mode: bool = True, level: int = logging.WARNING) -> logging.Logger:
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _READY_MARK, False):
        _refresh(logger)
    else:
        _install(logger, json_mode, _parse_level(os.getenv(LEVEL_ENV), default=level))
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.WARNING) -> logging.Logger:
    """Return a logger under the ``scrolly`` hierarchy.

    Names without the ``scrolly.`` prefix get it added, so ``"streaming"``
    and ``"scrolly.streaming"`` resolve to the same logger.
    """
    base = _base_logger(json_mode, level)
    if name == BASE_LOGGER_NAME:
        return base
    prefix = BASE_LOGGER_NAME + "."
    child = logging.getLogger(name if name.startswith(prefix) else prefix + name)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Adjust the shared logger after start-up.

    ``level`` (number or name) applies to the logger and all its handlers;
    ``None`` leaves it alone. ``file_path`` attaches a rotating log file,
    replacing any file attached before; ``None`` detaches it. ``json_mode``
    picks the formatter for the file handler.
    """
    logger = _base_logger(json_mode)
    if isinstance(level, str):
        level = _parse_level(level, default=logger.level)
    if level is not None:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    current = _marked(logger.handlers, _FILE_MARK)
    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    reused = False
    for handler in current:
        if target is not None and getattr(handler, "baseFilename", None) == target:
            handler.setFormatter(_formatter(json_mode))
            handler.setLevel(logger.level)
            reused = True
        else:
            _discard(logger, handler)
    if target is None or reused:
        return logger

    os.makedirs(os.path.dirname(target), exist_ok=True)
    sink = RotatingFileHandler(target, maxBytes=_ROTATE_BYTES, backupCount=_ROTATE_KEEP, encoding="utf-8")
    sink.setFormatter(_formatter(json_mode))
    sink.setLevel(logger.level)
    setattr(sink, _FILE_MARK, True)
    logger.addHandler(sink)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Log ``event`` with ``fields`` as a single JSON message.

    Context fields come first and explicit fields override them. ``None``
    values are omitted unless ``keep_none`` is true. Disabled levels cost
    nothing beyond the level check.
    """
    if not logger.isEnabledFor(level):
        return
    record: Dict[str, Any] = {"event": event}
    if ctx:
        record.update(ctx.to_dict())
    record.update((k, v) for k, v in fields.items() if keep_none or v is not None)
    logger.log(level, json.dumps(record, ensure_ascii=False, default=str))


# Keys every lifecycle event carries.
REQUIRED_NORMALIZED_KEYS = ("phase", "attempt", "error_code", "emitted")


def _loggable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return dict(value)
    return repr(value)


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: int | bool | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Log a lifecycle event (``stream.start``, ``stream.end``...).

    ``phase``, ``attempt`` and ``emitted`` appear even when null;
    ``error_code`` only when given. Extras are added after them and cannot
    shadow them.
    """
    canonical: Dict[str, Any] = {"phase": phase, "attempt": attempt, "emitted": emitted}
    if error_code is not None:
        canonical["error_code"] = error_code
    extras = {k: _loggable(v) for k, v in extra_fields.items() if v is not None and k not in canonical}
    log_event(logger, event, ctx, level=level, keep_none=True, **extras, **canonical)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
