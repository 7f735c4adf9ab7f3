"""Structured logging helpers."""
from __future__ import annotations

import json
import logging

from scrolly_llm.base.log_support import JsonFormatter, LogContext
from scrolly_llm.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)


class _ListHandler(logging.Handler):
    """Capture log messages into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def _capture(name: str):
    logger = get_logger(name)
    handler = _ListHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger, handler


def test_parse_level_variants():
    assert _parse_level(None) == logging.WARNING  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_get_logger_prefixes_names():
    assert get_logger("streaming").name == "scrolly.streaming"  # nosec B101
    assert get_logger("scrolly.config").name == "scrolly.config"  # nosec B101


def test_log_event_drops_none_and_merges_context():
    logger, handler = _capture("test.log_event")
    try:
        log_event(logger, "stream.start", LogContext(provider="OpenRouter", model="m"), chars=3, skipped=None)
    finally:
        logger.removeHandler(handler)
    payload = json.loads(handler.messages[0])
    assert payload["event"] == "stream.start"  # nosec B101
    assert payload["provider"] == "OpenRouter" and payload["model"] == "m"  # nosec B101
    assert payload["chars"] == 3  # nosec B101
    assert "skipped" not in payload  # nosec B101


def test_normalized_event_has_canonical_keys():
    logger, handler = _capture("test.normalized")
    try:
        normalized_log_event(logger, "stream.end", None, phase="finalize", emitted=2, error_code="timeout", phase_extra="x")
        normalized_log_event(logger, "stream.end", None, phase="finalize")
    finally:
        logger.removeHandler(handler)
    first, second = (json.loads(m) for m in handler.messages)
    assert set(REQUIRED_NORMALIZED_KEYS) <= set(first)  # nosec B101
    assert first["emitted"] == 2 and first["phase_extra"] == "x"  # nosec B101
    assert "error_code" not in second and second["attempt"] is None  # nosec B101


def test_disabled_level_is_not_serialized():
    logger = get_logger("test.disabled")
    logger.setLevel(logging.ERROR)

    class Explodes:
        def __str__(self):
            raise AssertionError("serialized")

    log_event(logger, "noop", level=logging.DEBUG, value=Explodes())


def test_json_formatter_hoists_event_keys():
    record = logging.LogRecord("scrolly.x", logging.INFO, __file__, 1, json.dumps({"event": "e", "n": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e" and out["n"] == 1 and out["level"] == "INFO"  # nosec B101


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "scrolly.log"
    logger = configure_logger(level="INFO", file_path=str(path))
    try:
        log_event(get_logger("test.file"), "file.event", answer=42)
        for h in logger.handlers:
            h.flush()
        assert "file.event" in path.read_text(encoding="utf-8")  # nosec B101
    finally:
        configure_logger(level=logging.WARNING, file_path=None)
