"""One-line JSON output for the shared ``scrolly`` logger.

Messages produced by ``log_event`` are themselves JSON objects; the
formatter decodes them and merges their keys into the output line rather
than nesting an escaped string.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# Attribute names every LogRecord has; anything else came in through ``extra=``.
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime", "taskName"}


def _as_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        value = json.loads(text)
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


class JsonFormatter(logging.Formatter):
    """Render each record as a flat JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        text = record.getMessage()
        line: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
            "msg": text,
        }
        event = _as_object(text)
        if event is not None:
            line.update(event)
            # cli.* events are read in a terminal; the merged keys suffice.
            if str(event.get("event", "")).startswith("cli."):
                del line["msg"]
        if record.exc_info:
            line["exc"] = self.formatException(record.exc_info)
        extras = {
            key: value
            for key, value in vars(record).items()
            if not key.startswith("_") and key not in _STANDARD_ATTRS
        }
        for key, value in extras.items():
            line.setdefault(key, value)
        return json.dumps(line, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
