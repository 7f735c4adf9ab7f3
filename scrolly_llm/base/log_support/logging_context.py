"""Per-completion fields attached to every log event."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Identifies one completion in the log: gateway, model and request id.

    ``extra`` holds any further keys; ``None`` values never reach the output.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        out.update(self.extra or {})
        return {key: value for key, value in out.items() if value is not None}


__all__ = ["LogContext"]
