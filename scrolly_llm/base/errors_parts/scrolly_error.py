"""
Structured base exception for the chat-completion client.

Every failure surfaced to callers (configuration, transport, capability,
catalog) derives from `ScrollyError` so the UI layer can render one
user-visible message and logs can carry one normalized `ErrorCode`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ScrollyError(Exception):
    """Represents a structured client error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for display.
        provider: Provider display name or endpoint involved, when known.
        model: Optional model id associated with the failure.
        retryable: Hint for upstream retry logic (not authoritative).
        raw: Underlying exception, kept for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: Optional[str] = None
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return the message, prefixed with provider/model when present."""
        if self.provider or self.model:
            return f"{self.provider or '-'}:{self.model or '-'} {self.code.value}: {self.message}"
        return f"{self.code.value}: {self.message}"


__all__ = ["ScrollyError"]
