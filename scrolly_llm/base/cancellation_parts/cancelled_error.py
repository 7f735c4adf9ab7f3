"""Cancellation error type.

Raised by a completion stream that observes a cancellation request. Part of
the client error taxonomy so callers can catch every failure of a completion
attempt through ``ScrollyError`` and still tell cancellation apart.
"""

from __future__ import annotations

from ..errors_parts.error_code import ErrorCode
from ..errors_parts.scrolly_error import ScrollyError


class CancelledError(ScrollyError):
    """Raised when a completion is cancelled cooperatively."""

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(code=ErrorCode.CANCELLED, message=reason or "operation cancelled")


__all__ = ["CancelledError"]
