"""
Transport error for failed completion requests.

Raised when the endpoint answers with a non-2xx status (``status_code`` and
``reason`` are populated) or when the request fails at the network level
(``status_code`` is ``None`` and ``raw`` holds the httpx exception).
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .scrolly_error import ScrollyError


class TransportError(ScrollyError):
    """HTTP or network failure of a completion request."""

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.UNKNOWN,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            provider=provider,
            model=model,
            retryable=code in (ErrorCode.TRANSIENT, ErrorCode.RATE_LIMIT, ErrorCode.TIMEOUT),
            raw=raw,
        )
        self.status_code = status_code
        self.reason = reason


__all__ = ["TransportError"]
