"""Map exceptions and HTTP statuses onto :class:`ErrorCode`.

``classify_exception`` looks at, in order: our own errors, httpx and builtin
timeouts, httpx connection failures, any HTTP status carried by the
exception, and finally keywords in its message. ``user_message`` gives the
text the CLI prints for a failure.
"""
from __future__ import annotations

from typing import Dict, Optional

import httpx

from .error_code import ErrorCode
from .scrolly_error import ScrollyError

_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    422: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    402: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    504: ErrorCode.TIMEOUT,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
}

# First match wins; "api key" must be tested before "invalid".
_MESSAGE_KEYWORDS = (
    ("timeout", ErrorCode.TIMEOUT),
    ("timed out", ErrorCode.TIMEOUT),
    ("unauthorized", ErrorCode.AUTH),
    ("forbidden", ErrorCode.AUTH),
    ("api key", ErrorCode.AUTH),
    ("not supported", ErrorCode.UNSUPPORTED),
    ("unsupported", ErrorCode.UNSUPPORTED),
    ("not found", ErrorCode.NOT_FOUND),
    ("unavailable", ErrorCode.UNAVAILABLE),
    ("invalid", ErrorCode.VALIDATION),
    ("malformed", ErrorCode.VALIDATION),
)


def _valid_status(value: object) -> Optional[int]:
    return value if isinstance(value, int) and 100 <= value <= 599 else None


def _extract_status(exc: Exception) -> Optional[int]:
    """Find an HTTP status on ``exc``, its ``status`` or its ``response``."""
    response = getattr(exc, "response", None)
    candidates = (
        getattr(exc, "status_code", None),
        getattr(exc, "status", None),
        getattr(response, "status_code", None) if response is not None else None,
    )
    for candidate in candidates:
        status = _valid_status(candidate)
        if status is not None:
            return status
    return None


def status_to_code(status: int) -> ErrorCode:
    """Categorize an HTTP status; unlisted 5xx count as server errors."""
    code = _HTTP_STATUS_MAP.get(status)
    if code is None:
        code = ErrorCode.SERVER_ERROR if 500 <= status <= 599 else ErrorCode.UNKNOWN
    return code


def _code_from_text(text: str) -> Optional[ErrorCode]:
    if "rate" in text and "limit" in text:
        return ErrorCode.RATE_LIMIT
    return next((code for word, code in _MESSAGE_KEYWORDS if word in text), None)


def classify_exception(exc: Exception) -> ErrorCode:
    """Return the :class:`ErrorCode` that best describes ``exc``."""
    if isinstance(exc, ScrollyError):
        return exc.code
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.NetworkError, httpx.RemoteProtocolError)):
        return ErrorCode.TRANSIENT
    status = _extract_status(exc)
    if status is not None:
        return status_to_code(status)
    return _code_from_text(str(exc).lower()) or ErrorCode.UNKNOWN


def user_message(exc: BaseException) -> str:
    if isinstance(exc, ScrollyError):
        return exc.message
    return str(exc) or type(exc).__name__


__all__ = [
    "classify_exception",
    "status_to_code",
    "user_message",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
