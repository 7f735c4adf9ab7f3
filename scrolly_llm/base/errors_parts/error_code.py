"""Failure categories shared by every error this client raises.

The string values appear in log events (``error_code``) and must not change.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Why a completion attempt failed."""

    # caller or configuration problems
    AUTH = "auth"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNSUPPORTED = "unsupported"
    # gateway pushback
    RATE_LIMIT = "rate_limit"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    # connection level
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
