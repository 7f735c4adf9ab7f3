"""
Configuration error raised before any network call.

Signals missing or invalid credentials (empty API key, malformed endpoint URL)
or a model id the catalog does not know.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .scrolly_error import ScrollyError


class ConfigurationError(ScrollyError):
    """Missing or invalid client configuration.

    Never retryable: the user has to fix the configuration first.
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.VALIDATION,
        provider: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        super().__init__(code=code, message=message, provider=provider, model=model, retryable=False)


__all__ = ["ConfigurationError"]
