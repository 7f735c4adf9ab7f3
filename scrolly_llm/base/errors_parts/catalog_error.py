"""Error raised when a model/provider catalog document cannot be used."""
from __future__ import annotations

from .error_code import ErrorCode
from .scrolly_error import ScrollyError


class CatalogError(ScrollyError):
    """Invalid or unreadable catalog document."""

    def __init__(self, message: str, *, raw: Exception | None = None) -> None:
        super().__init__(code=ErrorCode.VALIDATION, message=message, raw=raw)


__all__ = ["CatalogError"]
