"""
Capability error for responses without a readable body.

Distinct from :class:`TransportError`: the request itself succeeded, but the
HTTP layer did not expose a synchronous byte stream to read from.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .scrolly_error import ScrollyError


class CapabilityError(ScrollyError):
    """The runtime cannot read the response body as a stream."""

    def __init__(self, message: str, *, provider: Optional[str] = None, model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.UNSUPPORTED, message=message, provider=provider, model=model)


__all__ = ["CapabilityError"]
