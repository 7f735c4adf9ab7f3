"""Cooperative cancellation primitives (public API facade).

``CancellationToken`` lets a caller abort a streaming completion from outside
the consuming loop; ``CancelledError`` is raised by the stream that observes
the request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
