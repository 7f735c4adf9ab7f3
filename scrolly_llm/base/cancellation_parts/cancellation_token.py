"""Cooperative cancellation token.

A token is handed to a completion stream; cancelling it runs the registered
abort callbacks (the stream registers one that closes the in-flight HTTP
response) and makes the next pull raise :class:`CancelledError`.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, List, Optional

from .cancelled_error import CancelledError

_log = logging.getLogger("scrolly.cancellation")


class CancellationToken:
    """A cooperative cancellation token with abort callbacks.

    Thread-safe for ``cancel`` from another thread while the owning stream
    polls ``raise_if_cancelled``. Child tokens inherit cancellation.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._cancelled = False
        self._reason: Optional[str] = None
        self._lock = Lock()
        self._callbacks: List[Callable[[], None]] = []
        if parent is not None:
            parent.add_callback(lambda: self.cancel(parent.reason))

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation and run registered callbacks once."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            self._reason = reason
            callbacks = list(self._callbacks)
            self._callbacks.clear()
        for cb in callbacks:
            try:
                cb()
            except Exception:  # nosec B110 - abort hooks must not break cancel()
                _log.debug("cancellation callback failed", exc_info=True)

    def add_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register ``callback`` to run on cancel; runs immediately if already cancelled."""
        with self._lock:
            if not self._cancelled:
                self._callbacks.append(callback)
                return callback
        callback()
        return callback

    def remove_callback(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if the token is cancelled."""
        if self._cancelled:
            raise CancelledError(self._reason)

    def child(self) -> "CancellationToken":
        """Create a token cancelled together with this one."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._cancelled}, reason={self._reason!r})"


__all__ = ["CancellationToken"]
