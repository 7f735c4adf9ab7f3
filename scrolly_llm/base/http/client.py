"""Pooled ``httpx.Client`` instances for completion requests.

One client is kept per ``(purpose, TimeoutConfig)`` so repeated completions
reuse connections. Every completion opens its own response, so concurrent
streams share a connection pool but never a reader or buffer. Clients are
created on first use and closed at interpreter exit.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import TimeoutConfig, get_timeout_config

_PoolKey = Tuple[str, TimeoutConfig]

_CLIENTS: Dict[_PoolKey, httpx.Client] = {}
_LOCK = threading.RLock()


def _live(key: _PoolKey) -> Optional[httpx.Client]:
    client = _CLIENTS.get(key)
    return None if client is None or client.is_closed else client


def get_httpx_client(purpose: str = "chat", timeouts: Optional[TimeoutConfig] = None) -> httpx.Client:
    """Return the pooled client for ``purpose``, creating it on demand.

    ``timeouts`` defaults to :func:`get_timeout_config`; distinct limits get
    distinct clients. No base URL is bound since callers pass absolute URLs.
    """
    key: _PoolKey = (purpose, timeouts or get_timeout_config())
    found = _live(key)
    if found is not None:
        return found
    with _LOCK:
        found = _live(key)
        if found is None:
            found = _CLIENTS[key] = httpx.Client(timeout=key[1].to_httpx())
        return found


def close_all_clients() -> None:
    """Close every pooled client and empty the pool."""
    with _LOCK:
        pooled = list(_CLIENTS.values())
        _CLIENTS.clear()
    for client in pooled:
        with contextlib.suppress(httpx.HTTPError, OSError):
            client.close()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
