"""Centralized timeout configuration for completion requests.

A hung connection must never block a stream forever, so every HTTP call
made by this package takes its limits from
:func:`get_timeout_config` instead of ad-hoc literals.

Supported environment variables (all optional, positive floats in seconds):
    SCROLLY_TIMEOUT_CONNECT_SECONDS
    SCROLLY_TIMEOUT_READ_SECONDS   (idle gap allowed between two stream chunks)
    SCROLLY_TIMEOUT_WRITE_SECONDS
    SCROLLY_TIMEOUT_POOL_SECONDS

The parsed configuration is cached and recomputed only when one of the
variables changes, so tests can adjust it through ``monkeypatch.setenv``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

_ENV_NAMES = (
    "SCROLLY_TIMEOUT_CONNECT_SECONDS",
    "SCROLLY_TIMEOUT_READ_SECONDS",
    "SCROLLY_TIMEOUT_WRITE_SECONDS",
    "SCROLLY_TIMEOUT_POOL_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_seconds: Limit for establishing the TCP/TLS connection.
        read_seconds: Limit for waiting on the next chunk of the response.
            Covers the pause before the first token.
        write_seconds: Limit for sending the request body.
        pool_seconds: Limit for acquiring a pooled connection.
    """

    connect_seconds: float = 10.0
    read_seconds: float = 120.0
    write_seconds: float = 30.0
    pool_seconds: float = 10.0

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(
            connect=self.connect_seconds,
            read=self.read_seconds,
            write=self.write_seconds,
            pool=self.pool_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_seconds=_parse_env_float("SCROLLY_TIMEOUT_CONNECT_SECONDS", defaults.connect_seconds),
        read_seconds=_parse_env_float("SCROLLY_TIMEOUT_READ_SECONDS", defaults.read_seconds),
        write_seconds=_parse_env_float("SCROLLY_TIMEOUT_WRITE_SECONDS", defaults.write_seconds),
        pool_seconds=_parse_env_float("SCROLLY_TIMEOUT_POOL_SECONDS", defaults.pool_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
