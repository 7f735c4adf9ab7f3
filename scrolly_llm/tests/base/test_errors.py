"""Error taxonomy and classification."""
from __future__ import annotations

import httpx
import pytest

from scrolly_llm.base.errors import (
    CapabilityError,
    CatalogError,
    ConfigurationError,
    ErrorCode,
    ScrollyError,
    TransportError,
    classify_exception,
    status_to_code,
    user_message,
)


@pytest.mark.parametrize(
    "status,code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (403, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (408, ErrorCode.TIMEOUT),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (502, ErrorCode.TRANSIENT),
        (503, ErrorCode.UNAVAILABLE),
        (599, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.UNKNOWN),
    ],
)
def test_status_to_code(status, code):
    assert status_to_code(status) is code  # nosec B101


def test_classify_httpx_families():
    assert classify_exception(httpx.ReadTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused")) is ErrorCode.TRANSIENT  # nosec B101
    assert classify_exception(httpx.RemoteProtocolError("eof")) is ErrorCode.TRANSIENT  # nosec B101


def test_classify_status_attribute_and_heuristics():
    class WithStatus(Exception):
        status_code = 429

    assert classify_exception(WithStatus()) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(RuntimeError("Invalid API key")) is ErrorCode.AUTH  # nosec B101
    assert classify_exception(RuntimeError("something odd")) is ErrorCode.UNKNOWN  # nosec B101


def test_scrolly_errors_pass_through():
    err = CapabilityError("Failed to get response stream")
    assert classify_exception(err) is ErrorCode.UNSUPPORTED  # nosec B101


def test_subclasses_and_defaults():
    cfg = ConfigurationError("API key is required", code=ErrorCode.AUTH)
    cat = CatalogError("bad document")
    tr = TransportError("API request failed: 503 Service Unavailable", code=ErrorCode.UNAVAILABLE, status_code=503, reason="Service Unavailable")
    for err in (cfg, cat, tr):
        assert isinstance(err, ScrollyError)  # nosec B101
    assert cfg.code is ErrorCode.AUTH  # nosec B101
    assert cat.code is ErrorCode.VALIDATION  # nosec B101
    assert tr.status_code == 503 and tr.reason == "Service Unavailable"  # nosec B101
    assert not tr.retryable  # nosec B101
    assert TransportError("x", code=ErrorCode.RATE_LIMIT).retryable  # nosec B101


def test_user_message():
    assert user_message(TransportError("API request failed: 401 Unauthorized", code=ErrorCode.AUTH)) == "API request failed: 401 Unauthorized"  # nosec B101
    assert user_message(ValueError("plain")) == "plain"  # nosec B101
    assert user_message(KeyError()) == "KeyError"  # nosec B101


def test_str_includes_context():
    err = TransportError("boom", code=ErrorCode.TRANSIENT, provider="OpenRouter", model="m")
    assert str(err) == "OpenRouter:m transient: boom"  # nosec B101
