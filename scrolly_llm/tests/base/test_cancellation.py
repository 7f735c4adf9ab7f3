"""Cooperative cancellation token."""
from __future__ import annotations

import pytest

from scrolly_llm.base.cancellation import CancellationToken, CancelledError
from scrolly_llm.base.errors import ErrorCode, ScrollyError


def test_cancel_runs_callbacks_once_and_records_reason():
    calls = []
    token = CancellationToken()
    token.add_callback(lambda: calls.append("a"))
    token.cancel("stop")
    token.cancel("again")
    assert calls == ["a"]  # nosec B101
    assert token.cancelled and token.reason == "stop"  # nosec B101


def test_callback_added_after_cancel_runs_immediately():
    token = CancellationToken()
    token.cancel()
    calls = []
    token.add_callback(lambda: calls.append(1))
    assert calls == [1]  # nosec B101


def test_removed_callback_does_not_run():
    calls = []
    token = CancellationToken()
    cb = token.add_callback(lambda: calls.append(1))
    token.remove_callback(cb)
    token.cancel()
    assert calls == []  # nosec B101


def test_failing_callback_does_not_break_cancel():
    calls = []
    token = CancellationToken()

    def boom():
        raise RuntimeError("close failed")

    token.add_callback(boom)
    token.add_callback(lambda: calls.append(1))
    token.cancel()
    assert calls == [1]  # nosec B101


def test_raise_if_cancelled():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("user")
    with pytest.raises(CancelledError) as ei:
        token.raise_if_cancelled()
    assert isinstance(ei.value, ScrollyError)  # nosec B101
    assert ei.value.code is ErrorCode.CANCELLED  # nosec B101
    assert ei.value.message == "user"  # nosec B101


def test_child_follows_parent():
    parent = CancellationToken()
    child = parent.child()
    parent.cancel("shutdown")
    assert child.cancelled and child.reason == "shutdown"  # nosec B101


def test_default_cancelled_message():
    assert CancelledError().message == "operation cancelled"  # nosec B101
