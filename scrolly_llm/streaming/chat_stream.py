"""Streaming chat completions over HTTP.

:class:`CompletionStream` is a pull iterator: every ``next()`` returns the
next text fragment, ends with ``StopIteration``, or raises the failure. The
request is sent on the first pull, and the response body is read one chunk
at a time, only as fast as the consumer pulls.

Resource discipline:
    The HTTP response is closed on every exit path: end of body, the
    ``[DONE]`` sentinel, an explicit :meth:`CompletionStream.close` (or
    leaving a ``with`` block early), cancellation through a
    :class:`~scrolly_llm.base.cancellation.CancellationToken`, and any
    exception raised while reading.

Errors:
    - :class:`ConfigurationError` before any network call (missing key,
      endpoint or model).
    - :class:`TransportError` for non-2xx responses (no body bytes are read)
      and for network failures/timeouts.
    - :class:`CapabilityError` when the response exposes no synchronous byte
      stream.
    - :class:`CancelledError` after the token is cancelled.
"""
from __future__ import annotations

import logging
import time
from collections import deque
from typing import Callable, ContextManager, Deque, Iterator, Optional
from urllib.parse import urlparse
from uuid import uuid4

import httpx

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import (
    CapabilityError,
    ScrollyError,
    TransportError,
    classify_exception,
    status_to_code,
)
from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.timeouts import TimeoutConfig
from ..config.settings import ClientSettings, get_settings
from .request import ChatCompletionRequest, build_request
from .sse_decoder import SSELineDecoder

_HTTP_FAILURES = (httpx.HTTPError, httpx.StreamError)


class CompletionStream:
    """Lazy, single-use sequence of completion fragments.

    Parameters:
        request: The validated request to send.
        client: ``httpx.Client`` to use; defaults to the pooled stream client.
        cancellation: Optional token; cancelling it aborts the in-flight
            response and makes the next pull raise ``CancelledError``.
        timeouts: Per-call timeout override.
        provider_name: Display name used in log events.
    """

    def __init__(
        self,
        request: ChatCompletionRequest,
        *,
        client: Optional[httpx.Client] = None,
        cancellation: Optional[CancellationToken] = None,
        timeouts: Optional[TimeoutConfig] = None,
        provider_name: Optional[str] = None,
    ) -> None:
        self.request = request
        self._client = client
        self._token = cancellation
        self._timeouts = timeouts
        self._logger = get_logger("streaming")
        self._ctx = LogContext(
            provider=provider_name or urlparse(request.endpoint_url).netloc or None,
            model=request.model,
            request_id=uuid4().hex[:12],
        )
        self._decoder = SSELineDecoder(on_skip=self._log_skipped_line)
        self._pending: Deque[str] = deque()
        self._cm: Optional[ContextManager[httpx.Response]] = None
        self._response: Optional[httpx.Response] = None
        self._chunks: Optional[Iterator[bytes]] = None
        self._cancel_cb: Optional[Callable[[], None]] = None
        self._closed = False
        self._decoded = 0
        self._t0: Optional[float] = None
        self.terminated_by: Optional[str] = None

    # ---- iterator protocol ----
    def __iter__(self) -> "CompletionStream":
        return self

    def __next__(self) -> str:
        while True:
            if self._pending:
                return self._pending.popleft()
            if self._closed:
                raise StopIteration
            self._pull()

    def __enter__(self) -> "CompletionStream":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending_text(self) -> str:
        """Unterminated trailing text left in the decode buffer."""
        return self._decoder.pending

    def close(self) -> None:
        """Stop the stream early and release the response (idempotent)."""
        if self._closed:
            return
        self._pending.clear()
        self._release("closed")

    # ---- internals ----
    def _open(self) -> None:
        client = self._client or get_httpx_client("chat.stream", self._timeouts)
        kwargs = {"json": self.request.to_payload(), "headers": self.request.to_headers()}
        if self._timeouts is not None:
            kwargs["timeout"] = self._timeouts.to_httpx()
        self._t0 = time.perf_counter()
        normalized_log_event(
            self._logger,
            "stream.start",
            self._ctx,
            phase="start",
            temperature=self.request.temperature,
            prompt_chars=len(self.request.prompt),
        )
        cm = client.stream("POST", self.request.url, **kwargs)
        response = cm.__enter__()
        self._cm = cm
        self._response = response

        if not response.is_success:
            status = response.status_code
            reason = response.reason_phrase
            raise TransportError(
                f"API request failed: {status} {reason}",
                code=status_to_code(status),
                status_code=status,
                reason=reason,
                provider=self._ctx.provider,
                model=self.request.model,
            )
        if not isinstance(getattr(response, "stream", None), httpx.SyncByteStream):
            raise CapabilityError("Failed to get response stream", provider=self._ctx.provider, model=self.request.model)

        self._chunks = response.iter_bytes()
        if self._token is not None:
            self._cancel_cb = self._token.add_callback(response.close)

    def _pull(self) -> None:
        try:
            self._raise_if_cancelled()
            if self._response is None:
                self._open()
                self._raise_if_cancelled()
            chunk = next(self._chunks, None)
        except ScrollyError as e:
            self._release("cancelled" if isinstance(e, CancelledError) else "error", e)
            raise
        except _HTTP_FAILURES as e:
            if self._token is not None and self._token.cancelled:
                err: ScrollyError = CancelledError(self._token.reason)
                self._release("cancelled", err)
            else:
                err = self._transport_error(e)
                self._release("error", err)
            raise err from e
        except BaseException:
            self._release("error")
            raise

        if chunk is None:
            self._decoder.finish()
            if self._token is not None and self._token.cancelled:
                err = CancelledError(self._token.reason)
                self._release("cancelled", err)
                raise err
            self._release("eof")
            return
        fragments = self._decoder.feed(chunk)
        self._decoded += len(fragments)
        self._pending.extend(fragments)
        if self._decoder.done:
            self._release("done")

    def _raise_if_cancelled(self) -> None:
        if self._token is not None:
            self._token.raise_if_cancelled()

    def _transport_error(self, exc: Exception) -> TransportError:
        detail = str(exc) or exc.__class__.__name__
        return TransportError(
            f"API request failed: {detail}",
            code=classify_exception(exc),
            provider=self._ctx.provider,
            model=self.request.model,
            raw=exc,
        )

    def _release(self, terminated_by: str, error: Optional[ScrollyError] = None) -> None:
        """Close the response once and emit the end-of-stream event."""
        if self._closed:
            return
        self._closed = True
        self.terminated_by = terminated_by
        if self._token is not None and self._cancel_cb is not None:
            self._token.remove_callback(self._cancel_cb)
            self._cancel_cb = None
        cm, self._cm = self._cm, None
        if cm is not None:
            try:
                cm.__exit__(None, None, None)
            except _HTTP_FAILURES + (OSError,):
                log_event(self._logger, "stream.close_failed", self._ctx, level=logging.DEBUG)
        duration_ms = (time.perf_counter() - self._t0) * 1000.0 if self._t0 is not None else None
        normalized_log_event(
            self._logger,
            "stream.error" if error is not None and terminated_by == "error" else "stream.end",
            self._ctx,
            phase="finalize",
            emitted=self._decoded,
            error_code=error.code.value if error is not None else None,
            level=logging.WARNING if terminated_by == "error" else logging.INFO,
            terminated_by=terminated_by,
            duration_ms=round(duration_ms, 1) if duration_ms is not None else None,
            status_code=getattr(error, "status_code", None),
        )

    def _log_skipped_line(self, payload: str) -> None:
        log_event(self._logger, "stream.line_skipped", self._ctx, level=logging.DEBUG, chars=len(payload))


def stream_chat_completion(
    endpoint_url: Optional[str],
    api_key: Optional[str],
    model_id: Optional[str],
    prompt: str,
    temperature: Optional[float] = None,
    *,
    client: Optional[httpx.Client] = None,
    settings: Optional[ClientSettings] = None,
    cancellation: Optional[CancellationToken] = None,
    timeouts: Optional[TimeoutConfig] = None,
    provider_name: Optional[str] = None,
) -> CompletionStream:
    """Validate inputs and return a :class:`CompletionStream`.

    Validation happens here, eagerly: a missing key or endpoint raises
    ``ConfigurationError`` before the caller starts iterating and before
    any network call. Each call starts an independent exchange.
    """
    settings = settings or get_settings()
    request = build_request(
        endpoint_url,
        api_key,
        model_id,
        prompt,
        temperature if temperature is not None else settings.temperature,
        app_title=settings.app_title,
        referer=settings.referer,
    )
    return CompletionStream(
        request,
        client=client,
        cancellation=cancellation,
        timeouts=timeouts,
        provider_name=provider_name,
    )


__all__ = ["CompletionStream", "stream_chat_completion"]
