"""Helpers for driving completion streams through ``httpx.MockTransport``."""
from __future__ import annotations

import contextlib
import json
from typing import Callable, Iterable, Iterator, List, Optional

import httpx


def sse_line(content: str) -> str:
    """One ``data:`` line carrying ``content`` as the first choice's delta."""
    return "data: " + json.dumps({"choices": [{"delta": {"content": content}}]}) + "\n\n"


def sse_body(*contents: str, done: bool = True) -> bytes:
    text = "".join(sse_line(c) for c in contents)
    if done:
        text += "data: [DONE]\n\n"
    return text.encode("utf-8")


class ChunkStream(httpx.SyncByteStream):
    """Response body delivered in fixed chunks; records reads and close.

    ``fail_after`` raises ``error`` once that many chunks have been read.
    """

    def __init__(
        self,
        chunks: Iterable[bytes],
        *,
        fail_after: Optional[int] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.chunks: List[bytes] = list(chunks)
        self.fail_after = fail_after
        self.error = error
        self.reads = 0
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        for chunk in self.chunks:
            if self.closed:
                return
            if self.fail_after is not None and self.reads >= self.fail_after:
                raise self.error or httpx.ReadError("connection reset")
            self.reads += 1
            yield chunk

    def close(self) -> None:
        self.closed = True


class Recorder:
    """MockTransport handler that returns one prepared body and records requests."""

    def __init__(self, body: ChunkStream, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            headers={"Content-Type": "text/event-stream"},
            stream=self.body,
        )

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


def client_for(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class _AsyncOnlyStream(httpx.AsyncByteStream):
    async def __aiter__(self):
        yield b""


class AsyncBodyClient:
    """Stand-in client whose response exposes only an async byte stream."""

    def __init__(self) -> None:
        self.closed = False

    @contextlib.contextmanager
    def stream(self, method: str, url: str, **kwargs) -> Iterator[httpx.Response]:
        response = httpx.Response(200, stream=_AsyncOnlyStream(), request=httpx.Request(method, url))
        try:
            yield response
        finally:
            self.closed = True
