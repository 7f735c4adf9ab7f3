"""Event-stream framing for chat-completion responses.

``SSELineDecoder`` turns raw response chunks into text fragments. It does no
I/O: the caller feeds bytes as they arrive and gets back the fragments that
became complete. One decoder belongs to exactly one completion.

Framing rules:

1. Bytes are decoded with an incremental UTF-8 decoder, so a multi-byte
   character split across two chunks is emitted whole once its last byte
   arrives. Invalid sequences become U+FFFD instead of raising.
2. Decoded text is appended to a buffer which is split on ``"\\n"``; the
   last element (possibly an incomplete line) stays in the buffer and every
   element before it is processed in order.
3. A line starting with ``"data: "`` carries a payload. ``[DONE]`` ends the
   stream at once (nothing after it is processed). Any other payload is
   parsed as JSON; unparsable payloads are keep-alives or comments and are
   skipped. ``choices[0].delta.content`` is emitted when it is a non-empty
   string.
4. Every other line (blank separators, ``event:``/``id:`` fields, ``:``
   comments) is ignored.
5. At end of stream a remainder without a trailing newline is discarded,
   not parsed. It stays visible through :attr:`SSELineDecoder.pending`.
"""
from __future__ import annotations

import codecs
import json
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


@dataclass
class StreamState:
    """Mutable decode state owned by a single decoder."""

    decode_buffer: str = ""
    done: bool = False


def extract_delta_content(event: Any) -> Optional[str]:
    """Return ``event["choices"][0]["delta"]["content"]`` if it is a non-empty string."""
    if not isinstance(event, dict):
        return None
    choices = event.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    delta = first.get("delta")
    if not isinstance(delta, dict):
        return None
    content = delta.get("content")
    if isinstance(content, str) and content:
        return content
    return None


class SSELineDecoder:
    """Incremental ``data:`` line decoder.

    Parameters:
        on_skip: Optional hook called with each ``data:`` payload that was not
            valid JSON (used for debug logging; never raises into the loop).
    """

    def __init__(self, on_skip: Optional[Callable[[str], None]] = None) -> None:
        self.state = StreamState()
        self._utf8 = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._on_skip = on_skip

    @property
    def done(self) -> bool:
        """True once ``[DONE]`` was seen or :meth:`finish` was called."""
        return self.state.done

    @property
    def pending(self) -> str:
        """Text received after the last newline (an incomplete line)."""
        return self.state.decode_buffer

    def feed(self, chunk: bytes) -> List[str]:
        """Consume one network chunk; return the fragments it completed, in order."""
        if self.state.done or not chunk:
            return []
        self.state.decode_buffer += self._utf8.decode(chunk)
        lines = self.state.decode_buffer.split("\n")
        self.state.decode_buffer = lines.pop()
        fragments: List[str] = []
        for line in lines:
            fragment = self.process_line(line)
            if self.state.done:
                break
            if fragment is not None:
                fragments.append(fragment)
        return fragments

    def process_line(self, line: str) -> Optional[str]:
        """Handle one complete line; return its fragment, if any.

        Sets :attr:`done` when the line is the ``[DONE]`` sentinel.
        """
        if not line.startswith(DATA_PREFIX):
            return None
        payload = line[len(DATA_PREFIX):]
        if payload == DONE_SENTINEL:
            self.state.done = True
            return None
        try:
            event = json.loads(payload)
        except (ValueError, RecursionError):
            # RecursionError: nesting too deep for the C scanner.
            if self._on_skip is not None:
                self._on_skip(payload)
            return None
        return extract_delta_content(event)

    def finish(self) -> List[str]:
        """Signal end of stream.

        The trailing partial line is left unprocessed; nothing is returned.
        """
        self.state.done = True
        return []


def decode_chunks(chunks, on_skip: Optional[Callable[[str], None]] = None) -> List[str]:
    """Decode an iterable of byte chunks completely (convenience for offline use)."""
    decoder = SSELineDecoder(on_skip=on_skip)
    out: List[str] = []
    for chunk in chunks:
        out.extend(decoder.feed(chunk))
        if decoder.done:
            return out
    out.extend(decoder.finish())
    return out


__all__ = [
    "DATA_PREFIX",
    "DONE_SENTINEL",
    "StreamState",
    "SSELineDecoder",
    "extract_delta_content",
    "decode_chunks",
]
