"""Streaming completions: event-stream decoding, the HTTP stream and aggregation."""
from __future__ import annotations

from .aggregator import complete, complete_for_config, stream_for_config
from .chat_stream import CompletionStream, stream_chat_completion
from .request import COMPLETIONS_PATH, ChatCompletionRequest, build_request
from .sse_decoder import (
    DATA_PREFIX,
    DONE_SENTINEL,
    SSELineDecoder,
    StreamState,
    decode_chunks,
    extract_delta_content,
)

__all__ = [
    "complete",
    "complete_for_config",
    "stream_for_config",
    "CompletionStream",
    "stream_chat_completion",
    "COMPLETIONS_PATH",
    "ChatCompletionRequest",
    "build_request",
    "DATA_PREFIX",
    "DONE_SENTINEL",
    "SSELineDecoder",
    "StreamState",
    "decode_chunks",
    "extract_delta_content",
]
