"""Unit tests for the event-stream line decoder (no I/O)."""
from __future__ import annotations

import pytest

from scrolly_llm.streaming.sse_decoder import SSELineDecoder, decode_chunks, extract_delta_content

from .helpers import sse_body, sse_line

HI_STREAM = b'data: {"choices":[{"delta":{"content":"Hi"}}]}\n\ndata: [DONE]\n\n'


def test_single_chunk_yields_one_fragment():
    assert decode_chunks([HI_STREAM]) == ["Hi"]  # nosec B101


def test_split_inside_json_yields_same_fragment():
    first, second = HI_STREAM[:13], HI_STREAM[13:]
    assert first == b'data: {"cho'  # nosec B101
    assert decode_chunks([first, second]) == ["Hi"]  # nosec B101


def test_every_split_offset_gives_identical_fragments():
    body = sse_body("Grüße ", "naïve ", "🙂 done")
    expected = ["Grüße ", "naïve ", "🙂 done"]
    for offset in range(len(body) + 1):
        assert decode_chunks([body[:offset], body[offset:]]) == expected, offset  # nosec B101


def test_byte_by_byte_delivery_keeps_multibyte_characters_whole():
    body = sse_body("é", "日本", "🙂")
    decoder = SSELineDecoder()
    out = []
    for i in range(len(body)):
        for fragment in decoder.feed(body[i:i + 1]):
            assert "�" not in fragment  # nosec B101
            out.append(fragment)
    assert out == ["é", "日本", "🙂"]  # nosec B101


def test_malformed_line_is_skipped_and_reported():
    skipped = []
    body = (sse_line("a") + "data: {not json\n\n" + sse_line("b") + "data: [DONE]\n").encode()
    assert decode_chunks([body], on_skip=skipped.append) == ["a", "b"]  # nosec B101
    assert skipped == ["{not json"]  # nosec B101


def test_deeply_nested_payload_is_skipped_like_bad_json():
    skipped = []
    nested = "[" * 200_000
    body = (sse_line("A") + "data: " + nested + "\n\n" + sse_line("B") + "data: [DONE]\n\n").encode()
    decoder = SSELineDecoder(on_skip=skipped.append)
    assert decoder.feed(body) == ["A", "B"]  # nosec B101
    assert decoder.done  # nosec B101
    assert skipped == [nested]  # nosec B101


def test_done_sentinel_stops_processing_same_chunk():
    body = (sse_line("a") + "data: [DONE]\n" + sse_line("after")).encode()
    decoder = SSELineDecoder()
    assert decoder.feed(body) == ["a"]  # nosec B101
    assert decoder.done  # nosec B101
    assert decoder.feed(sse_line("later").encode()) == []  # nosec B101


def test_non_data_lines_are_ignored():
    body = (": keep-alive\nevent: message\nid: 7\n" + sse_line("x") + "data:no-space\n").encode()
    assert decode_chunks([body]) == ["x"]  # nosec B101


def test_trailing_partial_line_is_discarded_at_end():
    decoder = SSELineDecoder()
    tail = 'data: {"choices":[{"delta":{"content":"lost"}}]}'
    assert decoder.feed((sse_line("kept") + tail).encode()) == ["kept"]  # nosec B101
    assert decoder.pending == tail  # nosec B101
    assert decoder.finish() == []  # nosec B101
    assert decoder.done  # nosec B101


def test_carriage_return_is_not_stripped():
    body = b'data: {"choices":[{"delta":{"content":"a"}}]}\r\n' + b"data: [DONE]\r\n" + sse_line("b").encode()
    decoder = SSELineDecoder()
    assert decoder.feed(body) == ["a", "b"]  # nosec B101
    assert not decoder.done  # nosec B101


def test_invalid_utf8_is_replaced_not_raised():
    body = b'data: {"choices":[{"delta":{"content":"a\xff"}}]}\n'
    assert decode_chunks([body]) == ["a�"]  # nosec B101


@pytest.mark.parametrize(
    "event",
    [
        {},
        {"choices": []},
        {"choices": [{"delta": {}}]},
        {"choices": [{"delta": {"content": ""}}]},
        {"choices": [{"delta": {"content": 5}}]},
        {"choices": [{"delta": {"role": "assistant"}}]},
        ["not", "a", "dict"],
    ],
)
def test_events_without_text_emit_nothing(event):
    assert extract_delta_content(event) is None  # nosec B101


def test_empty_chunk_is_a_no_op():
    decoder = SSELineDecoder()
    assert decoder.feed(b"") == []  # nosec B101
    assert decoder.state.decode_buffer == ""  # nosec B101
