"""Blocking aggregation helpers."""
from __future__ import annotations

import json

import pytest

from scrolly_llm.base.errors import ConfigurationError, TransportError
from scrolly_llm.config.active import ActiveConfig
from scrolly_llm.catalog import default_catalog
from scrolly_llm.streaming import complete, complete_for_config, stream_chat_completion, stream_for_config

from .helpers import ChunkStream, Recorder, sse_body


def test_complete_equals_concatenation_of_fragments(settings):
    parts = ["# Sales", "\n\n", "Revenue grew ", "12%", "."]
    streamed = list(stream_chat_completion(
        "https://h/v1", "k", "m", "p", client=Recorder(ChunkStream([sse_body(*parts)])).client(), settings=settings,
    ))
    joined = complete("https://h/v1", "k", "m", "p", client=Recorder(ChunkStream([sse_body(*parts)])).client(), settings=settings)
    assert joined == "".join(streamed) == "".join(parts)  # nosec B101


def test_complete_with_no_fragments_is_empty(settings):
    rec = Recorder(ChunkStream([b"data: [DONE]\n"]))
    assert complete("https://h/v1", "k", "m", "p", client=rec.client(), settings=settings) == ""  # nosec B101


def test_complete_propagates_transport_errors(settings):
    rec = Recorder(ChunkStream([sse_body("partial")]), status_code=500)
    with pytest.raises(TransportError):
        complete("https://h/v1", "k", "m", "p", client=rec.client(), settings=settings)


def test_complete_for_config_uses_selected_model(settings):
    catalog = default_catalog()
    config = ActiveConfig("https://h/v1", "k", catalog.models, selected_model="openai/gpt-5-mini")
    rec = Recorder(ChunkStream([sse_body("ok")]))
    assert complete_for_config(config, "p", client=rec.client(), settings=settings) == "ok"  # nosec B101
    assert json.loads(rec.requests[0].content)["model"] == "openai/gpt-5-mini"  # nosec B101


def test_stream_for_config_falls_back_to_first_model(settings):
    rec = Recorder(ChunkStream([sse_body("ok")]))
    config = {"baseURL": "https://h/v1", "apiKey": "k", "models": [{"id": "first/model"}, {"id": "second/model"}]}
    with stream_for_config(config, "p", client=rec.client(), settings=settings) as stream:
        assert list(stream) == ["ok"]  # nosec B101
    assert json.loads(rec.requests[0].content)["model"] == "first/model"  # nosec B101


@pytest.mark.parametrize("config", [None, {}, {"baseUrl": "https://h/v1"}, ActiveConfig("", "k")])
def test_unconfigured_config_is_refused(settings, config):
    with pytest.raises(ConfigurationError):
        complete_for_config(config, "p", settings=settings)
