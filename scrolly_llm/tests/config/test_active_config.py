"""ActiveConfig value object and spelling normalization."""
from __future__ import annotations

import pytest

from scrolly_llm.catalog import Model
from scrolly_llm.config import ActiveConfig, as_active_config, is_configured


@pytest.mark.parametrize("url_key", ["baseURL", "baseUrl", "endpoint_url"])
def test_from_mapping_reads_every_url_spelling(url_key):
    config = ActiveConfig.from_mapping({url_key: " https://h/v1 ", "apiKey": "k"})
    assert config.endpoint_url == "https://h/v1"  # nosec B101
    assert config.configured  # nosec B101


def test_from_mapping_coerces_model_records():
    config = ActiveConfig.from_mapping({
        "baseUrl": "https://h/v1",
        "api_key": "k",
        "models": [{"id": "a/b", "name": "A B", "provider": "A"}, Model("c/d", "C D", "C")],
        "selectedModel": "c/d",
    })
    assert config.model_ids() == ("a/b", "c/d")  # nosec B101
    assert config.models[0].display_name == "A B"  # nosec B101
    assert config.effective_model() == "c/d"  # nosec B101


def test_effective_model_falls_back_to_first_then_none():
    models = (Model("a/b", "A", "A"), Model("c/d", "C", "C"))
    assert ActiveConfig("https://h", "k", models).effective_model() == "a/b"  # nosec B101
    assert ActiveConfig("https://h", "k").effective_model() is None  # nosec B101


def test_to_persisted_drops_model_list():
    models = (Model("a/b", "A", "A"),)
    persisted = ActiveConfig("https://h", "k", models, "a/b").to_persisted()
    assert persisted.model_dump(by_alias=True) == {"baseUrl": "https://h", "apiKey": "k", "selectedModel": "a/b"}  # nosec B101


def test_repr_masks_api_key():
    text = repr(ActiveConfig("https://h", "sk-secret-value"))
    assert "secret" not in text  # nosec B101


@pytest.mark.parametrize(
    "config,expected",
    [
        (None, False),
        ({}, False),
        ({"baseURL": "https://h", "apiKey": "k"}, True),
        ({"baseUrl": "https://h", "apiKey": "   "}, False),
        (ActiveConfig("https://h", "k"), True),
        (ActiveConfig(" ", "k"), False),
    ],
)
def test_is_configured(config, expected):
    assert is_configured(config) is expected  # nosec B101


def test_as_active_config_rejects_other_types():
    with pytest.raises(TypeError):
        as_active_config(42)
