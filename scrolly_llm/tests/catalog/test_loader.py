"""Catalog documents in JSON and YAML."""
from __future__ import annotations

import json

import pytest

from scrolly_llm.base.errors import CatalogError
from scrolly_llm.catalog import DEFAULT_PROVIDERS, catalog_from_document, load_catalog, resolve_catalog

DOC = {
    "llm": {
        "defaultTemperature": 0.4,
        "predefinedModels": [
            {"id": "meta/llama-4", "name": "Llama 4", "provider": "Meta"},
            {"id": "mistral/large", "provider": "Mistral"},
        ],
        "providers": [{"url": "https://gw.example/v1", "name": "Gateway"}],
    }
}


def test_load_json_document(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(DOC), encoding="utf-8")
    catalog = load_catalog(path)
    assert catalog.model_ids() == ("meta/llama-4", "mistral/large")  # nosec B101
    assert catalog.get_model("mistral/large").display_name == "mistral/large"  # nosec B101
    assert catalog.provider_name("https://gw.example/v1/") == "Gateway"  # nosec B101
    assert catalog.default_temperature == 0.4  # nosec B101


def test_load_yaml_document_without_wrapper(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "predefinedModels:\n"
        "  - id: google/gemini-2.5-flash\n"
        "    name: Gemini 2.5 Flash\n"
        "    provider: Google\n",
        encoding="utf-8",
    )
    catalog = load_catalog(str(path))
    assert catalog.first_model_id() == "google/gemini-2.5-flash"  # nosec B101
    assert catalog.providers == DEFAULT_PROVIDERS  # nosec B101
    assert catalog.default_temperature == 0.7  # nosec B101


@pytest.mark.parametrize(
    "document",
    [
        {"llm": {"predefinedModels": []}},
        {"predefinedModels": [{"id": "a"}, {"id": "a"}]},
        {"predefinedModels": [{"id": "a"}], "defaultTemperature": 3},
        {"predefinedModels": [{"id": "a"}], "providers": [{"url": "gw.example", "name": "No scheme"}]},
        {"providers": []},
        ["not", "a", "mapping"],
    ],
)
def test_invalid_documents_raise_catalog_error(document):
    with pytest.raises(CatalogError):
        catalog_from_document(document)


def test_missing_file_raises_catalog_error(tmp_path):
    with pytest.raises(CatalogError, match="cannot read catalog file"):
        load_catalog(tmp_path / "absent.json")


def test_unparsable_file_raises_catalog_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("predefinedModels: [unclosed\n", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_resolve_catalog_defaults_without_path():
    assert len(resolve_catalog(None)) == 6  # nosec B101
