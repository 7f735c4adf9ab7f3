"""Catalog document loading and validation.

A catalog document has the shape of the ``llm`` section of the web app's
``config.json``::

    {
      "llm": {
        "defaultTemperature": 0.7,
        "predefinedModels": [{"id": "...", "name": "...", "provider": "..."}],
        "providers": [{"url": "https://...", "name": "..."}]
      }
    }

The ``llm`` wrapper is optional. Files are parsed as JSON first and as YAML
when that fails, so hand-written YAML catalogs work too. Records are validated
with pydantic; any problem surfaces as a single :class:`CatalogError`.
"""
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..base.errors import CatalogError
from ..base.logging import get_logger, log_event
from .defaults import DEFAULT_PROVIDERS, DEFAULT_TEMPERATURE
from .models import Model, ProviderConfig
from .registry import ModelCatalog, default_catalog

_URL_RE = re.compile(r"^https?://", re.IGNORECASE)
_logger = get_logger("catalog")


class ModelRecord(BaseModel):
    """One ``predefinedModels`` entry."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    name: Optional[str] = None
    provider: str = ""

    def to_model(self) -> Model:
        return Model(id=self.id, display_name=self.name or self.id, provider_label=self.provider)


class ProviderRecord(BaseModel):
    """One ``providers`` entry."""

    model_config = ConfigDict(extra="ignore")

    url: str
    name: str = Field(min_length=1)

    @field_validator("url")
    @classmethod
    def _http_url(cls, v: str) -> str:
        v = v.strip()
        if not _URL_RE.match(v):
            raise ValueError("provider url must start with http:// or https://")
        return v

    def to_provider(self) -> ProviderConfig:
        return ProviderConfig(endpoint_url=self.url, display_name=self.name)


class CatalogDocument(BaseModel):
    """Validated catalog section."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    default_temperature: float = Field(DEFAULT_TEMPERATURE, alias="defaultTemperature", ge=0.0, le=2.0)
    predefined_models: List[ModelRecord] = Field(alias="predefinedModels", min_length=1)
    providers: Optional[List[ProviderRecord]] = None

    @field_validator("predefined_models")
    @classmethod
    def _unique_ids(cls, v: List[ModelRecord]) -> List[ModelRecord]:
        ids = [m.id for m in v]
        if len(set(ids)) != len(ids):
            raise ValueError("duplicate model ids")
        return v


def catalog_from_document(document: Mapping[str, Any]) -> ModelCatalog:
    """Build a :class:`ModelCatalog` from an already parsed document.

    A document without ``providers`` keeps the built-in provider list.

    Raises:
        CatalogError: If the document does not validate.
    """
    if not isinstance(document, Mapping):
        raise CatalogError("catalog document must be a mapping")
    section = document.get("llm", document)
    try:
        doc = CatalogDocument.model_validate(section)
    except ValidationError as e:
        raise CatalogError(f"invalid catalog document: {e.errors()[0].get('msg', e)}", raw=e) from e
    providers = [p.to_provider() for p in doc.providers] if doc.providers is not None else DEFAULT_PROVIDERS
    return ModelCatalog(
        [m.to_model() for m in doc.predefined_models],
        providers,
        default_temperature=doc.default_temperature,
    )


def _parse_text(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise CatalogError("catalog file is neither JSON nor YAML", raw=e) from e


def load_catalog(path: str | Path) -> ModelCatalog:
    """Read and validate a catalog file.

    Raises:
        CatalogError: If the file is missing, unparsable or invalid.
    """
    p = Path(path).expanduser()
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"cannot read catalog file {p}: {e.strerror}", raw=e) from e
    catalog = catalog_from_document(_parse_text(text) or {})
    log_event(_logger, "catalog.loaded", path=str(p), models=len(catalog), providers=len(catalog.providers))
    return catalog


def resolve_catalog(path: str | Path | None = None) -> ModelCatalog:
    """Return the catalog at ``path``, or the built-in catalog when unset."""
    if not path:
        return default_catalog()
    return load_catalog(path)


__all__ = [
    "CatalogDocument",
    "ModelRecord",
    "ProviderRecord",
    "catalog_from_document",
    "load_catalog",
    "resolve_catalog",
]
