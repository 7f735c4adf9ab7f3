"""Persisted connection record.

Only ``{baseUrl, apiKey, selectedModel}`` survives across sessions; the model
catalog is never written. The record is stored as JSON under one key of a
:class:`~scrolly_llm.persistence.interfaces.KeyValueStore`.

A missing, unparsable or wrongly shaped value reads as "no prior
configuration" and is logged at debug level only.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..base.logging import get_logger, log_event
from .interfaces import KeyValueStore

_logger = get_logger("persistence")


class PersistedConfig(BaseModel):
    """Durable subset of the active configuration (wire names as aliases)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    endpoint_url: str = Field("", alias="baseUrl")
    api_key: str = Field("", alias="apiKey")
    selected_model: Optional[str] = Field(None, alias="selectedModel")

    @model_validator(mode="before")
    @classmethod
    def _accept_base_url_spelling(cls, data: Any) -> Any:
        # Older records were written with the SDK-style ``baseURL`` key.
        if isinstance(data, dict) and not data.get("baseUrl") and data.get("baseURL"):
            data = {**data, "baseUrl": data["baseURL"]}
        return data

    @property
    def has_credentials(self) -> bool:
        return bool(self.endpoint_url.strip() and self.api_key.strip())

    def to_json(self) -> str:
        return json.dumps(
            {"baseUrl": self.endpoint_url, "apiKey": self.api_key, "selectedModel": self.selected_model},
            ensure_ascii=False,
        )


class PersistedConfigRepository:
    """Reads and writes the persisted record under ``storage_key``."""

    def __init__(self, store: KeyValueStore, storage_key: str) -> None:
        self.store = store
        self.storage_key = storage_key

    def load(self) -> Optional[PersistedConfig]:
        """Return the stored record, or ``None`` when absent or malformed."""
        raw = self.store.get(self.storage_key)
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            log_event(_logger, "config.persisted_malformed", level=logging.DEBUG, reason="json", key=self.storage_key)
            return None
        if not isinstance(data, dict):
            log_event(_logger, "config.persisted_malformed", level=logging.DEBUG, reason="shape", key=self.storage_key)
            return None
        try:
            return PersistedConfig.model_validate(data)
        except ValidationError:
            log_event(_logger, "config.persisted_malformed", level=logging.DEBUG, reason="fields", key=self.storage_key)
            return None

    def save(self, record: PersistedConfig) -> None:
        self.store.set(self.storage_key, record.to_json())

    def clear(self) -> None:
        self.store.delete(self.storage_key)


__all__ = ["PersistedConfig", "PersistedConfigRepository"]
