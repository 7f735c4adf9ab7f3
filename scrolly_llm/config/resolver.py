"""Configuration resolver.

Produces the :class:`~scrolly_llm.config.active.ActiveConfig` used for
completions:

1. Unless a prompt is forced, a persisted record with both an endpoint and a
   key is reused as-is (no prompt, no network).
2. Otherwise the external prompt is shown with the catalog's providers.
   Cancellation returns ``None`` and leaves storage untouched; entered
   credentials are validated, persisted as ``{baseUrl, apiKey,
   selectedModel}`` and returned.

The API key is never probed against the network here; an invalid key is
discovered by the first real completion (as a ``TransportError``).
"""
from __future__ import annotations

import logging
import re
from typing import Any, Optional, Tuple

from ..base.errors import ConfigurationError, ErrorCode
from ..base.logging import LogContext, get_logger, log_event
from ..catalog.registry import ModelCatalog, normalize_endpoint
from ..persistence.config_store import PersistedConfig, PersistedConfigRepository
from ..persistence.interfaces import KeyValueStore
from .active import ActiveConfig, as_active_config
from .defaults import STORAGE_KEY
from .prompt import ConfigPrompt

_URL_RE = re.compile(r"^https?://", re.IGNORECASE)


def validate_credentials(endpoint_url: Optional[str], api_key: Optional[str]) -> Tuple[str, str]:
    """Validate manually entered credentials.

    Returns:
        ``(endpoint_url, api_key)`` trimmed, endpoint without trailing slash.

    Raises:
        ConfigurationError: If either value is empty or the endpoint is not an
            ``http(s)://`` URL.
    """
    endpoint = normalize_endpoint(endpoint_url)
    key = (api_key or "").strip()
    if not endpoint or not key:
        raise ConfigurationError("API key and base URL are required", code=ErrorCode.AUTH)
    if not _URL_RE.match(endpoint) or len(endpoint) <= len("https://"):
        raise ConfigurationError("Invalid URL format")
    return endpoint, key


class ConfigResolver:
    """Resolves, persists and updates the active configuration.

    Parameters:
        catalog: Model/provider catalog handle.
        store: Durable key/value storage.
        prompt: External configuration prompt.
        storage_key: Key of the persisted record.
    """

    def __init__(
        self,
        catalog: ModelCatalog,
        store: KeyValueStore,
        prompt: ConfigPrompt,
        storage_key: str = STORAGE_KEY,
    ) -> None:
        self.catalog = catalog
        self.prompt = prompt
        self.repository = PersistedConfigRepository(store, storage_key)
        self._logger = get_logger("config")

    # ---- helpers ----
    def _selected_or_first(self, model_id: Optional[str]) -> str:
        return model_id if self.catalog.has_model(model_id) else self.catalog.first_model_id()

    def _merge(self, endpoint_url: str, api_key: str, selected_model: Optional[str]) -> ActiveConfig:
        return ActiveConfig(
            endpoint_url=endpoint_url,
            api_key=api_key,
            models=self.catalog.models,
            selected_model=self._selected_or_first(selected_model),
        )

    def _ctx(self, endpoint_url: str, model: Optional[str]) -> LogContext:
        return LogContext(provider=self.catalog.provider_name(endpoint_url), model=model)

    # ---- public API ----
    def resolve(self, force_prompt: bool = False) -> Optional[ActiveConfig]:
        """Return the active configuration, or ``None`` if the user declined.

        Raises:
            ConfigurationError: If the prompt returns invalid credentials.
        """
        persisted = self.repository.load()
        if not force_prompt and persisted is not None and persisted.has_credentials:
            config = self._merge(
                normalize_endpoint(persisted.endpoint_url),
                persisted.api_key.strip(),
                persisted.selected_model,
            )
            log_event(self._logger, "config.resolved", self._ctx(config.endpoint_url, config.selected_model), source="storage")
            return config

        result = self.prompt(self.catalog.providers, force=force_prompt)
        if result is None:
            log_event(self._logger, "config.prompt_declined", level=logging.DEBUG, forced=force_prompt)
            return None

        endpoint, key = validate_credentials(result.endpoint_url, result.api_key)
        carried = persisted.selected_model if persisted is not None else None
        config = self._merge(endpoint, key, carried)
        self.repository.save(config.to_persisted())
        log_event(self._logger, "config.resolved", self._ctx(endpoint, config.selected_model), source="prompt")
        return config

    def show_config_prompt(self) -> Optional[ActiveConfig]:
        """Always show the prompt (explicit reconfiguration)."""
        return self.resolve(force_prompt=True)

    def change_selected_model(self, config: Any, model_id: str) -> ActiveConfig:
        """Return ``config`` with ``model_id`` selected and persist the durable subset.

        ``config`` may be an :class:`ActiveConfig` or a mapping using either
        ``baseURL`` or ``baseUrl``; credentials are carried over either way.

        Raises:
            ConfigurationError: If ``config`` is missing credentials or the
                model id is unknown to both the config and the catalog.
        """
        active = as_active_config(config)
        if active is None or not active.configured:
            raise ConfigurationError("Cannot change model: API key and base URL are required", code=ErrorCode.AUTH)
        known = active.model_ids() or self.catalog.model_ids()
        if model_id not in known:
            raise ConfigurationError(f"Unknown model: {model_id}", model=model_id)
        models = active.models or self.catalog.models
        updated = ActiveConfig(
            endpoint_url=normalize_endpoint(active.endpoint_url),
            api_key=active.api_key,
            models=models,
            selected_model=model_id,
        )
        self.repository.save(
            PersistedConfig(endpoint_url=updated.endpoint_url, api_key=updated.api_key, selected_model=model_id)
        )
        log_event(self._logger, "config.model_changed", self._ctx(updated.endpoint_url, model_id))
        return updated

    def forget(self) -> None:
        """Remove the persisted record."""
        self.repository.clear()


__all__ = ["ConfigResolver", "validate_credentials"]
