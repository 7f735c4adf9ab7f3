"""Active configuration value object.

``ActiveConfig`` is what callers hold between "configure" and "complete": the
endpoint, the API key, the model list and the selected model id. Field names
are canonical (``endpoint_url``); mappings written with either the
``baseURL`` or the ``baseUrl`` spelling are normalized by
:meth:`ActiveConfig.from_mapping` so only one name travels downstream.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping, Optional, Tuple

from ..catalog.models import Model
from ..persistence.config_store import PersistedConfig


def _coerce_model(item: Any) -> Model:
    if isinstance(item, Model):
        return item
    if isinstance(item, Mapping):
        return Model(
            id=str(item["id"]),
            display_name=str(item.get("display_name") or item.get("name") or item["id"]),
            provider_label=str(item.get("provider_label") or item.get("provider") or ""),
        )
    raise TypeError(f"cannot interpret {item!r} as a model")


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        val = data.get(key)
        if val:
            return val
    return None


@dataclass(frozen=True)
class ActiveConfig:
    """Connection credentials plus model choice.

    Attributes:
        endpoint_url: OpenAI-compatible base URL (no trailing slash).
        api_key: Bearer token.
        models: Ordered selectable models.
        selected_model: Id of the model used for completions; always one of
            ``models`` when the config comes from the resolver.
    """

    endpoint_url: str
    api_key: str
    models: Tuple[Model, ...] = field(default_factory=tuple)
    selected_model: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ActiveConfig":
        """Build from a loosely shaped mapping.

        Reads ``baseURL``/``baseUrl``/``endpoint_url`` and
        ``apiKey``/``api_key``, so a config written with the
        alternate spelling never loses its credentials.
        """
        endpoint = _first_present(data, "endpoint_url", "baseUrl", "baseURL", "base_url") or ""
        api_key = _first_present(data, "api_key", "apiKey") or ""
        models: Iterable[Any] = data.get("models") or ()
        selected = _first_present(data, "selected_model", "selectedModel")
        return cls(
            endpoint_url=str(endpoint).strip(),
            api_key=str(api_key).strip(),
            models=tuple(_coerce_model(m) for m in models),
            selected_model=str(selected) if selected else None,
        )

    @property
    def configured(self) -> bool:
        return bool(self.endpoint_url.strip() and self.api_key.strip())

    def model_ids(self) -> Tuple[str, ...]:
        return tuple(m.id for m in self.models)

    def effective_model(self) -> Optional[str]:
        """Selected model id, else the first carried model id, else ``None``."""
        if self.selected_model:
            return self.selected_model
        return self.models[0].id if self.models else None

    def with_selected_model(self, model_id: str) -> "ActiveConfig":
        return replace(self, selected_model=model_id)

    def to_persisted(self) -> PersistedConfig:
        """Durable subset; the model list is not included."""
        return PersistedConfig(
            endpoint_url=self.endpoint_url,
            api_key=self.api_key,
            selected_model=self.effective_model(),
        )

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks.
        masked = f"{self.api_key[:4]}…" if self.api_key else ""
        return (
            f"ActiveConfig(endpoint_url={self.endpoint_url!r}, api_key={masked!r}, "
            f"models={len(self.models)}, selected_model={self.selected_model!r})"
        )


def as_active_config(config: Any) -> Optional[ActiveConfig]:
    """Return ``config`` as an :class:`ActiveConfig` (``None`` stays ``None``)."""
    if config is None or isinstance(config, ActiveConfig):
        return config
    if isinstance(config, Mapping):
        return ActiveConfig.from_mapping(config)
    raise TypeError(f"unsupported config type: {type(config).__name__}")


def is_configured(config: Any) -> bool:
    """True when ``config`` carries a non-empty endpoint and API key."""
    active = as_active_config(config)
    return bool(active and active.configured)


__all__ = ["ActiveConfig", "as_active_config", "is_configured"]
