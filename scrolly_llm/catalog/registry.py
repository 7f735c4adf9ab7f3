"""Model registry and provider directory.

``ModelCatalog`` is the explicit handle for catalog data: it is built once at
startup (from the built-in tables or a catalog document) and passed to the
config resolver and completion helpers. There is no module-level mutable
cache, so tests inject their own catalogs freely.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Tuple

from .defaults import CUSTOM_PROVIDER_NAME, DEFAULT_MODELS, DEFAULT_PROVIDERS, DEFAULT_TEMPERATURE
from .models import Model, ProviderConfig


def normalize_endpoint(url: str | None) -> str:
    """Return ``url`` stripped of surrounding whitespace and trailing slashes."""
    return (url or "").strip().rstrip("/")


class ModelCatalog:
    """Enumerable set of models and provider endpoints.

    Parameters:
        models: Ordered models; the first one is the default selection.
        providers: Known OpenAI-compatible endpoints.
        default_temperature: Sampling temperature used when a caller does
            not pass one.

    Raises:
        ValueError: If ``models`` is empty or contains duplicate ids.
    """

    def __init__(
        self,
        models: Iterable[Model],
        providers: Iterable[ProviderConfig],
        default_temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self._models: Tuple[Model, ...] = tuple(models)
        self._providers: Tuple[ProviderConfig, ...] = tuple(providers)
        self.default_temperature = default_temperature
        if not self._models:
            raise ValueError("model catalog must contain at least one model")
        ids = [m.id for m in self._models]
        if len(set(ids)) != len(ids):
            raise ValueError("model catalog contains duplicate model ids")
        self._by_id = {m.id: m for m in self._models}
        self._names_by_url = {normalize_endpoint(p.endpoint_url): p.display_name for p in self._providers}

    @property
    def models(self) -> Tuple[Model, ...]:
        return self._models

    @property
    def providers(self) -> Tuple[ProviderConfig, ...]:
        return self._providers

    def model_ids(self) -> Tuple[str, ...]:
        return tuple(m.id for m in self._models)

    def first_model_id(self) -> str:
        return self._models[0].id

    def get_model(self, model_id: str) -> Optional[Model]:
        return self._by_id.get(model_id)

    def has_model(self, model_id: str | None) -> bool:
        return bool(model_id) and model_id in self._by_id

    def available_models(self, config: Any = None) -> Tuple[Model, ...]:
        """Return the model list carried by ``config``, else the catalog's.

        ``config`` may be an ``ActiveConfig``, a mapping with a ``models``
        key, or ``None``.
        """
        if config is None:
            return self._models
        carried = config.get("models") if isinstance(config, Mapping) else getattr(config, "models", None)
        if carried:
            return tuple(carried)
        return self._models

    def provider_name(self, endpoint_url: str | None) -> str:
        """Reverse lookup of an endpoint URL; unknown URLs are a custom provider."""
        return self._names_by_url.get(normalize_endpoint(endpoint_url), CUSTOM_PROVIDER_NAME)

    def __len__(self) -> int:
        return len(self._models)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"ModelCatalog(models={len(self._models)}, providers={len(self._providers)})"


def default_catalog() -> ModelCatalog:
    """Return a catalog built from the built-in tables."""
    return ModelCatalog(DEFAULT_MODELS, DEFAULT_PROVIDERS, DEFAULT_TEMPERATURE)


__all__ = ["ModelCatalog", "default_catalog", "normalize_endpoint"]
