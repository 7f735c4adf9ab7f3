"""Model registry and provider directory.

Public API:
    - :class:`Model`, :class:`ProviderConfig` records
    - :class:`ModelCatalog` handle and :func:`default_catalog`
    - :func:`load_catalog` / :func:`resolve_catalog` for catalog documents
"""

from .models import Model, ProviderConfig
from .defaults import CUSTOM_PROVIDER_NAME, DEFAULT_MODELS, DEFAULT_PROVIDERS, DEFAULT_TEMPERATURE
from .registry import ModelCatalog, default_catalog, normalize_endpoint
from .loader import catalog_from_document, load_catalog, resolve_catalog

__all__ = [
    "Model",
    "ProviderConfig",
    "CUSTOM_PROVIDER_NAME",
    "DEFAULT_MODELS",
    "DEFAULT_PROVIDERS",
    "DEFAULT_TEMPERATURE",
    "ModelCatalog",
    "default_catalog",
    "normalize_endpoint",
    "catalog_from_document",
    "load_catalog",
    "resolve_catalog",
]
