"""
Catalog records: providers (endpoints) and models.

Both are immutable and defined once at startup, either from the built-in
table in :mod:`scrolly_llm.catalog.defaults` or from a catalog document.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ProviderConfig:
    """An OpenAI-compatible endpoint the user can pick.

    Attributes:
        endpoint_url: Base URL; ``/chat/completions`` is appended per request.
        display_name: Human-readable provider name.
    """

    endpoint_url: str
    display_name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Model:
    """A selectable chat model.

    Attributes:
        id: Model identifier sent as ``model`` in the request body
            (e.g. ``"google/gemini-2.5-flash"``).
        display_name: Human-friendly name.
        provider_label: Company owning the model (``"Google"``), not the
            endpoint serving it.
    """

    id: str
    display_name: str
    provider_label: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ProviderConfig", "Model"]
