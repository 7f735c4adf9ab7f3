"""Built-in model and provider tables.

Used when no catalog document is configured. Plain constants only; the
:class:`~scrolly_llm.catalog.registry.ModelCatalog` wraps them.
"""
from __future__ import annotations

from typing import Tuple

from .models import Model, ProviderConfig

DEFAULT_MODELS: Tuple[Model, ...] = (
    Model(id="google/gemini-2.5-flash", display_name="Gemini 2.5 Flash", provider_label="Google"),
    Model(id="openai/gpt-5-codex", display_name="GPT-5 Codex", provider_label="OpenAI"),
    Model(id="openai/gpt-5-mini", display_name="GPT-5 Mini", provider_label="OpenAI"),
    Model(id="qwen/qwen3-Max", display_name="Qwen 3 Max", provider_label="Alibaba"),
    Model(id="x-ai/grok-4-fast", display_name="Grok 4", provider_label="xAI"),
    Model(id="anthropic/claude-opus-4.1", display_name="Claude 4.1 Opus", provider_label="Anthropic"),
)

# OpenRouter-compatible gateways offered in the configuration prompt.
DEFAULT_PROVIDERS: Tuple[ProviderConfig, ...] = (
    ProviderConfig(endpoint_url="https://openrouter.ai/api/v1", display_name="OpenRouter"),
    ProviderConfig(endpoint_url="https://aipipe.org/openrouter/v1", display_name="AI Pipe"),
    ProviderConfig(endpoint_url="https://llmfoundry.straive.com/openrouter/v1", display_name="LLM Foundry"),
)

CUSTOM_PROVIDER_NAME = "Custom Provider"

DEFAULT_TEMPERATURE = 0.7

__all__ = ["DEFAULT_MODELS", "DEFAULT_PROVIDERS", "CUSTOM_PROVIDER_NAME", "DEFAULT_TEMPERATURE"]
