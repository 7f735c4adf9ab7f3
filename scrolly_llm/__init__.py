"""scrolly-llm: streaming chat-completion client for OpenAI-compatible endpoints.

Typical use::

    from scrolly_llm import ConfigResolver, InMemoryKeyValueStore, default_catalog, stream_for_config

    resolver = ConfigResolver(default_catalog(), InMemoryKeyValueStore(), prompt)
    config = resolver.resolve()
    with stream_for_config(config, "Summarize this CSV") as stream:
        for fragment in stream:
            print(fragment, end="", flush=True)
"""
from __future__ import annotations

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import (
    CapabilityError,
    CatalogError,
    ConfigurationError,
    ErrorCode,
    ScrollyError,
    TransportError,
    classify_exception,
    user_message,
)
from .base.timeouts import TimeoutConfig, get_timeout_config
from .catalog import Model, ModelCatalog, ProviderConfig, default_catalog, load_catalog, resolve_catalog
from .config import (
    ActiveConfig,
    ClientSettings,
    ConfigPrompt,
    ConfigResolver,
    ConsoleConfigPrompt,
    PromptResult,
    get_settings,
    is_configured,
)
from .persistence import InMemoryKeyValueStore, KeyValueStore, PersistedConfig, SqliteKeyValueStore
from .streaming import (
    CompletionStream,
    SSELineDecoder,
    complete,
    complete_for_config,
    stream_chat_completion,
    stream_for_config,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CancellationToken",
    "CancelledError",
    "CapabilityError",
    "CatalogError",
    "ConfigurationError",
    "ErrorCode",
    "ScrollyError",
    "TransportError",
    "classify_exception",
    "user_message",
    "TimeoutConfig",
    "get_timeout_config",
    "Model",
    "ModelCatalog",
    "ProviderConfig",
    "default_catalog",
    "load_catalog",
    "resolve_catalog",
    "ActiveConfig",
    "ClientSettings",
    "ConfigPrompt",
    "ConfigResolver",
    "ConsoleConfigPrompt",
    "PromptResult",
    "get_settings",
    "is_configured",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "PersistedConfig",
    "SqliteKeyValueStore",
    "CompletionStream",
    "SSELineDecoder",
    "complete",
    "complete_for_config",
    "stream_chat_completion",
    "stream_for_config",
]
