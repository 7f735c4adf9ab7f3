"""Configuration layer.

Public API
----------
* :class:`ActiveConfig`, :func:`is_configured`
* :class:`ConfigResolver`, :func:`validate_credentials`
* :class:`ConfigPrompt`, :class:`PromptResult`, :class:`ConsoleConfigPrompt`
* :class:`ClientSettings`, :func:`get_settings`
"""
from __future__ import annotations

from .active import ActiveConfig, as_active_config, is_configured
from .prompt import ConfigPrompt, ConsoleConfigPrompt, PromptResult
from .resolver import ConfigResolver, validate_credentials
from .settings import ClientSettings, get_settings

__all__ = [
    "ActiveConfig",
    "as_active_config",
    "is_configured",
    "ConfigPrompt",
    "ConsoleConfigPrompt",
    "PromptResult",
    "ConfigResolver",
    "validate_credentials",
    "ClientSettings",
    "get_settings",
]
