"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``scrolly_llm.base.errors_parts`` to keep a stable import path.

Propagation policy: configuration and transport errors end the current
completion attempt and are shown to the user; malformed stream lines are
recovered inside the decoder and never reach this layer.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.scrolly_error import ScrollyError
from .errors_parts.configuration_error import ConfigurationError
from .errors_parts.transport_error import TransportError
from .errors_parts.capability_error import CapabilityError
from .errors_parts.catalog_error import CatalogError
from .errors_parts.classification import classify_exception, status_to_code, user_message

__all__ = [
    "ErrorCode",
    "ScrollyError",
    "ConfigurationError",
    "TransportError",
    "CapabilityError",
    "CatalogError",
    "classify_exception",
    "status_to_code",
    "user_message",
]
