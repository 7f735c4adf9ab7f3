"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `scrolly_llm.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .scrolly_error import ScrollyError
from .configuration_error import ConfigurationError
from .transport_error import TransportError
from .capability_error import CapabilityError
from .catalog_error import CatalogError
from .classification import classify_exception, status_to_code, user_message

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
