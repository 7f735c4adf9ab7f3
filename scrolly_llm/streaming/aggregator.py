"""Blocking helpers on top of :func:`stream_chat_completion`.

``complete`` drains a stream and returns the joined text. The ``*_for_config``
variants take an :class:`~scrolly_llm.config.active.ActiveConfig` (or a
mapping in either spelling) and pick its selected model.
"""
from __future__ import annotations

from typing import Any, Optional

from ..base.errors import ConfigurationError, ErrorCode
from ..config.active import as_active_config
from .chat_stream import CompletionStream, stream_chat_completion


def complete(
    endpoint_url: Optional[str],
    api_key: Optional[str],
    model_id: Optional[str],
    prompt: str,
    temperature: Optional[float] = None,
    **kwargs: Any,
) -> str:
    """Return the full completion text (fragments joined with no separator).

    Accepts the same keyword arguments as :func:`stream_chat_completion`.
    Any error raised by the stream propagates and no partial text is returned.
    """
    with stream_chat_completion(endpoint_url, api_key, model_id, prompt, temperature, **kwargs) as stream:
        return "".join(stream)


def stream_for_config(config: Any, prompt: str, temperature: Optional[float] = None, **kwargs: Any) -> CompletionStream:
    """Open a stream for ``config``'s selected model (else its first model)."""
    active = as_active_config(config)
    if active is None or not active.configured:
        raise ConfigurationError("API key and base URL are required", code=ErrorCode.AUTH)
    return stream_chat_completion(
        active.endpoint_url,
        active.api_key,
        active.effective_model(),
        prompt,
        temperature,
        **kwargs,
    )


def complete_for_config(config: Any, prompt: str, temperature: Optional[float] = None, **kwargs: Any) -> str:
    with stream_for_config(config, prompt, temperature, **kwargs) as stream:
        return "".join(stream)


__all__ = ["complete", "complete_for_config", "stream_for_config"]
