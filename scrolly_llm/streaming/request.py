"""Outgoing chat-completion request description."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..base.errors import ConfigurationError, ErrorCode
from ..catalog.defaults import DEFAULT_TEMPERATURE
from ..catalog.registry import normalize_endpoint
from ..config.defaults import APP_TITLE, DEFAULT_REFERER

COMPLETIONS_PATH = "/chat/completions"


@dataclass(frozen=True)
class ChatCompletionRequest:
    """A single one-shot streaming completion.

    Attributes:
        endpoint_url: Base URL of the OpenAI-compatible API.
        api_key: Bearer token.
        model: Model id sent in the body.
        prompt: User message content.
        temperature: Sampling temperature.
        app_title: Value of the ``X-Title`` attribution header.
        referer: Value of the ``HTTP-Referer`` attribution header.
    """

    endpoint_url: str
    api_key: str
    model: str
    prompt: str
    temperature: float = DEFAULT_TEMPERATURE
    app_title: str = APP_TITLE
    referer: str = DEFAULT_REFERER

    @property
    def url(self) -> str:
        return normalize_endpoint(self.endpoint_url) + COMPLETIONS_PATH

    def to_payload(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": self.prompt}],
            "temperature": self.temperature,
            "stream": True,
        }

    def to_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "text/event-stream",
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": self.referer,
            "X-Title": self.app_title,
        }

    def __repr__(self) -> str:
        return f"ChatCompletionRequest(url={self.url!r}, model={self.model!r}, temperature={self.temperature})"


def build_request(
    endpoint_url: Optional[str],
    api_key: Optional[str],
    model_id: Optional[str],
    prompt: str,
    temperature: Optional[float] = None,
    *,
    app_title: str = APP_TITLE,
    referer: str = DEFAULT_REFERER,
) -> ChatCompletionRequest:
    """Validate inputs and build the request; nothing touches the network.

    Raises:
        ConfigurationError: If the endpoint, key or model is missing.
    """
    endpoint = normalize_endpoint(endpoint_url)
    key = (api_key or "").strip()
    if not key:
        raise ConfigurationError("API key is required", code=ErrorCode.AUTH)
    if not endpoint:
        raise ConfigurationError("Base URL is required")
    if not (model_id or "").strip():
        raise ConfigurationError("A model must be selected")
    return ChatCompletionRequest(
        endpoint_url=endpoint,
        api_key=key,
        model=model_id.strip(),
        prompt=prompt,
        temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
        app_title=app_title,
        referer=referer,
    )


__all__ = ["ChatCompletionRequest", "build_request", "COMPLETIONS_PATH"]
