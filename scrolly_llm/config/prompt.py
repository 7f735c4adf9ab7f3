"""Configuration prompt collaborator.

The resolver asks an external prompt for credentials when nothing usable is
persisted (or when the user explicitly reconfigures). The prompt is a black
box: given the known providers and a forced-display flag it returns a
:class:`PromptResult` or ``None`` when the user cancels. Cancellation is a
normal outcome, not an error.

:class:`ConsoleConfigPrompt` is the terminal implementation used by the CLI.
"""
from __future__ import annotations

import getpass
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence, TextIO

from ..catalog.models import ProviderConfig
from .defaults import PROMPT_HELP, PROMPT_TITLE


@dataclass(frozen=True)
class PromptResult:
    """Credentials entered by the user (not yet validated)."""

    endpoint_url: str
    api_key: str

    def __repr__(self) -> str:
        return f"PromptResult(endpoint_url={self.endpoint_url!r}, api_key='***')"


class ConfigPrompt(Protocol):
    """Interface consumed by :class:`~scrolly_llm.config.resolver.ConfigResolver`."""

    def __call__(self, providers: Sequence[ProviderConfig], *, force: bool) -> Optional[PromptResult]:
        """Return credentials, or ``None`` when the user cancels."""
        ...


class ConsoleConfigPrompt:
    """Interactive terminal prompt.

    The user picks a provider by number (or types a custom URL) and enters
    the key without echo. Empty input, EOF and Ctrl-C cancel.

    Parameters:
        input_fn: Reads a visible line (defaults to :func:`input`).
        secret_fn: Reads a hidden line (defaults to :func:`getpass.getpass`).
        out: Stream receiving the menu text.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        secret_fn: Callable[[str], str] = getpass.getpass,
        out: Optional[TextIO] = None,
    ) -> None:
        self._input = input_fn
        self._secret = secret_fn
        self._out = out

    def _print(self, text: str = "") -> None:
        print(text, file=self._out or sys.stdout)

    def _choose_endpoint(self, providers: Sequence[ProviderConfig]) -> Optional[str]:
        self._print("Choose API Provider:")
        for idx, p in enumerate(providers, start=1):
            self._print(f"  {idx}. {p.display_name} ({p.endpoint_url})")
        answer = self._input("Number or custom URL (empty to cancel): ").strip()
        if not answer:
            return None
        if answer.isdigit():
            idx = int(answer)
            if 1 <= idx <= len(providers):
                return providers[idx - 1].endpoint_url
            self._print(f"No provider numbered {idx}.")
            return None
        return answer

    def __call__(self, providers: Sequence[ProviderConfig], *, force: bool) -> Optional[PromptResult]:
        try:
            self._print(PROMPT_TITLE)
            self._print(PROMPT_HELP)
            endpoint = self._choose_endpoint(providers)
            if endpoint is None:
                return None
            api_key = self._secret("API Key: ").strip()
        except (EOFError, KeyboardInterrupt):
            self._print()
            return None
        if not api_key:
            return None
        return PromptResult(endpoint_url=endpoint, api_key=api_key)


__all__ = ["PromptResult", "ConfigPrompt", "ConsoleConfigPrompt"]
