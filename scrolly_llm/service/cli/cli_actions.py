"""CLI action handlers.

Each handler takes the parsed arguments and a :class:`CliContext` and returns
a process exit code. Handlers raise :class:`~scrolly_llm.base.errors.ScrollyError`
subclasses on failure; ``main`` turns them into user-visible text.

Exit codes
----------
- 0: success
- 1: error (configuration, transport, catalog)
- 2: cancelled (prompt declined, Ctrl-C while streaming)
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

import httpx

from ...base.cancellation import CancellationToken
from ...base.logging import LogContext, get_logger, log_event
from ...catalog.registry import ModelCatalog
from ...config.active import ActiveConfig
from ...config.resolver import ConfigResolver
from ...config.settings import ClientSettings
from ...streaming.aggregator import complete_for_config, stream_for_config
from .cli_utils import read_prompt, suppress_console_logs

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 2

_logger = get_logger("cli")


@dataclass
class CliContext:
    """Collaborators shared by the handlers of one CLI invocation."""

    settings: ClientSettings
    catalog: ModelCatalog
    resolver: ConfigResolver
    client: Optional[httpx.Client] = None
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)


def _cancelled(ctx: CliContext, what: str) -> int:
    print(f"{what} cancelled.", file=ctx.err)
    return EXIT_CANCELLED


def _require_config(ctx: CliContext) -> Optional[ActiveConfig]:
    """Resolve the active config, prompting when nothing usable is stored."""
    return ctx.resolver.resolve()


def handle_configure(args: argparse.Namespace, ctx: CliContext) -> int:
    config = ctx.resolver.show_config_prompt()
    if config is None:
        return _cancelled(ctx, "Configuration")
    name = ctx.catalog.provider_name(config.endpoint_url)
    print(f"Configured {name} ({config.endpoint_url}), model {config.selected_model}", file=ctx.out)
    return EXIT_OK


def handle_models(args: argparse.Namespace, ctx: CliContext) -> int:
    """List models without prompting; the stored selection is marked with ``*``."""
    persisted = ctx.resolver.repository.load()
    selected = persisted.selected_model if persisted is not None else None
    if not ctx.catalog.has_model(selected):
        selected = ctx.catalog.first_model_id()
    for model in ctx.catalog.available_models():
        mark = "*" if model.id == selected else " "
        print(f"{mark} {model.id}  {model.display_name} ({model.provider_label})", file=ctx.out)
    return EXIT_OK


def handle_providers(args: argparse.Namespace, ctx: CliContext) -> int:
    if args.url:
        print(ctx.catalog.provider_name(args.url), file=ctx.out)
        return EXIT_OK
    for provider in ctx.catalog.providers:
        print(f"{provider.display_name}  {provider.endpoint_url}", file=ctx.out)
    return EXIT_OK


def handle_select_model(args: argparse.Namespace, ctx: CliContext) -> int:
    config = _require_config(ctx)
    if config is None:
        return _cancelled(ctx, "Configuration")
    updated = ctx.resolver.change_selected_model(config, args.model_id)
    print(f"Selected model {updated.selected_model}", file=ctx.out)
    return EXIT_OK


def handle_complete(args: argparse.Namespace, ctx: CliContext) -> int:
    """Send one prompt; stream fragments to stdout or print the aggregate.

    Ctrl-C while streaming cancels the token, which closes the response.
    """
    prompt = read_prompt(args.prompt, args.prompt_file)
    config = _require_config(ctx)
    if config is None:
        return _cancelled(ctx, "Configuration")
    log_ctx = LogContext(provider=ctx.catalog.provider_name(config.endpoint_url), model=config.effective_model())
    log_event(_logger, "cli.complete", log_ctx, stream=bool(args.stream))
    temperature = args.temperature
    if temperature is None:
        temperature = ctx.settings.temperature if ctx.settings.temperature is not None else ctx.catalog.default_temperature
    token = CancellationToken()
    options = {
        "client": ctx.client,
        "settings": ctx.settings,
        "provider_name": log_ctx.provider,
        "cancellation": token,
    }
    if not args.stream:
        try:
            text = complete_for_config(config, prompt, temperature, **options)
        except KeyboardInterrupt:
            token.cancel("interrupted")
            return _cancelled(ctx, "Completion")
        print(text, file=ctx.out)
        return EXIT_OK

    with suppress_console_logs():
        try:
            with stream_for_config(config, prompt, temperature, **options) as stream:
                for fragment in stream:
                    ctx.out.write(fragment)
                    ctx.out.flush()
        except KeyboardInterrupt:
            token.cancel("interrupted")
            ctx.out.write("\n")
            return _cancelled(ctx, "Completion")
    ctx.out.write("\n")
    ctx.out.flush()
    return EXIT_OK


HANDLERS = {
    "configure": handle_configure,
    "models": handle_models,
    "providers": handle_providers,
    "select-model": handle_select_model,
    "complete": handle_complete,
}


__all__ = [
    "CliContext",
    "HANDLERS",
    "EXIT_OK",
    "EXIT_ERROR",
    "EXIT_CANCELLED",
    "handle_configure",
    "handle_models",
    "handle_providers",
    "handle_select_model",
    "handle_complete",
]
