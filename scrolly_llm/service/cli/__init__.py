"""scrolly-llm command line (package entrypoint).

This package wires argument parsing to the handlers in ``cli_actions``. It
performs no completion logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
- ``build_parser``: argument parser factory
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

import httpx

from ...base.cancellation import CancelledError
from ...base.errors import ScrollyError, user_message
from ...base.logging import configure_logger, get_logger, log_event
from ...catalog.loader import resolve_catalog
from ...config.prompt import ConfigPrompt, ConsoleConfigPrompt
from ...config.resolver import ConfigResolver
from ...config.settings import get_settings
from ...persistence.interfaces import KeyValueStore
from ...persistence.sqlite import SqliteKeyValueStore
from .cli_actions import EXIT_CANCELLED, EXIT_ERROR, HANDLERS, CliContext
from .cli_parser import build_parser
from .cli_utils import parse_verbosity

_logger = get_logger("cli")


def main(
    argv: Optional[list[str]] = None,
    *,
    store: Optional[KeyValueStore] = None,
    prompt: Optional[ConfigPrompt] = None,
    client: Optional[httpx.Client] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.
    store, prompt, client, out, err:
        Collaborator overrides used by tests and embedders. By default the
        SQLite store at ``settings.db_path``, the console prompt, the pooled
        HTTP client and the process streams are used.

    Returns
    -------
    int
        Process exit code (0 success, 1 error, 2 cancelled).
    """
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    out = out or sys.stdout
    err = err or sys.stderr

    level = parse_verbosity(args.log_level) if args.log_level else None
    if level is not None or args.log_file:
        configure_logger(level=level, file_path=args.log_file)

    owned_store: Optional[SqliteKeyValueStore] = None
    try:
        settings = get_settings()
        catalog = resolve_catalog(settings.catalog_file)
        if store is None:
            owned_store = SqliteKeyValueStore.open(settings.db_path)
            store = owned_store
        resolver = ConfigResolver(
            catalog,
            store,
            prompt or ConsoleConfigPrompt(out=err),
            storage_key=settings.storage_key,
        )
        ctx = CliContext(settings=settings, catalog=catalog, resolver=resolver, client=client, out=out, err=err)
        return HANDLERS[args.cmd](args, ctx)
    except CancelledError:
        print("Cancelled.", file=err)
        return EXIT_CANCELLED
    except ScrollyError as e:
        log_event(_logger, "cli.error", error_code=e.code.value, command=args.cmd)
        print(f"Error: {user_message(e)}", file=err)
        return EXIT_ERROR
    finally:
        if owned_store is not None:
            owned_store.close()


__all__ = ["main", "build_parser"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
