"""CLI parser construction for scrolly-llm.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse


def _str2bool(v: str | None) -> bool:
    """Permissive truthy/falsey conversion (``None`` means the bare flag, i.e. True)."""
    if v is None:
        return True
    val = v.strip().lower()
    if val in {"1", "t", "true", "y", "yes", "on"}:
        return True
    return False if val in {"0", "f", "false", "n", "no", "off"} else bool(val)


def add_stream_flags(parser: argparse.ArgumentParser) -> None:
    """Attach ``--stream``/``--no-stream`` flags (streaming is the default)."""
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument("--stream", nargs="?", const=True, type=_str2bool, default=True)
    grp.add_argument("--no-stream", dest="stream", action="store_false")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser.

    Subcommands: ``configure``, ``models``, ``providers``, ``select-model``
    and ``complete``. No I/O happens here.
    """
    p = argparse.ArgumentParser(prog="scrolly-llm", description="Streaming chat-completion client")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR (or verbose/quiet)")
    p.add_argument("--log-file", default=None, help="Also write JSON logs to this rotating file")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("configure", help="Choose a provider and enter the API key")

    sub.add_parser("models", help="List available models, marking the selected one")

    p_prov = sub.add_parser("providers", help="List known providers")
    p_prov.add_argument("--url", default=None, help="Print the provider name for this endpoint URL")

    p_sel = sub.add_parser("select-model", help="Change and persist the selected model")
    p_sel.add_argument("model_id")

    p_comp = sub.add_parser("complete", help="Send a prompt and print the completion")
    src = p_comp.add_mutually_exclusive_group()
    src.add_argument("--prompt", default=None)
    src.add_argument("--prompt-file", default=None)
    p_comp.add_argument("--temperature", type=float, default=None)
    add_stream_flags(p_comp)

    return p


__all__ = ["build_parser", "add_stream_flags"]
