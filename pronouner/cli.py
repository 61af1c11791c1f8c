"""Pronouner - unified CLI dispatcher.

All subcommands live in ``pronouner/commands/*.py`` and expose a
``register(subparsers)`` function that adds themselves to argparse.
"""
from __future__ import annotations

import argparse
import logging
import sys

from dialog_macros.config import log_resolved_config, resolve_log_level
from pronouner.commands.registry import register_all


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pronouner",
        description="Pronouner: dialog macro compiler for pronouns, titles, and verb forms",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    register_all(sub)

    args = parser.parse_args(argv)

    logging.basicConfig(level=resolve_log_level(args.verbose), format="%(levelname)s %(name)s: %(message)s")
    log_resolved_config()

    if not args.command:
        parser.print_help()
        sys.exit(0)

    # Each command stores a ``func`` on the namespace
    rc = args.func(args)
    sys.exit(rc or 0)
