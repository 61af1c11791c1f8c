"""``pronouner compile``: render dialog text with the cast and verb dictionary."""
from __future__ import annotations

import json

from dialog_macros.core.error_handling import error_response_for, log_error_with_context
from dialog_macros.core.errors import DialogMacroError
from pronouner.commands.common import CommandInputError, add_source_args, build_compiler, read_source


def register(subparsers) -> None:
    p = subparsers.add_parser("compile", help="Compile dialog text with the cast and verb dictionary")
    add_source_args(p)
    p.add_argument("--json", action="store_true", help="Print a JSON result object instead of plain text")
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        source_name, text = read_source(args)
        compiler = build_compiler(args)
    except CommandInputError as e:
        print(f"ERROR: {e}")
        return 1

    try:
        output = compiler.parse_and_compile(text)
    except DialogMacroError as e:
        log_error_with_context(e, "compile", source_name=source_name)
        if args.json:
            print(json.dumps({"ok": False, "error": error_response_for(e)}, ensure_ascii=False))
        else:
            print(f"ERROR: {e}")
        return 1

    if args.json:
        print(json.dumps({"ok": True, "text": output}, ensure_ascii=False))
    else:
        print(output)
    return 0
