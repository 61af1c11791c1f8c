"""``pronouner check``: list every macro problem in a dialog document."""
from __future__ import annotations

import json

from pronouner.commands.common import CommandInputError, add_source_args, build_compiler, read_source


def register(subparsers) -> None:
    p = subparsers.add_parser("check", help="Report every macro problem in a dialog document")
    add_source_args(p)
    p.add_argument("--json", action="store_true", help="Print diagnostics as a JSON array")
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        source_name, text = read_source(args)
        compiler = build_compiler(args)
    except CommandInputError as e:
        print(f"ERROR: {e}")
        return 1

    diagnostics = compiler.collect_diagnostics(text)

    if args.json:
        print(json.dumps([d.as_error_response() for d in diagnostics], ensure_ascii=False))
    elif not diagnostics:
        print(f"{source_name}: OK")
    else:
        for d in diagnostics:
            print(f"{source_name}: {d}")
            if d.span:
                print(f"    {d.span}")
        print(f"\n{len(diagnostics)} problem(s) found")
    return 1 if diagnostics else 0
