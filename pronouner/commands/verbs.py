"""``pronouner verbs``: print conjugation tables from the verb dictionary."""
from __future__ import annotations

from pronouner.commands.common import CommandInputError, add_dictionary_arg, load_dictionary_arg


def register(subparsers) -> None:
    p = subparsers.add_parser("verbs", help="Print conjugation tables")
    p.add_argument("keys", nargs="*", help="Verb keys to show (default: all)")
    add_dictionary_arg(p)
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        dictionary = load_dictionary_arg(args)
    except CommandInputError as e:
        print(f"ERROR: {e}")
        return 1

    keys = args.keys or dictionary.keys()
    missing = [k for k in keys if k not in dictionary]
    for key in keys:
        verb = dictionary.get(key)
        if verb is not None:
            print(verb)
    if missing:
        print(f"ERROR: unknown verb key(s): {', '.join(missing)}")
        return 1
    return 0
