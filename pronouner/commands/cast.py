"""``pronouner cast``: list characters with their pronouns."""
from __future__ import annotations

from dialog_macros.core.grammar_resolver import title_plus_name
from dialog_macros.core.pronouns import describe_pronouns
from pronouner.commands.common import CommandInputError, add_cast_arg, load_cast_arg


def register(subparsers) -> None:
    p = subparsers.add_parser("cast", help="List characters with their pronouns")
    add_cast_arg(p)
    p.set_defaults(func=run)


def run(args) -> int:
    try:
        cast = load_cast_arg(args)
    except CommandInputError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Cast: {len(cast)} character(s)")
    for character_id in sorted(cast.ids()):
        character = cast.get(character_id)
        print(f"- {character_id}: {title_plus_name(character)}")
        print(f"    {describe_pronouns(character)}")
    return 0
