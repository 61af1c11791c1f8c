"""Shared argument wiring and loading for commands that compile dialog."""
from __future__ import annotations

import sys
from pathlib import Path

from pydantic import ValidationError

from dialog_macros.config import DEFAULT_CAST_PATH, DEFAULT_DICTIONARY_PATH
from dialog_macros.content.loader import add_player, load_cast, load_dictionary
from dialog_macros.core.compiler import DialogMacroCompiler
from dialog_macros.models.character import CharacterCast, PronounPreset
from dialog_macros.models.verbs import Dictionary

PRONOUN_CHOICES: dict[str, PronounPreset] = {
    "he_him": PronounPreset.HE_HIM,
    "she_her": PronounPreset.SHE_HER,
    "it_its": PronounPreset.IT_ITS,
    "they_them": PronounPreset.THEY_THEM,
    "xe_xyr": PronounPreset.XE_XYR,
    "name": PronounPreset.NAME,
}


class CommandInputError(Exception):
    """Raised when a command cannot read its inputs; the message is shown to the user."""


def add_cast_arg(p) -> None:
    p.add_argument("--cast", type=str, default=str(DEFAULT_CAST_PATH), help="Character cast file (.yaml/.json)")


def add_dictionary_arg(p) -> None:
    p.add_argument("--dictionary", type=str, default=str(DEFAULT_DICTIONARY_PATH), help="Verb dictionary file (.yaml/.json)")


def add_source_args(p) -> None:
    p.add_argument("source", nargs="?", help="Dialog source file (default: stdin)")
    p.add_argument("--text", type=str, help="Dialog source text (alternative to a file)")
    add_cast_arg(p)
    add_dictionary_arg(p)
    p.add_argument("--player-name", type=str, help="Add a 'player' character with this name")
    p.add_argument(
        "--player-pronouns",
        choices=sorted(PRONOUN_CHOICES),
        default="they_them",
        help="Pronouns for the player character (default: they_them)",
    )


def read_source(args) -> tuple[str, str]:
    """Return (source_name, text) from --text, a file, or stdin."""
    if args.text is not None:
        return "<text>", args.text
    if args.source:
        path = Path(args.source)
        if not path.is_file():
            raise CommandInputError(f"dialog source not found: {path}")
        return str(path), path.read_text(encoding="utf-8")
    return "<stdin>", sys.stdin.read()


def _load(loader, path: str):
    try:
        return loader(path)
    except FileNotFoundError as e:
        raise CommandInputError(f"{e} (set it with the command flag or PRONOUNER_DATA_ROOT)") from e
    except (ValueError, ValidationError) as e:
        raise CommandInputError(f"could not load {path}: {e}") from e


def load_cast_arg(args) -> CharacterCast:
    return _load(load_cast, args.cast)


def load_dictionary_arg(args) -> Dictionary:
    return _load(load_dictionary, args.dictionary)


def build_compiler(args) -> DialogMacroCompiler:
    cast = load_cast_arg(args)
    dictionary = load_dictionary_arg(args)
    if args.player_name:
        add_player(cast, args.player_name, PRONOUN_CHOICES[args.player_pronouns])
    return DialogMacroCompiler(cast, dictionary)
