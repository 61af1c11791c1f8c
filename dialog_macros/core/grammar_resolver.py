"""Resolve a decoded macro against the cast and verb dictionary."""
from __future__ import annotations

from dialog_macros.constants import DEFAULT_PERSON_DESCRIPTOR
from dialog_macros.core.errors import (
    MissingVerbArgument,
    UndefinedConjugationForm,
    UnknownCharacter,
    UnknownVerbKey,
)
from dialog_macros.core.pronouns import conjugate_case, pronoun_forms
from dialog_macros.models.character import CharacterCast, GrammaticalCharacter
from dialog_macros.models.macro import DialogMacro, MacroKind
from dialog_macros.models.verbs import Dictionary

# Pronoun macro kinds -> PronounForms field
_PRONOUN_SLOTS: dict[MacroKind, str] = {
    MacroKind.SUBJECTIVE_PRONOUN: "subjective",
    MacroKind.OBJECTIVE_PRONOUN: "objective",
    MacroKind.POSSESSIVE_DETERMINER: "possessive_determiner",
    MacroKind.POSSESSIVE_PRONOUN: "possessive",
    MacroKind.REFLEXIVE_PRONOUN: "reflexive",
}


def title_plus_name(character: GrammaticalCharacter) -> str:
    if not character.shows_title:
        return character.name
    return f"{character.title.text} {character.name}"


def conjugate(dictionary: Dictionary, verb_key: str, character: GrammaticalCharacter) -> str:
    """Pick the form of `verb_key` matching the character's person/number."""
    verb = dictionary.get(verb_key)
    if verb is None:
        raise UnknownVerbKey(verb_key)
    person = conjugate_case(character)
    form = verb.form(person)
    if form is None:
        raise UndefinedConjugationForm(verb_key, person)
    return form


def resolve_macro(macro: DialogMacro, cast: CharacterCast, dictionary: Dictionary) -> str:
    """Raw replacement text for one macro, before modifiers are applied."""
    character = cast.get(macro.character_id)
    if character is None:
        raise UnknownCharacter(macro.character_id)

    kind = macro.kind
    if kind in _PRONOUN_SLOTS:
        return getattr(pronoun_forms(character), _PRONOUN_SLOTS[kind])
    if kind == MacroKind.NAME:
        return character.name
    if kind == MacroKind.TITLE_PLUS_NAME:
        return title_plus_name(character)
    if kind == MacroKind.PERSON_DESCRIPTOR:
        return character.person_descriptor if character.person_descriptor is not None else DEFAULT_PERSON_DESCRIPTOR
    if kind == MacroKind.VERB_CONJUGATE:
        if macro.data is None:
            raise MissingVerbArgument(macro.character_id)
        return conjugate(dictionary, macro.data, character)
    raise ValueError(f"unhandled macro kind: {kind}")
