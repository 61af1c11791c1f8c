"""Pronoun resolution for grammatical characters."""
from __future__ import annotations

from typing import NamedTuple

from dialog_macros.constants import NAME_REFLEXIVE_SUFFIX
from dialog_macros.models.character import CustomPronouns, GrammaticalCharacter, PronounPreset
from dialog_macros.models.verbs import ConjugatePerson


class PronounForms(NamedTuple):
    subjective: str
    objective: str
    possessive_determiner: str
    possessive: str
    reflexive: str


PRONOUN_MAP: dict[PronounPreset, PronounForms] = {
    PronounPreset.HE_HIM: PronounForms("he", "him", "his", "his", "himself"),
    PronounPreset.SHE_HER: PronounForms("she", "her", "her", "hers", "herself"),
    PronounPreset.IT_ITS: PronounForms("it", "it", "its", "its", "itself"),
    PronounPreset.THEY_THEM: PronounForms("they", "them", "their", "theirs", "themselves"),
    PronounPreset.XE_XYR: PronounForms("xe", "xem", "xyr", "xyrs", "xemself"),
}

PRESET_CONJUGATE_CASE: dict[PronounPreset, ConjugatePerson] = {
    PronounPreset.HE_HIM: ConjugatePerson.THIRD_SINGULAR,
    PronounPreset.SHE_HER: ConjugatePerson.THIRD_SINGULAR,
    PronounPreset.IT_ITS: ConjugatePerson.THIRD_SINGULAR,
    PronounPreset.THEY_THEM: ConjugatePerson.THIRD_PLURAL,
    PronounPreset.NAME: ConjugatePerson.THIRD_SINGULAR,
    PronounPreset.XE_XYR: ConjugatePerson.THIRD_SINGULAR,
}


def possessive_of(name: str) -> str:
    """`Pidge` -> `Pidge's`, `Alfons` -> `Alfons'`."""
    if name[-1:].lower() == "s":
        return f"{name}'"
    return f"{name}'s"


def pronoun_forms(character: GrammaticalCharacter) -> PronounForms:
    """All five pronoun slots for a character."""
    pronouns = character.pronouns
    if isinstance(pronouns, CustomPronouns):
        return PronounForms(
            pronouns.subjective,
            pronouns.objective,
            pronouns.possessive_determiner,
            pronouns.possessive,
            pronouns.reflexive,
        )
    if pronouns == PronounPreset.NAME:
        # Reflexive reuses the possessive rule ("Alfons' self")
        possessive = possessive_of(character.name)
        return PronounForms(
            character.name,
            character.name,
            possessive,
            possessive,
            possessive + NAME_REFLEXIVE_SUFFIX,
        )
    return PRONOUN_MAP[pronouns]


def conjugate_case(character: GrammaticalCharacter) -> ConjugatePerson:
    pronouns = character.pronouns
    if isinstance(pronouns, CustomPronouns):
        return pronouns.conjugate_case
    return PRESET_CONJUGATE_CASE[pronouns]


def describe_pronouns(character: GrammaticalCharacter) -> str:
    """One-line pronoun summary for listings.

    Example: "Pidge uses they/them/their pronouns (conjugates as ThirdPlural)."
    """
    p = pronoun_forms(character)
    return (
        f"{character.name} uses {p.subjective}/{p.objective}/{p.possessive_determiner} pronouns "
        f"(conjugates as {conjugate_case(character).value})."
    )
