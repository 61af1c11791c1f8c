"""Data models: characters, verb dictionary, and decoded macros."""
from .character import (
    CharacterCast,
    CustomPronouns,
    CustomTitle,
    GrammaticalCharacter,
    PronounPreset,
    Pronouns,
    Title,
    TitlePreset,
)
from .macro import DialogMacro, MacroKind, MacroMod
from .verbs import ConjugatePerson, Dictionary, Verb

__all__ = [
    "CharacterCast",
    "ConjugatePerson",
    "CustomPronouns",
    "CustomTitle",
    "DialogMacro",
    "Dictionary",
    "GrammaticalCharacter",
    "MacroKind",
    "MacroMod",
    "PronounPreset",
    "Pronouns",
    "Title",
    "TitlePreset",
    "Verb",
]
