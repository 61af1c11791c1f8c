"""Dialog macros: render dialog text with per-character pronouns, titles, and verb forms."""
from .core import (
    DialogMacroCompiler,
    DialogMacroError,
    MacroDiagnostic,
    MacroResolutionError,
    MacroSyntaxError,
    MalformedMacroLiteral,
    MissingVerbArgument,
    UndefinedConjugationForm,
    UnknownCharacter,
    UnknownVerbKey,
    UnmatchedClosingDelimiter,
)
from .models import (
    CharacterCast,
    ConjugatePerson,
    CustomPronouns,
    CustomTitle,
    DialogMacro,
    Dictionary,
    GrammaticalCharacter,
    MacroKind,
    MacroMod,
    PronounPreset,
    TitlePreset,
    Verb,
)

__all__ = [
    "CharacterCast",
    "ConjugatePerson",
    "CustomPronouns",
    "CustomTitle",
    "DialogMacro",
    "DialogMacroCompiler",
    "DialogMacroError",
    "Dictionary",
    "GrammaticalCharacter",
    "MacroDiagnostic",
    "MacroKind",
    "MacroMod",
    "MacroResolutionError",
    "MacroSyntaxError",
    "MalformedMacroLiteral",
    "MissingVerbArgument",
    "PronounPreset",
    "TitlePreset",
    "UndefinedConjugationForm",
    "UnknownCharacter",
    "UnknownVerbKey",
    "UnmatchedClosingDelimiter",
    "Verb",
]
