"""Macro compiler core: scanner, decoder, grammar resolver, modifiers, and the compiler."""
from .compiler import DialogMacroCompiler
from .diagnostics import MacroDiagnostic
from .errors import (
    DialogMacroError,
    MacroResolutionError,
    MacroSyntaxError,
    MalformedMacroLiteral,
    MissingVerbArgument,
    UndefinedConjugationForm,
    UnknownCharacter,
    UnknownVerbKey,
    UnmatchedClosingDelimiter,
)

__all__ = [
    "DialogMacroCompiler",
    "DialogMacroError",
    "MacroDiagnostic",
    "MacroResolutionError",
    "MacroSyntaxError",
    "MalformedMacroLiteral",
    "MissingVerbArgument",
    "UndefinedConjugationForm",
    "UnknownCharacter",
    "UnknownVerbKey",
    "UnmatchedClosingDelimiter",
]
