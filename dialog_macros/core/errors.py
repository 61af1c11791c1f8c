"""Macro compiler errors.

Every error aborts the compile call it was raised in. `position` is the offset
in the source text of the offending macro span or delimiter, when known.
"""
from __future__ import annotations

from dialog_macros.models.verbs import ConjugatePerson


class DialogMacroError(Exception):
    """Base class for every compile failure."""

    code = "DIALOG_MACRO_ERROR"

    def __init__(self, message: str, *, position: int | None = None):
        self.message = message
        self.position = position
        super().__init__(message)

    def attach_position(self, position: int) -> None:
        """Record the source offset unless a more precise one is already known."""
        if self.position is None:
            self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at offset {self.position})"


class MacroSyntaxError(DialogMacroError):
    """Raised while scanning or decoding, before the cast is consulted."""


class MacroResolutionError(DialogMacroError):
    """Raised while resolving a decoded macro against the cast and dictionary."""


class MalformedMacroLiteral(MacroSyntaxError):
    code = "MALFORMED_MACRO_LITERAL"

    def __init__(self, reason: str, *, span: str | None = None, position: int | None = None):
        self.reason = reason
        self.span = span
        super().__init__(f"malformed macro literal: {reason}", position=position)


class UnmatchedClosingDelimiter(MacroSyntaxError):
    code = "UNMATCHED_CLOSING_DELIMITER"

    def __init__(self, *, position: int | None = None):
        super().__init__("unmatched closing delimiter; write '}}' for a literal '}'", position=position)


class UnknownCharacter(MacroResolutionError):
    code = "UNKNOWN_CHARACTER"

    def __init__(self, character_id: str, *, position: int | None = None):
        self.character_id = character_id
        super().__init__(f"unknown character identifier: {character_id!r}", position=position)


class MissingVerbArgument(MacroResolutionError):
    code = "MISSING_VERB_ARGUMENT"

    def __init__(self, character_id: str, *, position: int | None = None):
        self.character_id = character_id
        super().__init__(
            f"VerbConjugate macro for {character_id!r} misses its data attribute",
            position=position,
        )


class UnknownVerbKey(MacroResolutionError):
    code = "UNKNOWN_VERB_KEY"

    def __init__(self, verb_key: str, *, position: int | None = None):
        self.verb_key = verb_key
        super().__init__(f"unknown verb key: {verb_key!r}", position=position)


class UndefinedConjugationForm(MacroResolutionError):
    code = "UNDEFINED_CONJUGATION_FORM"

    def __init__(self, verb_key: str, person: ConjugatePerson, *, position: int | None = None):
        self.verb_key = verb_key
        self.person = person
        super().__init__(
            f"verb {verb_key!r} has no {person.value} form",
            position=position,
        )
