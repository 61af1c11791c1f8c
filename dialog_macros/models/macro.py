"""DialogMacro: the decoded form of one `{...}` span in dialog text."""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator

from dialog_macros.constants import LEGACY_KIND_KEY


class MacroKind(str, Enum):
    VERB_CONJUGATE = "VerbConjugate"
    NAME = "Name"
    TITLE_PLUS_NAME = "TitlePlusName"
    SUBJECTIVE_PRONOUN = "SubjectivePronoun"
    OBJECTIVE_PRONOUN = "ObjectivePronoun"
    POSSESSIVE_DETERMINER = "PossessiveDeterminer"
    POSSESSIVE_PRONOUN = "PossessivePronoun"
    REFLEXIVE_PRONOUN = "ReflexivePronoun"
    PERSON_DESCRIPTOR = "PersonDescriptor"


class MacroMod(str, Enum):
    CAPITALIZED = "Capitalized"
    UPPER_CASE = "UpperCase"
    LOWER_CASE = "LowerCase"


class DialogMacro(BaseModel):
    """One substitution request: which character, what to render, how to case it.

    `data` names a dictionary key and is only read for VerbConjugate.
    `mods` are applied in order after resolution.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    character_id: str
    kind: MacroKind
    data: str | None = None
    mods: list[MacroMod] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_kind_key(cls, data: Any, info: ValidationInfo) -> Any:
        accept_legacy = True
        if info.context:
            accept_legacy = info.context.get("accept_legacy", True)
        if not accept_legacy or not isinstance(data, dict):
            return data
        if LEGACY_KIND_KEY in data and "kind" not in data:
            data = dict(data)
            data["kind"] = data.pop(LEGACY_KIND_KEY)
        return data
