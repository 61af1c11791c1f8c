"""Grammatical characters: pronoun presets, custom pronoun sets, titles, and the cast.

Input documents may use the wrapped form `{"Custom": ...}` for custom pronouns
and titles; it is unwrapped before validation.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from dialog_macros.models.verbs import ConjugatePerson

_CUSTOM_KEY = "Custom"


class PronounPreset(str, Enum):
    HE_HIM = "HeHim"
    SHE_HER = "SheHer"
    IT_ITS = "ItIts"
    THEY_THEM = "TheyThem"
    NAME = "Name"
    XE_XYR = "XeXyr"


class CustomPronouns(BaseModel):
    """Fully explicit pronoun set carrying its own person/number."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    subjective: str
    objective: str
    possessive_determiner: str
    possessive: str
    reflexive: str
    conjugate_case: ConjugatePerson


class TitlePreset(str, Enum):
    MR = "Mr"
    MS = "Ms"
    MRS = "Mrs"
    MX = "Mx"
    NO_TITLE = "NoTitle"

    @property
    def text(self) -> str:
        return _TITLE_TEXT[self]


_TITLE_TEXT: dict[TitlePreset, str] = {
    TitlePreset.MR: "Mr.",
    TitlePreset.MS: "Ms.",
    TitlePreset.MRS: "Mrs.",
    TitlePreset.MX: "Mx.",
    TitlePreset.NO_TITLE: "",
}


class CustomTitle(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str


Pronouns = Union[PronounPreset, CustomPronouns]
Title = Union[TitlePreset, CustomTitle]


def _unwrap_custom(value: Any) -> Any:
    if isinstance(value, dict) and set(value) == {_CUSTOM_KEY}:
        return value[_CUSTOM_KEY]
    return value


class GrammaticalCharacter(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    pronouns: Pronouns = PronounPreset.THEY_THEM
    title: Title | None = None
    person_descriptor: str | None = None

    @field_validator("pronouns", mode="before")
    @classmethod
    def _unwrap_custom_pronouns(cls, v: Any) -> Any:
        return _unwrap_custom(v)

    @field_validator("title", mode="before")
    @classmethod
    def _unwrap_custom_title(cls, v: Any) -> Any:
        inner = _unwrap_custom(v)
        # {"Custom": "King"} carries the bare title text
        if inner is not v and isinstance(inner, str):
            return {"text": inner}
        return inner

    @property
    def shows_title(self) -> bool:
        """True when a title should precede the name (absent and NoTitle suppress it)."""
        return self.title is not None and self.title != TitlePreset.NO_TITLE


class CharacterCast(BaseModel):
    """Character id -> GrammaticalCharacter. Built once, read-only while compiling."""
    model_config = ConfigDict(extra="forbid")

    characters: dict[str, GrammaticalCharacter] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("characters", "map"),
    )

    def get(self, character_id: str) -> GrammaticalCharacter | None:
        return self.characters.get(character_id)

    def insert(self, character_id: str, character: GrammaticalCharacter) -> GrammaticalCharacter | None:
        """Add or replace a character; returns the replaced character, if any."""
        previous = self.characters.get(character_id)
        self.characters[character_id] = character
        return previous

    def remove(self, character_id: str) -> GrammaticalCharacter | None:
        return self.characters.pop(character_id, None)

    def ids(self) -> list[str]:
        return list(self.characters)

    def __contains__(self, character_id: object) -> bool:
        return character_id in self.characters

    def __len__(self) -> int:
        return len(self.characters)
