"""Verb dictionary: conjugation tables indexed by person/number."""
from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ConjugatePerson(str, Enum):
    """Grammatical person x number used to pick a verb form."""
    FIRST_SINGULAR = "FirstSingular"
    SECOND_SINGULAR = "SecondSingular"
    THIRD_SINGULAR = "ThirdSingular"
    FIRST_PLURAL = "FirstPlural"
    SECOND_PLURAL = "SecondPlural"
    THIRD_PLURAL = "ThirdPlural"


_FORM_FIELDS: dict[ConjugatePerson, str] = {
    ConjugatePerson.FIRST_SINGULAR: "singular1",
    ConjugatePerson.SECOND_SINGULAR: "singular2",
    ConjugatePerson.THIRD_SINGULAR: "singular3",
    ConjugatePerson.FIRST_PLURAL: "plural1",
    ConjugatePerson.SECOND_PLURAL: "plural2",
    ConjugatePerson.THIRD_PLURAL: "plural3",
}


class Verb(BaseModel):
    """One dictionary entry. Any form may be missing independently of the others."""
    model_config = ConfigDict(extra="forbid")

    debug_ident: str
    infinitive: str | None = None
    singular1: str | None = None
    singular2: str | None = None
    singular3: str | None = None
    plural1: str | None = None
    plural2: str | None = None
    plural3: str | None = None

    def form(self, person: ConjugatePerson) -> str | None:
        """Return the conjugated form for `person`, or None when the entry lacks it."""
        return getattr(self, _FORM_FIELDS[person])

    def __str__(self) -> str:
        def _show(value: str | None) -> str:
            return value if value is not None else "N/A"

        return (
            f'"{self.debug_ident}" -- to {_show(self.infinitive)}:\n'
            f"  I {_show(self.singular1)}.\n"
            f"  You {_show(self.singular2)}.\n"
            f"  He/she/it {_show(self.singular3)}.\n"
            f"  We {_show(self.plural1)}.\n"
            f"  You {_show(self.plural2)}.\n"
            f"  They {_show(self.plural3)}.\n"
        )


class Dictionary(BaseModel):
    """Verb key -> Verb. Read-only while compiling."""
    model_config = ConfigDict(extra="forbid")

    verbs: dict[str, Verb] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("verbs", "map"),
    )

    def get(self, key: str) -> Verb | None:
        return self.verbs.get(key)

    def insert(self, key: str, verb: Verb) -> Verb | None:
        """Add or replace an entry; returns the replaced verb, if any."""
        previous = self.verbs.get(key)
        self.verbs[key] = verb
        return previous

    def remove(self, key: str) -> Verb | None:
        return self.verbs.pop(key, None)

    def keys(self) -> list[str]:
        return list(self.verbs)

    def __contains__(self, key: object) -> bool:
        return key in self.verbs

    def __len__(self) -> int:
        return len(self.verbs)
