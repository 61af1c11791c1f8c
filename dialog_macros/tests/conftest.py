"""Pytest fixtures: the sample cast and verb dictionary used across the suite."""
from __future__ import annotations

import pytest

from dialog_macros.core.compiler import DialogMacroCompiler
from dialog_macros.models.character import (
    CharacterCast,
    CustomPronouns,
    CustomTitle,
    GrammaticalCharacter,
    PronounPreset,
    TitlePreset,
)
from dialog_macros.models.verbs import ConjugatePerson, Dictionary, Verb


def make_cast() -> CharacterCast:
    cast = CharacterCast()
    cast.insert(
        "pidge",
        GrammaticalCharacter(
            name="Pidge",
            pronouns=PronounPreset.THEY_THEM,
            title=TitlePreset.NO_TITLE,
            person_descriptor="Person",
        ),
    )
    cast.insert(
        "alfons",
        GrammaticalCharacter(
            name="Alfons",
            pronouns=PronounPreset.NAME,
            title=CustomTitle(text="King"),
            person_descriptor="Man",
        ),
    )
    cast.insert(
        "tupo",
        GrammaticalCharacter(
            name="Tupo",
            pronouns=PronounPreset.XE_XYR,
            title=TitlePreset.NO_TITLE,
            person_descriptor="Laru",
        ),
    )
    cast.insert(
        "hunk",
        GrammaticalCharacter(
            name="Hunk",
            pronouns=PronounPreset.HE_HIM,
            title=TitlePreset.MR,
            person_descriptor="Man",
        ),
    )
    cast.insert("allura", GrammaticalCharacter(name="Allura", pronouns=PronounPreset.SHE_HER))
    cast.insert("rover", GrammaticalCharacter(name="Rover", pronouns=PronounPreset.IT_ITS))
    cast.insert(
        "kit",
        GrammaticalCharacter(
            name="Kit",
            pronouns=CustomPronouns(
                subjective="fae",
                objective="faer",
                possessive_determiner="faer",
                possessive="faers",
                reflexive="faerself",
                conjugate_case=ConjugatePerson.THIRD_SINGULAR,
            ),
        ),
    )
    cast.insert(
        "narrator",
        GrammaticalCharacter(
            name="I",
            pronouns=CustomPronouns(
                subjective="I",
                objective="me",
                possessive_determiner="my",
                possessive="mine",
                reflexive="myself",
                conjugate_case=ConjugatePerson.FIRST_SINGULAR,
            ),
        ),
    )
    return cast


def make_dictionary() -> Dictionary:
    dictionary = Dictionary()
    dictionary.insert(
        "to be",
        Verb(
            debug_ident="to be",
            infinitive="be",
            singular1="am",
            singular2="are",
            singular3="is",
            plural1="are",
            plural2="are",
            plural3="are",
        ),
    )
    dictionary.insert(
        "to have",
        Verb(
            debug_ident="to have",
            infinitive="have",
            singular1="have",
            singular2="have",
            singular3="has",
        ),
    )
    # Braces in a key exercise quote-aware span delimiting
    dictionary.insert(
        "{odd}",
        Verb(debug_ident="{odd}", singular3="odds", plural3="odd"),
    )
    return dictionary


@pytest.fixture
def cast() -> CharacterCast:
    return make_cast()


@pytest.fixture
def dictionary() -> Dictionary:
    return make_dictionary()


@pytest.fixture
def compiler(cast: CharacterCast, dictionary: Dictionary) -> DialogMacroCompiler:
    return DialogMacroCompiler(cast, dictionary)
