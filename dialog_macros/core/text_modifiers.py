"""Case modifiers applied to resolved macro text, in declared order."""
from __future__ import annotations

from typing import Callable, Iterable

from dialog_macros.models.macro import MacroMod


def capitalize_first(text: str) -> str:
    """Uppercase the first character only; `ß` may expand to `SS`."""
    return text[:1].upper() + text[1:]


_MODIFIERS: dict[MacroMod, Callable[[str], str]] = {
    MacroMod.CAPITALIZED: capitalize_first,
    MacroMod.UPPER_CASE: str.upper,
    MacroMod.LOWER_CASE: str.lower,
}


def apply_mods(text: str, mods: Iterable[MacroMod]) -> str:
    for mod in mods:
        text = _MODIFIERS[mod](text)
    return text
