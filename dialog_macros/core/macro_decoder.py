"""Decode a delimited macro span into a DialogMacro."""
from __future__ import annotations

import logging

from pydantic import ValidationError

from dialog_macros.config import ACCEPT_LEGACY_MACROS
from dialog_macros.core.errors import MalformedMacroLiteral
from dialog_macros.models.macro import DialogMacro

logger = logging.getLogger(__name__)


def _describe(error: ValidationError) -> str:
    """Name the first problem in a macro body in user terms."""
    first = error.errors()[0]
    err_type = first.get("type", "")
    loc = first.get("loc") or ()
    field = str(loc[0]) if loc else ""
    if err_type == "json_invalid":
        return f"invalid JSON ({first.get('msg', '')})"
    if field == "character_id":
        if err_type == "missing":
            return "missing character_id"
        return "character_id must be a string"
    if field in ("kind", "_type"):
        if err_type == "missing":
            return "missing macro kind"
        return f"unrecognized macro kind {first.get('input')!r}"
    if field == "mods":
        return f"unrecognized modifier {first.get('input')!r}"
    if err_type == "extra_forbidden":
        return f"unexpected field {field!r}"
    if err_type == "model_type":
        return "macro body must be a JSON object"
    return f"{field or 'macro'}: {first.get('msg', err_type)}"


def decode_macro(span: str, *, accept_legacy: bool | None = None) -> DialogMacro:
    """Parse one `{...}` span. Never consults the cast or dictionary."""
    if accept_legacy is None:
        accept_legacy = ACCEPT_LEGACY_MACROS
    try:
        return DialogMacro.model_validate_json(span, context={"accept_legacy": accept_legacy})
    except ValidationError as e:
        reason = _describe(e)
        logger.debug("Rejected macro span %r: %s", span, reason)
        raise MalformedMacroLiteral(reason, span=span) from e
