"""Diagnostics aggregation for whole-document checks."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from dialog_macros.constants import DIAGNOSTIC_SPAN_MAX_CHARS
from dialog_macros.core.error_handling import create_error_response
from dialog_macros.core.errors import DialogMacroError


class MacroDiagnostic(BaseModel):
    """One problem found in a dialog document."""
    error_code: str
    message: str
    position: int | None = None
    span: str | None = None

    def as_error_response(self) -> dict[str, Any]:
        details = {"span": self.span} if self.span else None
        return create_error_response(self.error_code, self.message, position=self.position, details=details)

    def __str__(self) -> str:
        where = f"offset {self.position}" if self.position is not None else "unknown offset"
        return f"{where}: {self.error_code}: {self.message}"


def _clip(span: str | None) -> str | None:
    if span is None or len(span) <= DIAGNOSTIC_SPAN_MAX_CHARS:
        return span
    return span[: DIAGNOSTIC_SPAN_MAX_CHARS - 3] + "..."


def add_diagnostic(diagnostics: list[MacroDiagnostic], error: DialogMacroError, span: str | None = None) -> None:
    """Append a diagnostic for `error` (deduped)."""
    diagnostic = MacroDiagnostic(
        error_code=error.code,
        message=error.message,
        position=error.position,
        span=_clip(span),
    )
    if diagnostic not in diagnostics:
        diagnostics.append(diagnostic)
