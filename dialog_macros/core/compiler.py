"""Dialog macro compiler: one left-to-right pass from source text to final dialog.

Each step emits a literal run, then either an escaped `{` or one expanded macro
(decode -> resolve -> modifiers). The first error aborts the whole compile;
`collect_diagnostics` is the non-aborting variant for checking documents.
"""
from __future__ import annotations

import logging

from dialog_macros.constants import ESCAPED_OPEN, OPEN_DELIMITER
from dialog_macros.core.diagnostics import MacroDiagnostic, add_diagnostic
from dialog_macros.core.errors import DialogMacroError, MalformedMacroLiteral, UnmatchedClosingDelimiter
from dialog_macros.core.grammar_resolver import resolve_macro
from dialog_macros.core.macro_decoder import decode_macro
from dialog_macros.core.scanner import Stop, delimit_macro, scan_literal
from dialog_macros.core.text_modifiers import apply_mods
from dialog_macros.models.character import CharacterCast
from dialog_macros.models.macro import DialogMacro
from dialog_macros.models.verbs import Dictionary

logger = logging.getLogger(__name__)


class DialogMacroCompiler:
    """Compiles dialog text against a cast and verb dictionary.

    The cast and dictionary are held by reference and never modified, so one
    instance may serve concurrent compile calls as long as nobody mutates them.
    """

    def __init__(self, cast: CharacterCast, dictionary: Dictionary, *, accept_legacy: bool | None = None):
        self.cast = cast
        self.dictionary = dictionary
        self.accept_legacy = accept_legacy

    def parse_and_compile(self, src: str) -> str:
        """Compile `src` to final text, raising the first DialogMacroError encountered."""
        if not src:
            return ""

        output: list[str] = []
        pos = 0
        while pos < len(src):
            run = scan_literal(src, pos)
            output.append(run.text)
            if run.stop == Stop.END:
                break
            if run.stop == Stop.ESCAPED_OPEN:
                output.append(OPEN_DELIMITER)
                pos = run.end + len(ESCAPED_OPEN)
                continue
            end = delimit_macro(src, run.end)
            output.append(self._expand(src[run.end:end], run.end))
            pos = end

        return "".join(output)

    def compile(self, macro: DialogMacro) -> str:
        """Resolve one decoded macro and apply its modifiers."""
        raw = resolve_macro(macro, self.cast, self.dictionary)
        text = apply_mods(raw, macro.mods)
        logger.debug("Resolved %s for %r -> %r", macro.kind.value, macro.character_id, text)
        return text

    def collect_diagnostics(self, src: str) -> list[MacroDiagnostic]:
        """Report every problem in `src` instead of stopping at the first.

        Bad macros are skipped and scanning continues after them; a stray `}`
        is skipped; an unterminated macro ends the scan.
        """
        diagnostics: list[MacroDiagnostic] = []
        pos = 0
        while pos < len(src):
            try:
                run = scan_literal(src, pos)
            except UnmatchedClosingDelimiter as e:
                add_diagnostic(diagnostics, e)
                pos = e.position + 1
                continue
            if run.stop == Stop.END:
                break
            if run.stop == Stop.ESCAPED_OPEN:
                pos = run.end + len(ESCAPED_OPEN)
                continue
            try:
                end = delimit_macro(src, run.end)
            except MalformedMacroLiteral as e:
                add_diagnostic(diagnostics, e, span=e.span)
                break
            span = src[run.end:end]
            try:
                self._expand(span, run.end)
            except DialogMacroError as e:
                add_diagnostic(diagnostics, e, span=span)
            pos = end

        if diagnostics:
            logger.info("Found %d problem(s) in dialog source", len(diagnostics))
        return diagnostics

    def _expand(self, span: str, position: int) -> str:
        try:
            macro = decode_macro(span, accept_legacy=self.accept_legacy)
            return self.compile(macro)
        except DialogMacroError as e:
            e.attach_position(position)
            raise
