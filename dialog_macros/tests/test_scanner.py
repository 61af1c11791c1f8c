"""Scanner tests: literal runs, delimiter escapes, and quote-aware span delimiting."""
from __future__ import annotations

import pytest

from dialog_macros.core.errors import MalformedMacroLiteral, UnmatchedClosingDelimiter
from dialog_macros.core.scanner import LiteralRun, Stop, delimit_macro, scan_literal


class TestScanLiteral:

    def test_plain_text_runs_to_end(self):
        assert scan_literal("Hello there.") == LiteralRun("Hello there.", 12, Stop.END)

    def test_empty_text(self):
        assert scan_literal("") == LiteralRun("", 0, Stop.END)

    def test_stops_before_macro(self):
        run = scan_literal('Do you know {"character_id":"pidge"}')
        assert run.text == "Do you know "
        assert run.end == 12
        assert run.stop == Stop.MACRO

    def test_stops_before_escaped_open(self):
        run = scan_literal("main() {{ }}")
        assert run.text == "main() "
        assert run.end == 7
        assert run.stop == Stop.ESCAPED_OPEN

    def test_starts_from_position(self):
        run = scan_literal("skip{{this", 6)
        assert run == LiteralRun("this", 10, Stop.END)

    def test_doubled_closing_collapses(self):
        run = scan_literal("a }} b }} c")
        assert run.text == "a } b } c"
        assert run.stop == Stop.END

    def test_single_closing_is_an_error(self):
        with pytest.raises(UnmatchedClosingDelimiter) as exc:
            scan_literal("Oh no! This closing } is not escaped D:")
        assert exc.value.position == 20

    def test_offsets_count_characters_not_bytes(self):
        run = scan_literal("héllo ß {")
        assert run.text == "héllo ß "
        assert run.end == 8
        assert run.stop == Stop.MACRO


class TestDelimitMacro:

    def test_simple_span(self):
        src = '{"character_id":"pidge","kind":"Name"} tail'
        end = delimit_macro(src, 0)
        assert src[:end] == '{"character_id":"pidge","kind":"Name"}'

    def test_span_inside_text(self):
        src = 'Hi {"a":"b"}!'
        assert delimit_macro(src, 3) == 12

    def test_nested_objects_are_balanced(self):
        src = '{"x":{"y":1}} rest'
        assert delimit_macro(src, 0) == 13

    def test_braces_inside_strings_are_ignored(self):
        src = '{"data":"{odd} and }"} after'
        end = delimit_macro(src, 0)
        assert src[:end] == '{"data":"{odd} and }"}'

    def test_escaped_quote_does_not_close_string(self):
        src = r'{"data":"say \"}\" ok"} after'
        end = delimit_macro(src, 0)
        assert src[:end] == r'{"data":"say \"}\" ok"}'

    def test_escaped_backslash_before_quote_closes_string(self):
        src = r'{"data":"a\\"} after'
        end = delimit_macro(src, 0)
        assert src[:end] == r'{"data":"a\\"}'

    def test_unterminated_span(self):
        with pytest.raises(MalformedMacroLiteral) as exc:
            delimit_macro('text {"a": "}', 5)
        assert exc.value.position == 5
        assert exc.value.reason == "unterminated macro span"

    def test_requires_opening_delimiter(self):
        with pytest.raises(ValueError):
            delimit_macro("no macro here", 0)
