"""Scanner: split dialog text into literal runs and macro spans.

Literal text escapes delimiters by doubling them (`{{` -> `{`, `}}` -> `}`).
A macro span runs from a single `{` to its balancing `}`; braces inside JSON
strings are not counted.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from dialog_macros.constants import (
    BACKSLASH,
    CLOSE_DELIMITER,
    ESCAPED_CLOSE,
    ESCAPED_OPEN,
    OPEN_DELIMITER,
    QUOTE,
)
from dialog_macros.core.errors import MalformedMacroLiteral, UnmatchedClosingDelimiter

_DELIMITER_RE = re.compile(r"[{}]")


class Stop(str, Enum):
    """Why a literal run ended."""
    END = "end"
    ESCAPED_OPEN = "escaped_open"
    MACRO = "macro"


@dataclass(frozen=True)
class LiteralRun:
    text: str
    end: int
    stop: Stop


def scan_literal(src: str, pos: int = 0) -> LiteralRun:
    """Return the literal text from `pos` up to the next unescaped `{`.

    `end` is the offset of that `{` (for ESCAPED_OPEN, of the first of the two)
    or len(src) when the text is exhausted. Doubled `}` collapses to one.
    """
    parts: list[str] = []
    cursor = pos
    while True:
        m = _DELIMITER_RE.search(src, cursor)
        if m is None:
            parts.append(src[cursor:])
            return LiteralRun("".join(parts), len(src), Stop.END)
        at = m.start()
        parts.append(src[cursor:at])
        if m.group() == OPEN_DELIMITER:
            stop = Stop.ESCAPED_OPEN if src.startswith(ESCAPED_OPEN, at) else Stop.MACRO
            return LiteralRun("".join(parts), at, stop)
        if not src.startswith(ESCAPED_CLOSE, at):
            raise UnmatchedClosingDelimiter(position=at)
        parts.append(CLOSE_DELIMITER)
        cursor = at + len(ESCAPED_CLOSE)


def delimit_macro(src: str, start: int) -> int:
    """Return the offset just past the `}` that closes the span opened at `start`."""
    if not src.startswith(OPEN_DELIMITER, start):
        raise ValueError(f"no macro opens at offset {start}")

    depth = 0
    in_string = False
    escape = False
    for i in range(start, len(src)):
        c = src[i]
        if c == OPEN_DELIMITER and not in_string:
            depth += 1
        elif c == CLOSE_DELIMITER and not in_string:
            depth -= 1
        elif c == BACKSLASH and in_string:
            escape = not escape
        elif c == QUOTE and not in_string:
            in_string = True
        elif c == QUOTE and not escape:
            in_string = False
        else:
            escape = False
        if depth == 0:
            return i + 1

    raise MalformedMacroLiteral("unterminated macro span", span=src[start:], position=start)
