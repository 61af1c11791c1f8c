"""Centralized constants shared across the macro compiler."""
from __future__ import annotations

# Macro delimiters and their literal escapes
OPEN_DELIMITER = "{"
CLOSE_DELIMITER = "}"
ESCAPED_OPEN = OPEN_DELIMITER * 2
ESCAPED_CLOSE = CLOSE_DELIMITER * 2

# Quoting inside a macro body (JSON string syntax)
QUOTE = '"'
BACKSLASH = "\\"

# Grammar defaults
DEFAULT_PERSON_DESCRIPTOR = "person"
NAME_REFLEXIVE_SUFFIX = " self"

# Older macro documents used `_type` instead of `kind`
LEGACY_KIND_KEY = "_type"

# Diagnostics: macro spans longer than this are truncated in reports
DIAGNOSTIC_SPAN_MAX_CHARS = 80
