"""Error handling utilities: structured logging and error responses."""
from __future__ import annotations

import logging
from typing import Any

from dialog_macros.core.errors import DialogMacroError

logger = logging.getLogger(__name__)


def log_error_with_context(
    error: Exception,
    stage: str,
    source_name: str | None = None,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """
    Log a compile failure with its error code, source offset, and origin.

    Args:
        error: The exception that occurred
        stage: What was running (e.g., 'compile', 'check', 'load_cast')
        source_name: File or label of the dialog text being compiled
        extra_context: Additional context dict to include in log
    """
    code = getattr(error, "code", type(error).__name__)
    position = getattr(error, "position", None)

    context_parts = []
    if source_name:
        context_parts.append(f"source={source_name}")
    if position is not None:
        context_parts.append(f"offset={position}")
    context_str = ", ".join(context_parts) if context_parts else "no context"

    extra: dict[str, Any] = {}
    if extra_context:
        extra.update(extra_context)
    if source_name:
        extra["source_name"] = source_name
    if position is not None:
        extra["position"] = position
    extra["error_code"] = code
    extra["stage"] = stage

    # Compile errors are user input problems; only unexpected failures get a traceback
    logger.error(
        f"[{stage}] {code}: {getattr(error, 'message', str(error))} ({context_str})",
        exc_info=not isinstance(error, DialogMacroError),
        extra=extra,
    )


def create_error_response(
    error_code: str,
    message: str,
    position: int | None = None,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Create a structured error report.

    Args:
        error_code: Error code (e.g., 'UNKNOWN_CHARACTER', 'UNKNOWN_VERB_KEY')
        message: Human-readable error message
        position: Offset in the dialog source, when known
        details: Additional error details

    Returns:
        Structured error dict
    """
    response: dict[str, Any] = {
        "error_code": error_code,
        "message": message,
    }
    if position is not None:
        response["position"] = position
    if details:
        response["details"] = details
    return response


def error_response_for(error: DialogMacroError) -> dict[str, Any]:
    """Structured report for a compiler error, with its kind-specific fields as details."""
    details: dict[str, Any] = {}
    for attr in ("reason", "character_id", "verb_key"):
        value = getattr(error, attr, None)
        if value is not None:
            details[attr] = value
    person = getattr(error, "person", None)
    if person is not None:
        details["person"] = person.value
    return create_error_response(error.code, error.message, position=error.position, details=details)
