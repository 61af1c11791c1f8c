"""Pronouner config: data file locations, log level, env overrides.

Overrides: PRONOUNER_DATA_ROOT, PRONOUNER_CAST_PATH, PRONOUNER_DICTIONARY_PATH,
PRONOUNER_LOG_LEVEL, PRONOUNER_ACCEPT_LEGACY_MACROS.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool = False) -> bool:
    """Read boolean env flag."""
    val = os.environ.get(name, "").strip().lower()
    if not val:
        return default
    return val in ("1", "true", "yes", "on")


def _env_path(name: str, default: Path) -> Path:
    val = os.environ.get(name, "").strip()
    return Path(val) if val else default


# Data root directory (holds characters.yaml, dictionary.yaml, conversations)
DATA_ROOT = _env_path("PRONOUNER_DATA_ROOT", Path("./data"))

DEFAULT_CAST_PATH = _env_path("PRONOUNER_CAST_PATH", DATA_ROOT / "characters.yaml")
DEFAULT_DICTIONARY_PATH = _env_path("PRONOUNER_DICTIONARY_PATH", DATA_ROOT / "dictionary.yaml")

LOG_LEVEL = os.environ.get("PRONOUNER_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

# Accept `_type` as an alias of `kind` inside macro bodies
ACCEPT_LEGACY_MACROS = _env_flag("PRONOUNER_ACCEPT_LEGACY_MACROS", default=True)


def resolve_log_level(verbose: bool = False) -> int:
    """Map PRONOUNER_LOG_LEVEL (or --verbose) to a logging level, WARNING on unknown names."""
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def log_resolved_config() -> None:
    """Log resolved config at startup."""
    lines = [
        "Pronouner config:",
        f"  data_root={DATA_ROOT}",
        f"  cast={DEFAULT_CAST_PATH}",
        f"  dictionary={DEFAULT_DICTIONARY_PATH}",
        f"  log_level={LOG_LEVEL}",
        f"  accept_legacy_macros={ACCEPT_LEGACY_MACROS}",
    ]
    logger.info("\n".join(lines))
