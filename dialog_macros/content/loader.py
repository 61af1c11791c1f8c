"""Cast and verb dictionary loading from YAML or JSON documents."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from dialog_macros.models.character import CharacterCast, GrammaticalCharacter, Pronouns
from dialog_macros.models.verbs import Dictionary

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")
_JSON_SUFFIXES = (".json",)

PLAYER_ID = "player"


def _suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in _YAML_SUFFIXES + _JSON_SUFFIXES:
        raise ValueError(f"Unsupported document type '{path.suffix}' for {path} (expected .yaml, .yml or .json)")
    return suffix


def load_document(path: str | Path) -> Any:
    """Read a YAML or JSON document; an empty file reads as an empty mapping."""
    p = Path(path)
    suffix = _suffix(p)
    if not p.is_file():
        raise FileNotFoundError(f"Document not found: {p}")
    text = p.read_text(encoding="utf-8")
    if suffix in _JSON_SUFFIXES:
        data = json.loads(text) if text.strip() else None
    else:
        data = yaml.safe_load(text)
    return data if data is not None else {}


def _validate(model: type[BaseModel], path: Path) -> Any:
    data = load_document(path)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error("Failed to load %s from %s: %s", model.__name__, path, e)
        raise


def load_cast(path: str | Path) -> CharacterCast:
    p = Path(path)
    cast = _validate(CharacterCast, p)
    logger.info("Loaded cast: %d character(s) (%s)", len(cast), p.name)
    return cast


def load_dictionary(path: str | Path) -> Dictionary:
    p = Path(path)
    dictionary = _validate(Dictionary, p)
    logger.info("Loaded dictionary: %d verb(s) (%s)", len(dictionary), p.name)
    return dictionary


def dump_document(model: CharacterCast | Dictionary, path: str | Path) -> Path:
    """Write a cast or dictionary back out; the format follows the file suffix."""
    p = Path(path)
    suffix = _suffix(p)
    data = model.model_dump(mode="json", exclude_none=True)
    if suffix in _JSON_SUFFIXES:
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    else:
        text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def add_player(
    cast: CharacterCast,
    name: str,
    pronouns: Pronouns,
    character_id: str = PLAYER_ID,
) -> GrammaticalCharacter:
    """Insert the player character, replacing any existing entry with the same id."""
    player = GrammaticalCharacter(name=name, pronouns=pronouns)
    if cast.insert(character_id, player) is not None:
        logger.info("Replaced existing cast entry '%s' with the player character", character_id)
    return player
