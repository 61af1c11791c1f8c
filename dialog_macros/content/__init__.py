"""Content loading for casts and verb dictionaries."""
from .loader import add_player, dump_document, load_cast, load_dictionary, load_document

__all__ = ["add_player", "dump_document", "load_cast", "load_dictionary", "load_document"]
