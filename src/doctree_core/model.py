"""Value model for documents: primitives, nested mappings and entry kinds."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Union


# ---------------------------------------------------------------------------
# Empty: singleton for absent keys
# ---------------------------------------------------------------------------

class _EmptyType:
    """Sentinel returned when a top-level key is not present."""

    _instance: _EmptyType | None = None

    def __new__(cls) -> _EmptyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False


Empty = _EmptyType()


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

Primitive = Union[str, int, float, bool, None]

# A document maps string keys to primitives or further documents.
Document = dict[str, Any]

Entry = Union[Primitive, Document]


class EntryKind(Enum):
    PRIMITIVE = auto()
    MAPPING = auto()


def kind_of(entry: Entry) -> EntryKind:
    """Tag an entry as a nested mapping or a leaf.

    Anything that is not a ``dict`` is a leaf as far as traversal is
    concerned; lists and other containers are never walked into.
    """
    if isinstance(entry, dict):
        return EntryKind.MAPPING
    return EntryKind.PRIMITIVE


def is_document(entry: Entry) -> bool:
    return kind_of(entry) is EntryKind.MAPPING


def new_document() -> Document:
    return {}
