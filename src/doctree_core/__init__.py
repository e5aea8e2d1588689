"""doctree-core: incremental builder for nested key-value documents."""

from .builder import TreeBuilder
from .config import BuilderConfig
from .errors import DoctreeError, TraversalError
from .model import (
    Document,
    Empty,
    Entry,
    EntryKind,
    Primitive,
    is_document,
    kind_of,
)
from .position import Position
from .traversal import format_path, resolve, split_path

__all__ = [
    "TreeBuilder",
    "BuilderConfig",
    "DoctreeError",
    "TraversalError",
    "Document",
    "Empty",
    "Entry",
    "EntryKind",
    "Primitive",
    "is_document",
    "kind_of",
    "Position",
    "format_path",
    "resolve",
    "split_path",
]
