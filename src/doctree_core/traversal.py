"""Path resolution through nested documents."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import MISSING, NOT_A_MAPPING, TraversalError
from .model import Document, EntryKind, kind_of

logger = logging.getLogger(__name__)


def step(mapping: Document, key: str, path: Sequence[str], index: int) -> Document:
    """Resolve a single path segment on *mapping*.

    Returns the nested document stored under *key*. Raises TraversalError
    if the key is absent or holds a leaf value; *path* and *index* are only
    used to describe the failure.
    """
    if key not in mapping:
        reason = MISSING
    elif kind_of(mapping[key]) is not EntryKind.MAPPING:
        reason = NOT_A_MAPPING
    else:
        return mapping[key]

    logger.debug("traversal stopped at %r (%s), path=%r", key, reason, list(path))
    raise TraversalError(key, path, index, reason)


def resolve(document: Document, path: Sequence[str]) -> Document:
    """Walk *path* from the top of *document* and return the mapping reached.

    An empty path returns *document* itself. The walk stops at the first
    missing key or leaf value; nothing is created along the way.
    """
    current = document
    for index, key in enumerate(path):
        current = step(current, key, path, index)
    return current


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------

def split_path(text: str, separator: str = ".") -> list[str]:
    """Split a separated path string into keys; ``""`` is the top level."""
    if not text:
        return []
    return text.split(separator)


def format_path(path: Sequence[str], separator: str = ".") -> str:
    return separator.join(path)


def as_keys(path: str | Sequence[str], separator: str = ".") -> list[str]:
    """Accept either a separated string or a sequence of keys."""
    if isinstance(path, str):
        return split_path(path, separator)
    return list(path)
