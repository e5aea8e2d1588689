"""Exception hierarchy for doctree-core."""

from __future__ import annotations

from collections.abc import Sequence

MISSING = "missing"
NOT_A_MAPPING = "not a mapping"


class DoctreeError(Exception):
    """Base exception for all doctree-core errors."""


class TraversalError(DoctreeError):
    """A path could not be followed through nested documents.

    Attributes:
        key: The path segment at which the walk stopped.
        path: The full path that was attempted.
        index: Position of ``key`` within ``path``.
        reason: ``MISSING`` if the key was absent, ``NOT_A_MAPPING`` if it
            held a leaf value.
    """

    def __init__(self, key: str, path: Sequence[str], index: int, reason: str) -> None:
        self.key = key
        self.path = tuple(path)
        self.index = index
        self.reason = reason
        super().__init__(
            f"failed to traverse tree at '{key}' (segment {index + 1} of "
            f"{len(self.path)}, {reason}); path: {list(self.path)}"
        )
