"""TreeBuilder: incremental construction of a nested document."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .config import BuilderConfig
from .model import Document, Empty, Entry, new_document
from .position import Position
from .traversal import as_keys, format_path, resolve, step

logger = logging.getLogger(__name__)


@dataclass
class TreeBuilder:
    """Owns one document and one position inside it.

    Usage::

        b = TreeBuilder()
        b.enter("request")            # {"request": {}}, position request
        b.set_current("method", "GET")
        b.leave()
        b.traverse("request")         # {"method": "GET"}
        b.data                        # hand off the finished document

    The builder is the only writer of ``data`` while it is in use and is not
    safe for concurrent access.
    """

    data: Document = field(default_factory=new_document)
    position: Position = field(default_factory=Position)
    config: BuilderConfig = field(default_factory=BuilderConfig)

    # -- Top level ------------------------------------------------------

    def set(self, key: str, value: Entry) -> None:
        """Insert or overwrite *key* at the top level."""
        self.data[key] = value

    def delete(self, key: str) -> None:
        """Remove *key* from the top level; absent keys are ignored."""
        self.data.pop(key, None)

    def get(self, key: str, default: object = Empty) -> Entry:
        return self.data.get(key, default)

    # -- Resolution -----------------------------------------------------

    def current_level(self, position: Position | None = None) -> Document:
        """Return the document at the tracked position (or *position*).

        An empty ``root`` resolves to the top-level document.

        Raises:
            TraversalError: if a key on the way is missing or holds a leaf.
        """
        if position is None:
            position = self.position
        return resolve(self.data, position.root)

    def traverse(self, path: str | Sequence[str]) -> Document:
        """Return the document at *path*, starting from the top level.

        *path* is a sequence of keys or a string split on
        ``config.path_separator``. An empty path returns ``data`` itself.

        Raises:
            TraversalError: if a key on the way is missing or holds a leaf.
        """
        return resolve(self.data, as_keys(path, self.config.path_separator))

    # -- Position -------------------------------------------------------

    def move_to(self, position: Position | str | Sequence[str]) -> None:
        """Replace the tracked position. Nothing is checked until it is walked."""
        if isinstance(position, Position):
            self.position = position.copy()
        else:
            self.position = Position(root=as_keys(position, self.config.path_separator))

    def enter(self, key: str) -> Document:
        """Step into *key* at the current level, creating it if absent.

        An existing nested document is reused as-is.

        Raises:
            TraversalError: if the current level cannot be resolved or *key*
                holds a leaf value.
        """
        level = self.current_level()
        if key not in level:
            level[key] = new_document()
            logger.debug("created %r under %r", key, self._fmt(self.position.root))

        child = self.position.child(key)
        nested = step(level, key, child.root, len(child.root) - 1)
        self.position = child
        return nested

    def leave(self) -> str | None:
        """Step up one level and return the key that was left.

        At the top level this is a no-op returning ``None``.
        """
        if self.position.is_root:
            return None
        self.position = self.position.parent()
        logger.debug("left %r, now at %r", self.position.key, self._fmt(self.position.root))
        return self.position.key

    # -- Writes at the current level -------------------------------------

    def set_current(self, key: str, value: Entry) -> None:
        """Write *key* at the current level and remember it as the last key."""
        level = self.current_level()
        level[key] = value
        self.position.key = key

    def delete_current(self, key: str) -> None:
        self.current_level().pop(key, None)

    def ensure(self, path: str | Sequence[str]) -> Document:
        """Return the document at *path*, creating missing mappings on the way.

        Leaf values are never overwritten.

        Raises:
            TraversalError: if a key on the way holds a leaf value.
        """
        keys = as_keys(path, self.config.path_separator)
        current = self.data
        for index, key in enumerate(keys):
            if key not in current:
                current[key] = new_document()
                logger.debug("created %r under %r", key, self._fmt(keys[:index]))
            current = step(current, key, keys, index)
        return current

    def reset(self) -> None:
        """Discard the document and position and start empty."""
        logger.debug("reset builder (%d top-level keys dropped)", len(self.data))
        self.data = new_document()
        self.position = Position()

    def _fmt(self, path: Sequence[str]) -> str:
        return format_path(path, self.config.path_separator)
