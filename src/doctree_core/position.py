"""Position: where a builder currently is inside its document."""

from __future__ import annotations

from dataclasses import dataclass, field

from .traversal import split_path


@dataclass(slots=True)
class Position:
    """A path of keys from the top level down to a sub-document.

    ``root`` holds one key per step into the tree. ``key`` is the key most
    recently addressed at that level; callers use it to know where the next
    write lands and traversal ignores it.

    A Position is never checked against a document when it is created or
    changed. Whether ``root`` resolves is only known once it is walked.
    """

    root: list[str] = field(default_factory=list)
    key: str = ""

    @classmethod
    def from_string(cls, text: str, separator: str = ".") -> Position:
        return cls(root=split_path(text, separator))

    @property
    def depth(self) -> int:
        return len(self.root)

    @property
    def is_root(self) -> bool:
        return not self.root

    def child(self, key: str) -> Position:
        """Return the Position one level below, under *key*."""
        return Position(root=[*self.root, key])

    def parent(self) -> Position:
        """Return the Position one level up; the root is its own parent.

        The returned Position's ``key`` is the key that was left.
        """
        if not self.root:
            return Position()
        return Position(root=self.root[:-1], key=self.root[-1])

    def copy(self) -> Position:
        return Position(root=list(self.root), key=self.key)
