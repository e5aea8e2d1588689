"""Builder configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass(frozen=True)
class BuilderConfig:
    """Configuration for a TreeBuilder (immutable).

    Attributes:
        path_separator: Separator used to split string paths such as
            ``"level1.level2"`` into keys.
    """

    path_separator: str = "."

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.path_separator, str) or not self.path_separator:
            raise ValueError(f"path_separator must be a non-empty string: {self.path_separator!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BuilderConfig:
        """Hydrate a BuilderConfig from a dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in valid_keys})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
