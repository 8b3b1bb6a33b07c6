from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

TagTree = Mapping[str, Any]


@dataclass(slots=True, frozen=True)
class BlockSize:
    x: int
    y: int
    z: int

    @property
    def volume(self) -> int:
        return abs(self.x * self.y * self.z)


@dataclass(slots=True)
class SchematicSummary:
    format: str
    name: str | None
    author: str | None
    size: BlockSize | None
    block_count: int | None
    region_count: int
    palette_size: int
    file: str | None = None


class SchematicInstance(Protocol):
    """Capability set every in-memory schematic format provides."""

    file: Path | None

    def from_tag(self, tag: TagTree) -> bool:
        """Populate this instance from a tag tree. Returns False on malformed data."""

    @staticmethod
    def is_valid_schematic(tag: TagTree) -> bool:
        """Return True if the tag tree looks like this format."""

    def summary(self) -> SchematicSummary:
        """Return a flat description of the populated schematic."""
