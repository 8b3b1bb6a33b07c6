"""Sponge ``.schem`` schematics, versions 1 to 3."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from schematic_formats.models import BlockSize, SchematicSummary, TagTree
from schematic_formats.schematics import _tags

FILE_NAME_EXTENSION = ".schem"
MAX_VERSION = 3
AIR_BLOCKS = frozenset({"minecraft:air", "minecraft:cave_air", "minecraft:void_air"})

_logger = logging.getLogger("schematic_formats.schematics.sponge")


def _unwrap(tag: TagTree) -> TagTree:
    """Version 3 nests everything under a ``Schematic`` compound."""
    inner = tag.get("Schematic")
    return inner if _tags.is_compound(inner) else tag


def _block_container(tag: TagTree) -> Mapping[str, Any] | None:
    """Return the compound holding ``Palette`` and the packed block array, or None."""
    blocks = tag.get("Blocks")
    if _tags.is_compound(blocks):
        if _tags.has_compound(blocks, "Palette") and _tags.has_array(blocks, "Data"):
            return blocks
        return None
    if _tags.has_compound(tag, "Palette") and _tags.has_array(tag, "BlockData"):
        return tag
    return None


def decode_varints(data: list[int]) -> list[int] | None:
    """Decode a stream of unsigned LEB128 varints. Returns None on a truncated stream."""
    values: list[int] = []
    value = 0
    shift = 0
    for byte in data:
        value |= (byte & 0x7F) << shift
        if byte & 0x80:
            shift += 7
            if shift > 28:
                return None
            continue
        values.append(value)
        value = 0
        shift = 0
    if shift:
        return None
    return values


class SpongeSchematic:
    """Palette-based schematic used by WorldEdit and Sponge."""

    def __init__(self, file: Path | None = None) -> None:
        self.file = file
        self.version: int | None = None
        self.data_version: int | None = None
        self.name: str | None = None
        self.author: str | None = None
        self.size: BlockSize | None = None
        self.offset: tuple[int, int, int] = (0, 0, 0)
        self.palette: dict[str, int] = {}
        self.block_states: list[int] = []
        self.block_entity_count = 0
        self.entity_count = 0

    @staticmethod
    def is_valid_schematic(tag: TagTree) -> bool:
        tag = _unwrap(tag)
        return (
            _tags.has_int(tag, "Version")
            and all(_tags.has_int(tag, key) for key in ("Width", "Height", "Length"))
            and _block_container(tag) is not None
        )

    def from_tag(self, tag: TagTree) -> bool:
        if not self.is_valid_schematic(tag):
            return False

        tag = _unwrap(tag)
        version = int(tag["Version"])
        if version < 1 or version > MAX_VERSION:
            _logger.warning("sponge_unsupported_version", extra={"version": version, "file": str(self.file)})
            return False

        container = _block_container(tag)
        packed = container["BlockData"] if container is tag else container["Data"]
        palette = {str(name): int(index) for name, index in container["Palette"].items() if _tags.is_int(index)}
        states = decode_varints(_tags.unsigned_bytes(packed))
        size = _tags.read_whl(tag)
        if states is None or len(states) != size.volume:
            _logger.warning(
                "sponge_block_data_mismatch",
                extra={"expected": size.volume, "decoded": None if states is None else len(states), "file": str(self.file)},
            )
            return False

        metadata = tag.get("Metadata")
        metadata = metadata if _tags.is_compound(metadata) else {}
        offset = tag.get("Offset")

        self.version = version
        self.data_version = _tags.get_int(tag, "DataVersion")
        self.name = _tags.get_string(metadata, "Name")
        self.author = _tags.get_string(metadata, "Author")
        self.size = size
        self.offset = tuple(int(v) for v in offset) if _tags.is_array(offset) and len(offset) == 3 else (0, 0, 0)
        self.palette = palette
        self.block_states = states
        block_entities = container.get("BlockEntities", tag.get("BlockEntities", tag.get("TileEntities", [])))
        self.block_entity_count = len(block_entities)
        self.entity_count = len(tag.get("Entities", []))
        return True

    def summary(self) -> SchematicSummary:
        air_ids = {index for name, index in self.palette.items() if name.split("[", 1)[0] in AIR_BLOCKS}
        return SchematicSummary(
            format="Sponge",
            name=self.name,
            author=self.author,
            size=self.size,
            block_count=sum(1 for state in self.block_states if state not in air_ids),
            region_count=1 if self.size else 0,
            palette_size=len(self.palette),
            file=str(self.file) if self.file else None,
        )
