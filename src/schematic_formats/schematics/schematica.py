"""Schematica / MCEdit ``.schematic`` files (numeric block ids)."""

from __future__ import annotations

import logging
from pathlib import Path

from schematic_formats.models import BlockSize, SchematicSummary, TagTree
from schematic_formats.schematics import _tags

FILE_NAME_EXTENSION = ".schematic"

_logger = logging.getLogger("schematic_formats.schematics.schematica")


class SchematicaSchematic:
    """Single-volume schematic with legacy numeric block ids."""

    def __init__(self, file: Path | None = None) -> None:
        self.file = file
        self.size: BlockSize | None = None
        self.materials: str | None = None
        self.block_ids: list[int] = []
        self.block_data: list[int] = []
        self.mapping: dict[str, int] = {}
        self.entity_count = 0
        self.tile_entity_count = 0

    @staticmethod
    def is_valid_schematic(tag: TagTree) -> bool:
        return (
            all(_tags.has_int(tag, key) for key in ("Width", "Height", "Length"))
            and _tags.has_array(tag, "Blocks")
            and _tags.has_array(tag, "Data")
        )

    def from_tag(self, tag: TagTree) -> bool:
        if not self.is_valid_schematic(tag):
            return False

        materials = _tags.get_string(tag, "Materials")
        if materials is not None and materials != "Alpha":
            _logger.warning("schematica_unsupported_materials", extra={"materials": materials, "file": str(self.file)})
            return False

        size = _tags.read_whl(tag)
        blocks = _tags.unsigned_bytes(tag["Blocks"])
        data = _tags.unsigned_bytes(tag["Data"])
        if len(blocks) != size.volume or len(data) != size.volume:
            _logger.warning(
                "schematica_size_mismatch",
                extra={"expected": size.volume, "blocks": len(blocks), "data": len(data), "file": str(self.file)},
            )
            return False

        if _tags.has_array(tag, "AddBlocks"):
            blocks = self._apply_add_blocks(blocks, _tags.unsigned_bytes(tag["AddBlocks"]))

        mapping = tag.get("SchematicaMapping")
        self.mapping = (
            {str(name): int(block_id) for name, block_id in mapping.items() if _tags.is_int(block_id)}
            if _tags.is_compound(mapping)
            else {}
        )
        self.size = size
        self.materials = materials or "Alpha"
        self.block_ids = blocks
        self.block_data = data
        self.entity_count = len(tag.get("Entities", []))
        self.tile_entity_count = len(tag.get("TileEntities", []))
        return True

    @staticmethod
    def _apply_add_blocks(blocks: list[int], add_blocks: list[int]) -> list[int]:
        """Merge the 4-bit high nibbles stored for block ids above 255."""
        merged = list(blocks)
        for index in range(len(merged)):
            packed_index = index >> 1
            if packed_index >= len(add_blocks):
                break
            packed = add_blocks[packed_index]
            high = (packed & 0x0F) << 8 if index & 1 == 0 else (packed & 0xF0) << 4
            merged[index] |= high
        return merged

    def summary(self) -> SchematicSummary:
        return SchematicSummary(
            format="Schematica/MCEdit",
            name=None,
            author=None,
            size=self.size,
            block_count=sum(1 for block_id in self.block_ids if block_id != 0),
            region_count=1 if self.size else 0,
            palette_size=len(self.mapping) or len({block_id for block_id in self.block_ids if block_id != 0}),
            file=str(self.file) if self.file else None,
        )
