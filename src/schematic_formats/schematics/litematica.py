"""Litematica ``.litematic`` schematics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from schematic_formats.models import BlockSize, SchematicSummary, TagTree
from schematic_formats.schematics import _tags

FILE_NAME_EXTENSION = ".litematic"
SCHEMATIC_VERSION = 7

_logger = logging.getLogger("schematic_formats.schematics.litematica")


@dataclass(slots=True)
class LitematicaRegion:
    name: str
    position: BlockSize
    size: BlockSize
    palette: list[str] = field(default_factory=list)
    entity_count: int = 0
    tile_entity_count: int = 0


class LitematicaSchematic:
    """Multi-region schematic written by the Litematica mod."""

    def __init__(self, file: Path | None = None) -> None:
        self.file = file
        self.version: int | None = None
        self.minecraft_data_version: int | None = None
        self.name: str | None = None
        self.author: str | None = None
        self.description: str | None = None
        self.enclosing_size: BlockSize | None = None
        self.total_blocks: int | None = None
        self.time_created: int | None = None
        self.time_modified: int | None = None
        self.regions: dict[str, LitematicaRegion] = {}

    @staticmethod
    def is_valid_schematic(tag: TagTree) -> bool:
        return (
            _tags.has_int(tag, "Version")
            and _tags.has_compound(tag, "Regions")
            and _tags.has_compound(tag, "Metadata")
        )

    def from_tag(self, tag: TagTree) -> bool:
        if not self.is_valid_schematic(tag):
            return False

        version = int(tag["Version"])
        if version < 1 or version > SCHEMATIC_VERSION:
            _logger.warning(
                "litematica_unsupported_version",
                extra={"version": version, "max_version": SCHEMATIC_VERSION, "file": str(self.file)},
            )
            return False

        regions: dict[str, LitematicaRegion] = {}
        for region_name, region_tag in tag["Regions"].items():
            region = self._read_region(str(region_name), region_tag)
            if region is None:
                _logger.warning("litematica_invalid_region", extra={"region": region_name, "file": str(self.file)})
                return False
            regions[region.name] = region

        metadata = tag["Metadata"]
        self.version = version
        self.minecraft_data_version = _tags.get_int(tag, "MinecraftDataVersion")
        self.name = _tags.get_string(metadata, "Name")
        self.author = _tags.get_string(metadata, "Author")
        self.description = _tags.get_string(metadata, "Description")
        self.enclosing_size = _tags.read_size(metadata, "EnclosingSize")
        self.total_blocks = _tags.get_int(metadata, "TotalBlocks")
        self.time_created = _tags.get_int(metadata, "TimeCreated")
        self.time_modified = _tags.get_int(metadata, "TimeModified")
        self.regions = regions
        return True

    @staticmethod
    def _read_region(name: str, tag: object) -> LitematicaRegion | None:
        if not _tags.is_compound(tag):
            return None

        position = _tags.read_size(tag, "Position")
        size = _tags.read_size(tag, "Size")
        palette_tag = tag.get("BlockStatePalette")
        if position is None or size is None or not isinstance(palette_tag, list):
            return None

        palette = [str(entry.get("Name", "?")) for entry in palette_tag if _tags.is_compound(entry)]
        return LitematicaRegion(
            name=name,
            position=position,
            size=size,
            palette=palette,
            entity_count=len(tag.get("Entities", [])),
            tile_entity_count=len(tag.get("TileEntities", [])),
        )

    def summary(self) -> SchematicSummary:
        palette = {block for region in self.regions.values() for block in region.palette}
        return SchematicSummary(
            format="Litematica",
            name=self.name,
            author=self.author,
            size=self.enclosing_size,
            block_count=self.total_blocks,
            region_count=len(self.regions),
            palette_size=len(palette),
            file=str(self.file) if self.file else None,
        )
