"""Ordered registry of every known schematic format.

Registration order is the detection priority: when more than one descriptor
accepts a file's extension, content validators are tried in this order and the
first one to accept wins. Sponge also claims ``.schematic`` so that legacy Sponge
files saved under the MCEdit extension still open, but only when their content
matches and the MCEdit validator has already declined.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache

from schematic_formats.descriptor import FormatDescriptor
from schematic_formats.schematics import litematica, schematica, sponge
from schematic_formats.schematics.litematica import LitematicaSchematic
from schematic_formats.schematics.schematica import SchematicaSchematic
from schematic_formats.schematics.sponge import SpongeSchematic

LITEMATICA: FormatDescriptor[LitematicaSchematic] = FormatDescriptor(
    display_name="Litematica",
    factory=LitematicaSchematic,
    data_validator=LitematicaSchematic.is_valid_schematic,
    extension=litematica.FILE_NAME_EXTENSION,
    extension_validator=lambda ext: ext.lower() == litematica.FILE_NAME_EXTENSION,
    icon="file_icon_litematic",
    has_name=True,
)

SCHEMATICA: FormatDescriptor[SchematicaSchematic] = FormatDescriptor(
    display_name="Schematica/MCEdit",
    factory=SchematicaSchematic,
    data_validator=SchematicaSchematic.is_valid_schematic,
    extension=schematica.FILE_NAME_EXTENSION,
    extension_validator=lambda ext: ext.lower() == schematica.FILE_NAME_EXTENSION,
    icon="file_icon_schematic",
)

SPONGE: FormatDescriptor[SpongeSchematic] = FormatDescriptor(
    display_name="Sponge",
    factory=SpongeSchematic,
    data_validator=SpongeSchematic.is_valid_schematic,
    extension=sponge.FILE_NAME_EXTENSION,
    extension_validator=lambda ext: ext.lower() in (sponge.FILE_NAME_EXTENSION, schematica.FILE_NAME_EXTENSION),
    icon="file_icon_sponge",
    has_name=True,
)


@dataclass(frozen=True, slots=True)
class FormatRegistry:
    """Immutable, ordered collection of format descriptors."""

    types: tuple[FormatDescriptor, ...]

    def __iter__(self) -> Iterator[FormatDescriptor]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)

    def supported_extensions(self) -> list[str]:
        return sorted({descriptor.extension for descriptor in self.types})

    def by_display_name(self, name: str) -> FormatDescriptor | None:
        lowered = name.lower()
        for descriptor in self.types:
            if descriptor.display_name.lower() == lowered:
                return descriptor
        return None


@lru_cache(maxsize=1)
def get_registry() -> FormatRegistry:
    """Return the process-wide registry, built on first use."""
    return FormatRegistry(types=(LITEMATICA, SCHEMATICA, SPONGE))
