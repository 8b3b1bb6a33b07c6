"""In-memory representations of the supported schematic formats."""

from .litematica import LitematicaSchematic
from .schematica import SchematicaSchematic
from .sponge import SpongeSchematic

__all__ = ["LitematicaSchematic", "SchematicaSchematic", "SpongeSchematic"]
