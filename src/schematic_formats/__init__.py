"""Detection, registry and loading of Minecraft schematic file formats."""

from .descriptor import FormatDescriptor
from .detection import candidates_for_path, get_type, resolve
from .errors import FormatConfigurationError, SchematicFormatError, SchematicLoadError
from .loader import FileSchematicLoader, create_and_populate, create_empty, detect_and_load
from .models import SchematicInstance, SchematicSummary, TagTree
from .nbt_io import read_tag_tree
from .registry import LITEMATICA, SCHEMATICA, SPONGE, FormatRegistry, get_registry

__all__ = [
    "FileSchematicLoader",
    "FormatConfigurationError",
    "FormatDescriptor",
    "FormatRegistry",
    "LITEMATICA",
    "SCHEMATICA",
    "SPONGE",
    "SchematicFormatError",
    "SchematicInstance",
    "SchematicLoadError",
    "SchematicSummary",
    "TagTree",
    "candidates_for_path",
    "create_and_populate",
    "create_empty",
    "detect_and_load",
    "get_registry",
    "get_type",
    "read_tag_tree",
    "resolve",
]
