"""Two-stage format detection: extension candidates, then content resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from schematic_formats.descriptor import FormatDescriptor
from schematic_formats.models import TagTree
from schematic_formats.registry import FormatRegistry, get_registry

_logger = logging.getLogger("schematic_formats.detection")


def path_extension(path: str | Path) -> str:
    """Return the suffix of ``path`` including the dot, exactly as written, or ``""``."""
    return Path(path).suffix if str(path) else ""


def candidates_for_path(path: str | Path, registry: FormatRegistry | None = None) -> list[FormatDescriptor]:
    """Return, in registry order, every format whose extension validator accepts ``path``."""
    extension = path_extension(path)
    if not extension:
        return []

    if registry is None:
        registry = get_registry()
    candidates = [descriptor for descriptor in registry if descriptor.is_valid_extension(extension)]
    _logger.debug(
        "format_candidates",
        extra={"path": str(path), "extension": extension, "candidates": [c.display_name for c in candidates]},
    )
    return candidates


def resolve(candidates: Iterable[FormatDescriptor], tag_tree: TagTree) -> FormatDescriptor | None:
    """Return the first candidate whose content validator accepts ``tag_tree``."""
    for descriptor in candidates:
        if descriptor.is_valid_data(tag_tree):
            return descriptor
    return None


def get_type(path: str | Path, tag_tree: TagTree, registry: FormatRegistry | None = None) -> FormatDescriptor | None:
    """Resolve the format of an already-parsed file."""
    return resolve(candidates_for_path(path, registry), tag_tree)
