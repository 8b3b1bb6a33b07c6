"""Factory and end-to-end loading of schematic files."""

from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Callable, TypeVar

from schematic_formats.descriptor import FormatDescriptor
from schematic_formats.detection import candidates_for_path, resolve
from schematic_formats.errors import SchematicLoadError
from schematic_formats.models import SchematicInstance, TagTree
from schematic_formats.nbt_io import read_tag_tree
from schematic_formats.registry import FormatRegistry

S = TypeVar("S", bound=SchematicInstance)

TagTreeReader = Callable[[Path], TagTree | None]

_logger = logging.getLogger("schematic_formats.loader")


def create_empty(descriptor: FormatDescriptor[S], file: Path | None = None) -> S:
    """Create an empty schematic of ``descriptor``'s format. ``file`` is not read."""
    return descriptor.factory(file)


def create_and_populate(descriptor: FormatDescriptor[S], file: Path | None, tag_tree: TagTree) -> S | None:
    """Create a schematic and populate it from ``tag_tree``.

    Returns ``None`` instead of a partially populated object when the format
    rejects the data.
    """
    schematic = create_empty(descriptor, file)
    try:
        populated = schematic.from_tag(tag_tree)
    except Exception:  # noqa: BLE001 - corrupt data is reported as a failed load.
        _logger.exception("schematic_populate_failed", extra={"format": descriptor.display_name, "file": str(file)})
        return None

    if not populated:
        _logger.info("schematic_populate_rejected", extra={"format": descriptor.display_name, "file": str(file)})
        return None
    return schematic


def detect_and_load(
    path: str | Path,
    tag_tree: TagTree | None = None,
    *,
    registry: FormatRegistry | None = None,
    reader: TagTreeReader = read_tag_tree,
) -> SchematicInstance | None:
    """Detect the format of ``path`` and load it.

    When ``tag_tree`` is given it is used for content detection and population
    and nothing is read from disk; ``path`` then only contributes its extension.
    """
    path = Path(path)
    candidates = candidates_for_path(path, registry)
    if not candidates:
        _logger.info("schematic_unknown_extension", extra={"path": str(path)})
        return None

    if tag_tree is None:
        tag_tree = reader(path)
        if tag_tree is None:
            return None

    descriptor = resolve(candidates, tag_tree)
    if descriptor is None:
        _logger.info(
            "schematic_no_matching_format",
            extra={"path": str(path), "candidates": [c.display_name for c in candidates]},
        )
        return None

    _logger.info("schematic_format_resolved", extra={"path": str(path), "format": descriptor.display_name})
    return create_and_populate(descriptor, path, tag_tree)


class FileSchematicLoader:
    """Loads any registered schematic format from the local filesystem as a summary payload."""

    def __init__(self, registry: FormatRegistry | None = None, reader: TagTreeReader = read_tag_tree) -> None:
        self._registry = registry
        self._reader = reader

    def load(self, path: str | Path) -> dict:
        target = Path(path).expanduser()
        if not target.exists():
            raise FileNotFoundError(f"Schematic not found: {target}")

        schematic = detect_and_load(target, registry=self._registry, reader=self._reader)
        if schematic is None:
            raise SchematicLoadError(f"Not a recognized or readable schematic: {target}")

        payload = asdict(schematic.summary())
        payload["path"] = str(target)
        return payload
