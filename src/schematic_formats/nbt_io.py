"""Reading NBT tag trees from disk."""

from __future__ import annotations

import logging
from pathlib import Path

import nbtlib

from schematic_formats.config import settings
from schematic_formats.models import TagTree

_logger = logging.getLogger("schematic_formats.nbt_io")


def read_tag_tree(
    path: str | Path,
    *,
    gzipped: bool | None = None,
    byteorder: str | None = None,
) -> TagTree | None:
    """Read the root compound of an NBT file.

    Gzip compression is detected automatically unless ``gzipped`` (or the
    ``SCHEMATIC_FORMATS_NBT_GZIPPED`` setting) forces it. Returns ``None`` when the
    file is missing, unreadable or not a valid NBT container.
    """
    target = Path(path)
    if not target.is_file():
        _logger.warning("nbt_file_missing", extra={"path": str(target)})
        return None

    try:
        return nbtlib.load(
            target,
            gzipped=settings.nbt_gzipped if gzipped is None else gzipped,
            byteorder=byteorder or settings.nbt_byteorder,
        )
    except Exception as exc:  # noqa: BLE001 - any decoding failure means "no tag tree".
        _logger.warning(
            "nbt_read_failed",
            extra={"path": str(target), "error": f"{type(exc).__name__}: {exc}"},
        )
        return None
