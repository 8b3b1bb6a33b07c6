"""Small read helpers over NBT tag trees.

Tag trees arrive as ``nbtlib`` compounds, which subclass the builtin container
types, so the checks here work on ``nbtlib`` values and plain Python values alike.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import nbtlib

from schematic_formats.models import BlockSize

_ARRAY_TYPES = (nbtlib.ByteArray, nbtlib.IntArray, nbtlib.LongArray)


def is_compound(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    if isinstance(value, (*_ARRAY_TYPES, bytes, bytearray)):
        return True
    return isinstance(value, list) and all(is_int(item) for item in value)


def has_int(tag: Mapping[str, Any], key: str) -> bool:
    return is_int(tag.get(key))


def has_compound(tag: Mapping[str, Any], key: str) -> bool:
    return is_compound(tag.get(key))


def has_array(tag: Mapping[str, Any], key: str) -> bool:
    return is_array(tag.get(key))


def get_string(tag: Mapping[str, Any], key: str) -> str | None:
    value = tag.get(key)
    return str(value) if is_string(value) else None


def get_int(tag: Mapping[str, Any], key: str, default: int | None = None) -> int | None:
    value = tag.get(key)
    return int(value) if is_int(value) else default


def read_size(tag: Mapping[str, Any], key: str) -> BlockSize | None:
    """Read an ``{x, y, z}`` compound."""
    value = tag.get(key)
    if not is_compound(value) or not all(has_int(value, axis) for axis in ("x", "y", "z")):
        return None
    return BlockSize(int(value["x"]), int(value["y"]), int(value["z"]))


def read_whl(tag: Mapping[str, Any]) -> BlockSize | None:
    """Read the ``Width``/``Height``/``Length`` triple used by MCEdit and Sponge."""
    if not all(has_int(tag, key) for key in ("Width", "Height", "Length")):
        return None
    size = BlockSize(int(tag["Width"]), int(tag["Height"]), int(tag["Length"]))
    # Sponge stores these as unsigned shorts.
    return BlockSize(size.x & 0xFFFF, size.y & 0xFFFF, size.z & 0xFFFF)


def unsigned_bytes(array: Any) -> list[int]:
    return [int(value) & 0xFF for value in array]
