from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from nbtlib import ByteArray, Compound, File, Int, IntArray, List, Long, LongArray, Short, String


def _xyz(x: int, y: int, z: int) -> Compound:
    return Compound({"x": Int(x), "y": Int(y), "z": Int(z)})


@pytest.fixture
def litematica_tree() -> Compound:
    return Compound(
        {
            "Version": Int(6),
            "MinecraftDataVersion": Int(3465),
            "Metadata": Compound(
                {
                    "Name": String("Tower"),
                    "Author": String("builder"),
                    "Description": String(""),
                    "RegionCount": Int(1),
                    "TotalBlocks": Long(12),
                    "TotalVolume": Long(27),
                    "EnclosingSize": _xyz(3, 3, 3),
                    "TimeCreated": Long(1_700_000_000_000),
                    "TimeModified": Long(1_700_000_000_000),
                }
            ),
            "Regions": Compound(
                {
                    "Tower": Compound(
                        {
                            "Position": _xyz(0, 0, 0),
                            "Size": _xyz(3, 3, 3),
                            "BlockStatePalette": List[Compound](
                                [
                                    Compound({"Name": String("minecraft:air")}),
                                    Compound({"Name": String("minecraft:stone")}),
                                ]
                            ),
                            "BlockStates": LongArray([0]),
                            "Entities": List[Compound](),
                            "TileEntities": List[Compound](),
                        }
                    )
                }
            ),
        }
    )


@pytest.fixture
def schematica_tree() -> Compound:
    return Compound(
        {
            "Width": Short(2),
            "Height": Short(1),
            "Length": Short(2),
            "Materials": String("Alpha"),
            "Blocks": ByteArray([1, 0, 4, 1]),
            "Data": ByteArray([0, 0, 0, 0]),
            "Entities": List[Compound](),
            "TileEntities": List[Compound](),
        }
    )


@pytest.fixture
def sponge_tree() -> Compound:
    return Compound(
        {
            "Version": Int(2),
            "DataVersion": Int(3465),
            "Width": Short(2),
            "Height": Short(1),
            "Length": Short(2),
            "Offset": IntArray([0, 0, 0]),
            "PaletteMax": Int(2),
            "Palette": Compound({"minecraft:air": Int(0), "minecraft:stone": Int(1)}),
            "BlockData": ByteArray([1, 0, 1, 1]),
            "BlockEntities": List[Compound](),
            "Metadata": Compound({"Name": String("Hut"), "Author": String("builder")}),
        }
    )


@pytest.fixture
def sponge_v3_tree() -> Compound:
    return Compound(
        {
            "Schematic": Compound(
                {
                    "Version": Int(3),
                    "DataVersion": Int(3700),
                    "Width": Short(1),
                    "Height": Short(2),
                    "Length": Short(1),
                    "Offset": IntArray([4, 0, -2]),
                    "Blocks": Compound(
                        {
                            "Palette": Compound({"minecraft:air": Int(0), "minecraft:oak_planks": Int(1)}),
                            "Data": ByteArray([1, 1]),
                            "BlockEntities": List[Compound](),
                        }
                    ),
                    "Metadata": Compound({"Name": String("Pillar")}),
                }
            )
        }
    )


@pytest.fixture
def write_nbt(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str, tree: Compound, *, gzipped: bool = True) -> Path:
        path = tmp_path / name
        File(tree).save(path, gzipped=gzipped)
        return path

    return _write
