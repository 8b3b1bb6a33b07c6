from __future__ import annotations

from pathlib import Path

from schematic_formats.descriptor import FormatDescriptor
from schematic_formats.detection import candidates_for_path, get_type, resolve
from schematic_formats.registry import LITEMATICA, SCHEMATICA, SPONGE, FormatRegistry


class MarkerSchematic:
    def __init__(self, file: Path | None = None) -> None:
        self.file = file

    @staticmethod
    def is_valid_schematic(tag) -> bool:
        return "marker" in tag

    def from_tag(self, tag) -> bool:
        return True

    def summary(self):
        return None


def _fake(name: str, *, accepts=lambda tag: "marker" in tag) -> FormatDescriptor:
    return FormatDescriptor(
        display_name=name,
        factory=MarkerSchematic,
        data_validator=accepts,
        extension=".fake",
        extension_validator=lambda ext: ext == ".fake",
    )


def test_candidates_follow_registry_order() -> None:
    assert candidates_for_path("house.schematic") == [SCHEMATICA, SPONGE]
    assert candidates_for_path(Path("worlds") / "tower.litematic") == [LITEMATICA]
    assert candidates_for_path("hut.schem") == [SPONGE]


def test_candidates_are_stable_between_calls() -> None:
    first = candidates_for_path("house.schematic")
    second = candidates_for_path("house.schematic")

    assert first == second


def test_builtin_formats_accept_upper_case_extensions() -> None:
    assert candidates_for_path("TOWER.LITEMATIC") == [LITEMATICA]
    assert candidates_for_path("House.Schematic") == [SCHEMATICA, SPONGE]


def test_extension_reaches_validators_unchanged() -> None:
    seen: list[str] = []

    def upper_only(ext: str) -> bool:
        seen.append(ext)
        return ext == ".SCH"

    descriptor = FormatDescriptor(
        display_name="Upper",
        factory=MarkerSchematic,
        data_validator=MarkerSchematic.is_valid_schematic,
        extension=".SCH",
        extension_validator=upper_only,
    )
    registry = FormatRegistry(types=(descriptor,))

    assert candidates_for_path("castle.SCH", registry) == [descriptor]
    assert candidates_for_path("castle.sch", registry) == []
    assert seen == [".SCH", ".sch"]


def test_unknown_or_missing_extension_has_no_candidates() -> None:
    assert candidates_for_path("notes.txt") == []
    assert candidates_for_path("litematic") == []
    assert candidates_for_path("") == []


def test_resolve_prefers_earlier_registered_format() -> None:
    first = _fake("First")
    second = _fake("Second")
    registry = FormatRegistry(types=(first, second))

    candidates = candidates_for_path("thing.fake", registry)

    assert candidates == [first, second]
    assert resolve(candidates, {"marker": 1}) is first


def test_resolve_skips_rejecting_candidates() -> None:
    first = _fake("First", accepts=lambda tag: False)
    second = _fake("Second")

    assert resolve([first, second], {"marker": 1}) is second


def test_resolve_returns_none_without_acceptor() -> None:
    assert resolve([_fake("Only")], {"other": 1}) is None
    assert resolve([], {"marker": 1}) is None


def test_get_type_picks_sponge_for_legacy_sponge_file(sponge_tree, schematica_tree) -> None:
    assert get_type("legacy.schematic", sponge_tree) is SPONGE
    assert get_type("legacy.schematic", schematica_tree) is SCHEMATICA
    assert get_type("legacy.schem", schematica_tree) is None
