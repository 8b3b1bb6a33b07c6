from __future__ import annotations

from schematic_formats.registry import LITEMATICA, SCHEMATICA, SPONGE, get_registry


def test_registry_order_is_fixed() -> None:
    assert get_registry().types == (LITEMATICA, SCHEMATICA, SPONGE)


def test_registry_is_built_once() -> None:
    assert get_registry() is get_registry()


def test_every_descriptor_accepts_its_own_extension() -> None:
    for descriptor in get_registry():
        assert descriptor.is_valid_extension(descriptor.extension)


def test_sponge_also_claims_the_mcedit_extension() -> None:
    assert SPONGE.is_valid_extension(".schematic")
    assert not SCHEMATICA.is_valid_extension(".schem")
    assert not LITEMATICA.is_valid_extension(".schematic")


def test_supported_extensions_and_lookup() -> None:
    registry = get_registry()

    assert registry.supported_extensions() == [".litematic", ".schem", ".schematic"]
    assert registry.by_display_name("sponge") is SPONGE
    assert registry.by_display_name("unknown") is None
    assert len(registry) == 3


def test_named_formats() -> None:
    assert LITEMATICA.has_name is True
    assert SPONGE.has_name is True
    assert SCHEMATICA.has_name is False
