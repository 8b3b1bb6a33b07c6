"""Immutable description of one supported schematic file format."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Generic, TypeVar

from schematic_formats.errors import FormatConfigurationError
from schematic_formats.models import SchematicInstance, TagTree

S = TypeVar("S", bound=SchematicInstance)

_logger = logging.getLogger("schematic_formats.descriptor")


@dataclass(frozen=True, slots=True, kw_only=True)
class FormatDescriptor(Generic[S]):
    """Metadata and behaviour bundle for a schematic format.

    ``factory``, ``data_validator``, ``extension_validator`` and ``extension`` are
    required; leaving any of them unset raises :class:`FormatConfigurationError`
    when the descriptor is constructed.
    """

    factory: Callable[[Path | None], S] | None = None
    data_validator: Callable[[TagTree], bool] | None = None
    extension: str | None = None
    extension_validator: Callable[[str], bool] | None = None
    display_name: str = "?"
    icon: str | None = None
    has_name: bool = False

    def __post_init__(self) -> None:
        missing = [
            name
            for name in ("factory", "data_validator", "extension_validator", "extension")
            if not getattr(self, name)
        ]
        if missing:
            raise FormatConfigurationError(
                f"Format descriptor {self.display_name!r} is missing required field(s): {', '.join(missing)}"
            )

    def is_valid_extension(self, extension: str) -> bool:
        try:
            return bool(self.extension_validator(extension))
        except Exception:  # noqa: BLE001 - predicates are treated as total.
            _logger.exception(
                "extension_validator_failed",
                extra={"format": self.display_name, "extension": extension},
            )
            return False

    def is_valid_data(self, tag: TagTree) -> bool:
        try:
            return bool(self.data_validator(tag))
        except Exception:  # noqa: BLE001 - predicates are treated as total.
            _logger.exception("data_validator_failed", extra={"format": self.display_name})
            return False

    def create_schematic(self, file: Path | None = None) -> S:
        """Create an empty schematic bound to ``file``. Nothing is read from the file."""
        from schematic_formats.loader import create_empty

        return create_empty(self, file)

    def create_schematic_and_read_from_tag(self, file: Path | None, tag: TagTree) -> S | None:
        from schematic_formats.loader import create_and_populate

        return create_and_populate(self, file, tag)

    def __str__(self) -> str:
        return f"{self.display_name} ({self.extension})"
