"""Exception types raised by the schematic format layer."""


class SchematicFormatError(Exception):
    """Base class for schematic format errors."""


class FormatConfigurationError(SchematicFormatError, ValueError):
    """Raised when a format descriptor is declared without a required field."""


class SchematicLoadError(SchematicFormatError):
    """Raised by the loader adapter when a file cannot be matched to a known format."""
