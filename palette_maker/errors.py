"""
Recoverable failures raised by palette_maker.

Contract violations (out-of-domain channel values, malformed arguments) are
reported with the builtin ``ValueError`` / ``TypeError`` instead; they point at
a bug in the caller, not at the environment.
"""
from __future__ import annotations


class PaletteError(Exception):
    """Base class for every recoverable palette_maker failure."""


class PaletteIOError(PaletteError):
    """The palette cache could not be read or written."""


class PaletteParseError(PaletteError):
    """A numeric field in the palette cache is not a valid 8-bit integer."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class InvalidFormatError(PaletteError):
    """A palette cache line does not hold exactly three fields."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class UntranslatableEncodingError(PaletteError):
    """A conversion between encodings could not complete."""


class UnknownNameError(UntranslatableEncodingError):
    """A color name is not present in the named-color table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unable to translate: unknown color name {name!r}")
        self.name = name
