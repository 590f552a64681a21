"""
Plain-text palette cache.

One color per line, ``r,g,b`` in decimal, newline-terminated::

    242,215,238
    211,188,192

Lock state is not stored.
"""

from __future__ import annotations
import logging
import os
from typing import Iterable, List, Union

from .color import Color
from .encodings import Rgb
from .errors import InvalidFormatError, PaletteIOError, PaletteParseError
from .types.color_types import RGB_MAX

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _parse_channel(field: str, line_number: int) -> int:
    try:
        value = int(field.strip())
    except ValueError as exc:
        raise PaletteParseError(
            f"Line {line_number}: invalid number {field.strip()!r}", line_number
        ) from exc
    if not 0 <= value <= RGB_MAX:
        raise PaletteParseError(
            f"Line {line_number}: {value} is not an 8-bit value", line_number
        )
    return value


def dumps(colors: Iterable[Color]) -> str:
    return "".join(color.rgb_to_string() for color in colors)


def loads(text: str) -> List[Color]:
    """
    Parse cache text into colors.

    Raises:
        InvalidFormatError: A line does not have exactly three fields
        PaletteParseError: A field is not an integer in 0-255
    """
    palette = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        fields = line.split(",")
        if len(fields) != 3:
            raise InvalidFormatError(
                f"Line {line_number}: expected 3 values, got {len(fields)}", line_number
            )
        r, g, b = (_parse_channel(f, line_number) for f in fields)
        palette.append(Color(Rgb(r, g, b)))
    return palette


def load_palette(path: PathLike) -> List[Color]:
    try:
        with open(path, "r", encoding="ascii") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise PaletteIOError(f"cannot read palette {os.fspath(path)!r}: {exc}") from exc

    palette = loads(text)
    logger.info("loaded %d colors from %s", len(palette), os.fspath(path))
    return palette


def save_palette(path: PathLike, colors: Iterable[Color]) -> None:
    """Write ``colors`` to ``path``, replacing any existing file."""
    text = dumps(colors)
    try:
        with open(path, "w", encoding="ascii", newline="\n") as f:
            f.write(text)
    except OSError as exc:
        raise PaletteIOError(f"cannot write palette {os.fspath(path)!r}: {exc}") from exc
    logger.info("saved %d colors to %s", text.count("\n"), os.fspath(path))
