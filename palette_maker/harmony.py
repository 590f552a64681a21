"""
Color harmonies on the HSL wheel.

Every function takes a ``Color`` and returns new ``Color`` objects built from
``Hsl`` points. Saturation and lightness are carried over untouched; only the
hue moves (or, for ``monochromatic``, only the lightness). Hues wrap with floor
modulo into ``[0, 360)``.

Example
-------
>>> from palette_maker import Color
>>> from palette_maker.harmony import complement, triad, square
>>> base = Color.from_hsl(60, 842, 319)
>>> complement(base).hsl
Hsl(240, 842, 319)
>>> [c.hsl.h for c in triad(base)]
[300, 180]
>>> [c.hsl.h for c in square(base)]
[330, 240, 150]
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from .color import Color
from .encodings import Hsl
from .types.color_types import PERMILLE
from .utils.hue import shift_hue

COMPLEMENT_SHIFT = 180
TRIAD_SHIFTS = (-120, 120)
SQUARE_SHIFTS = (-90, 180, 90)
ANALOGOUS_SHIFTS = (-30, 30)
MONOCHROMATIC_STEP = 50


def rotate(color: Color, degrees: int) -> Color:
    """Rotate the hue of ``color`` by ``degrees``."""
    h, s, l = color.hsl
    return Color(Hsl(shift_hue(h, degrees), s, l))


def _rotations(color: Color, shifts: Sequence[int]) -> Tuple[Color, ...]:
    return tuple(rotate(color, shift) for shift in shifts)


def complement(color: Color) -> Color:
    return rotate(color, COMPLEMENT_SHIFT)


def triad(color: Color) -> Tuple[Color, Color]:
    """Hues at -120° and +120°."""
    left, right = _rotations(color, TRIAD_SHIFTS)
    return left, right


def square(color: Color) -> Tuple[Color, Color, Color]:
    """Hues at -90°, +180° and +90° (left, middle, right)."""
    left, middle, right = _rotations(color, SQUARE_SHIFTS)
    return left, middle, right


def analogous(color: Color) -> Tuple[Color, Color]:
    """Hues at -30° and +30°."""
    left, right = _rotations(color, ANALOGOUS_SHIFTS)
    return left, right


def monochromatic(color: Color, step: int = MONOCHROMATIC_STEP) -> List[Color]:
    """
    Lightness ladder at the same hue and saturation.

    Walks away from the input lightness in ``step`` permille increments in both
    directions, keeping every rung within ``[0, 1000]``. The input lightness
    itself is excluded. Rungs are returned in ascending lightness.

    Args:
        color: Base color
        step: Lightness increment in permille; must be positive

    Returns:
        List of colors, darkest first
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    h, s, l = color.hsl
    darker = range(l - step, -1, -step)
    lighter = range(l + step, PERMILLE + 1, step)
    rungs = sorted([*darker, *lighter])
    return [Color(Hsl(h, s, rung)) for rung in rungs]
