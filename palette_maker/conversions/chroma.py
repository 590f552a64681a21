from typing import Tuple

from ..types.color_types import HUE_MAX, HUE_SECTOR, PERMILLE, RGB_MAX
from ..utils.num_utils import round_half_up


def rgb_to_permille(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """Rescale 8-bit channels to rounded permille."""
    return (
        round_half_up(r / RGB_MAX * PERMILLE),
        round_half_up(g / RGB_MAX * PERMILLE),
        round_half_up(b / RGB_MAX * PERMILLE),
    )


def chroma_extrema(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """Return ``(c_max, c_min, delta)`` for permille channels."""
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    return c_max, c_min, c_max - c_min


def hue_from_channels(r: int, g: int, b: int, c_max: int, delta: int) -> float:
    """
    Six-branch hue selector over permille channels.

    Achromatic input (``delta == 0``) has hue 0. The red branch uses floor
    modulo, so the result is always in ``[0, 360)``.
    """
    if delta == 0:
        return 0.0
    if c_max == r:
        h = HUE_SECTOR * (((g - b) / delta) % 6)
    elif c_max == g:
        h = HUE_SECTOR * ((b - r) / delta + 2)
    else:
        h = HUE_SECTOR * ((r - g) / delta + 4)
    return h % HUE_MAX


def store_hue(h: float) -> int:
    """Round a hue for storage; 360 folds back onto 0."""
    return round_half_up(h) % HUE_MAX
