from typing import Tuple

from ..types.color_types import PERMILLE
from ..utils.num_utils import round_half_up
from .chroma import chroma_extrema, hue_from_channels, rgb_to_permille, store_hue


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """
    Convert 8-bit RGB to permille HSL.

    Channels are rescaled to permille first; saturation is
    ``delta / (1 - |2L - 1|)`` and is 0 for achromatic input.
    """
    r_p, g_p, b_p = rgb_to_permille(r, g, b)
    c_max, c_min, delta = chroma_extrema(r_p, g_p, b_p)

    l = (c_max + c_min) / 2
    h = hue_from_channels(r_p, g_p, b_p, c_max, delta)

    if delta == 0:
        s = 0.0
    else:
        s = delta / (1 - abs(2 * (l / PERMILLE) - 1))

    return store_hue(h), min(PERMILLE, round_half_up(s)), round_half_up(l)


def hsb_to_hsl(h: int, s: int, b: int) -> Tuple[int, int, int]:
    """Direct HSB → HSL; hue passes through untouched."""
    s_v = s / PERMILLE
    v = b / PERMILLE

    l = v * (1 - s_v / 2)
    if l == 0 or l == 1:
        s_l = 0.0
    else:
        s_l = (v - l) / min(l, 1 - l)

    return h, round_half_up(s_l * PERMILLE), round_half_up(l * PERMILLE)
