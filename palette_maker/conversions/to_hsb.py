from typing import Tuple

from ..types.color_types import PERMILLE
from ..utils.num_utils import round_half_up
from .chroma import chroma_extrema, hue_from_channels, rgb_to_permille, store_hue


def rgb_to_hsb(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """
    Convert 8-bit RGB to permille HSB.

    Brightness is the largest permille channel; saturation is
    ``delta / c_max`` and is 0 for black.
    """
    r_p, g_p, b_p = rgb_to_permille(r, g, b)
    c_max, _, delta = chroma_extrema(r_p, g_p, b_p)

    h = hue_from_channels(r_p, g_p, b_p, c_max, delta)
    s = 0.0 if c_max == 0 else delta / c_max * PERMILLE

    return store_hue(h), round_half_up(s), c_max


def hsl_to_hsb(h: int, s: int, l: int) -> Tuple[int, int, int]:
    """Direct HSL → HSB; hue passes through untouched."""
    s_l = s / PERMILLE
    l_f = l / PERMILLE

    v = l_f + s_l * min(l_f, 1 - l_f)
    s_v = 0.0 if v == 0 else 2 * (1 - l_f / v)

    return h, round_half_up(s_v * PERMILLE), round_half_up(v * PERMILLE)
