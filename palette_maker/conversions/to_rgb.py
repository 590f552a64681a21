from typing import Tuple

from ..errors import UnknownNameError
from ..samples.named_colors import NAMED_COLORS
from ..types.color_types import HUE_SECTOR, PERMILLE, RGB_MAX
from ..utils.num_utils import round_half_up


def _sector_rgb(h: int, c: float, x: float) -> Tuple[float, float, float]:
    region = h // HUE_SECTOR
    if region == 0:
        return c, x, 0.0
    elif region == 1:
        return x, c, 0.0
    elif region == 2:
        return 0.0, c, x
    elif region == 3:
        return 0.0, x, c
    elif region == 4:
        return x, 0.0, c
    # region 5, and hue 360 which lands on the red axis
    return c, 0.0, x


def _to_channel(v: float) -> int:
    return max(0, min(RGB_MAX, round_half_up(v * RGB_MAX)))


def _secondary(c: float, h: int) -> float:
    return c * (1 - abs((h / HUE_SECTOR) % 2 - 1))


def hsl_to_rgb(h: int, s: int, l: int) -> Tuple[int, int, int]:
    """
    Convert permille HSL to 8-bit RGB.

    Args:
        h: Hue in degrees, 0-360
        s: Saturation in permille, 0-1000
        l: Lightness in permille, 0-1000

    Returns:
        Tuple of (r, g, b), each rounded to the nearest integer in 0-255
    """
    s_f = s / PERMILLE
    l_f = l / PERMILLE
    c = (1 - abs(2 * l_f - 1)) * s_f
    x = _secondary(c, h)
    m = l_f - c / 2
    r_p, g_p, b_p = _sector_rgb(h, c, x)
    return _to_channel(r_p + m), _to_channel(g_p + m), _to_channel(b_p + m)


def hsb_to_rgb(h: int, s: int, b: int) -> Tuple[int, int, int]:
    """
    Convert permille HSB to 8-bit RGB.

    Args:
        h: Hue in degrees, 0-360
        s: Saturation in permille, 0-1000
        b: Brightness in permille, 0-1000

    Returns:
        Tuple of (r, g, b), each rounded to the nearest integer in 0-255
    """
    s_f = s / PERMILLE
    v_f = b / PERMILLE
    c = v_f * s_f
    x = _secondary(c, h)
    m = v_f - c
    r_p, g_p, b_p = _sector_rgb(h, c, x)
    return _to_channel(r_p + m), _to_channel(g_p + m), _to_channel(b_p + m)


def hex_to_rgb(value: int) -> Tuple[int, int, int]:
    """Unpack ``0xRRGGBB`` into its three bytes."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def name_to_rgb(name: str) -> Tuple[int, int, int]:
    """Look a name up in the named-color table."""
    try:
        return NAMED_COLORS[name]
    except KeyError:
        raise UnknownNameError(name) from None
