from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

# No dependencies
class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSB = "hsb"
    HEX = "hex"
    NAME = "name"

RGB_MAX = 255
HUE_MAX = 360
HUE_SECTOR = 60
PERMILLE = 1000
HEX_MAX = 0xFFFFFF

IntTriple = Tuple[int, int, int]
EncodingValue = Union[IntTriple, int, str]
HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSB}


def is_hue_space(color_space: ColorSpace) -> bool:
    """
    Check if the given color space is a hue-based space (HSL or HSB).

    Args:
        color_space: Color space enum member or its string value
    Returns:
        True if hue-based, False otherwise
    """
    return ColorSpace(color_space) in HUE_SPACES
