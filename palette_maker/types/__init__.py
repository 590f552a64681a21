from .color_types import (
    ColorSpace,
    RGB_MAX,
    HUE_MAX,
    HUE_SECTOR,
    PERMILLE,
    HEX_MAX,
    IntTriple,
    EncodingValue,
    is_hue_space,
)

__all__ = [
    "ColorSpace",
    "RGB_MAX",
    "HUE_MAX",
    "HUE_SECTOR",
    "PERMILLE",
    "HEX_MAX",
    "IntTriple",
    "EncodingValue",
    "is_hue_space",
]
