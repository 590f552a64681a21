from __future__ import annotations
from .encoding_base import EncodingBase, build_registry
from .rgb import Rgb
from .hsl import Hsl
from .hsb import Hsb
from .hex import Hex
from .name import Name
from ..types.color_types import ColorSpace

unified_space_to_class: dict[ColorSpace, type[EncodingBase]] = build_registry(Rgb, Hsl, Hsb, Hex, Name)

def encoding_convert(self: EncodingBase, to_space: ColorSpace | str) -> EncodingBase:
    """
    Convert this encoding to another color space.

    Args:
        to_space: Target color space (e.g., "rgb", "hsl", "name")

    Returns:
        New encoding instance in the target space
    """
    from ..conversions.wrapper import convert  # local import to avoid cycles

    return convert(self, to_space)

EncodingBase.convert = encoding_convert


def get_encoding_class(color_space: ColorSpace | str) -> type[EncodingBase]:
    try:
        return unified_space_to_class[ColorSpace(color_space)]
    except ValueError:
        raise ValueError(f"Unsupported color space: {color_space}") from None


def make_encoding(value, color_space: ColorSpace | str) -> EncodingBase:
    """Build an encoding of ``color_space``, converting if ``value`` is already an encoding."""
    encoding_class = get_encoding_class(color_space)
    if isinstance(value, EncodingBase):
        return value.convert(encoding_class.space)
    return encoding_class(value)
