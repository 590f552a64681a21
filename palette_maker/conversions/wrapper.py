from __future__ import annotations
from typing import Callable, Dict, Tuple

from ..encodings.encoding_base import EncodingBase
from ..encodings.hex import Hex
from ..encodings.hsb import Hsb
from ..encodings.hsl import Hsl
from ..encodings.name import Name
from ..encodings.rgb import Rgb
from ..types.color_types import ColorSpace

from .to_rgb import hsl_to_rgb, hsb_to_rgb, hex_to_rgb, name_to_rgb
from .to_hsl import rgb_to_hsl, hsb_to_hsl
from .to_hsb import rgb_to_hsb, hsl_to_hsb
from .to_hex import rgb_to_hex
from .to_name import rgb_to_name

# Source space -> raw (r, g, b)
RGB_RESOLVERS: Dict[ColorSpace, Callable[[EncodingBase], Tuple[int, int, int]]] = {
    ColorSpace.RGB: lambda e: e.value,
    ColorSpace.HSL: lambda e: hsl_to_rgb(*e.value),
    ColorSpace.HSB: lambda e: hsb_to_rgb(*e.value),
    ColorSpace.HEX: lambda e: hex_to_rgb(e.value),
    ColorSpace.NAME: lambda e: name_to_rgb(e.value),
}


def _resolve_rgb(encoding: EncodingBase) -> Tuple[int, int, int]:
    try:
        resolver = RGB_RESOLVERS[encoding.space]
    except (AttributeError, KeyError):
        raise TypeError(f"not an encoding: {encoding!r}") from None
    return resolver(encoding)


def to_rgb(encoding: EncodingBase) -> Rgb:
    """Resolve any encoding to RGB. Unknown names raise ``UnknownNameError``."""
    if isinstance(encoding, Rgb):
        return encoding
    return Rgb(_resolve_rgb(encoding))


def to_hsl(encoding: EncodingBase) -> Hsl:
    """Resolve any encoding to HSL, using the direct formula from HSB."""
    if isinstance(encoding, Hsl):
        return encoding
    if isinstance(encoding, Hsb):
        return Hsl(hsb_to_hsl(*encoding.value))
    return Hsl(rgb_to_hsl(*_resolve_rgb(encoding)))


def to_hsb(encoding: EncodingBase) -> Hsb:
    """Resolve any encoding to HSB, using the direct formula from HSL."""
    if isinstance(encoding, Hsb):
        return encoding
    if isinstance(encoding, Hsl):
        return Hsb(hsl_to_hsb(*encoding.value))
    return Hsb(rgb_to_hsb(*_resolve_rgb(encoding)))


def to_hex(encoding: EncodingBase) -> Hex:
    """Pack the RGB resolution of any encoding."""
    if isinstance(encoding, Hex):
        return encoding
    return Hex(rgb_to_hex(*_resolve_rgb(encoding)))


def to_name(encoding: EncodingBase) -> Name:
    """Classify any encoding to its nearest table name."""
    if isinstance(encoding, Name):
        return encoding
    return Name(rgb_to_name(*_resolve_rgb(encoding)))


CONVERTERS: Dict[ColorSpace, Callable[[EncodingBase], EncodingBase]] = {
    ColorSpace.RGB: to_rgb,
    ColorSpace.HSL: to_hsl,
    ColorSpace.HSB: to_hsb,
    ColorSpace.HEX: to_hex,
    ColorSpace.NAME: to_name,
}


def convert(encoding: EncodingBase, to_space: ColorSpace | str) -> EncodingBase:
    """
    Universal converter between the five encodings.

    Args:
        encoding: Any encoding instance
        to_space: Target space, as a ``ColorSpace`` or its string value

    Returns:
        A new encoding in the target space (or ``encoding`` itself when the
        spaces already match)
    """
    try:
        target = ColorSpace(str(getattr(to_space, "value", to_space)).lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {to_space!r}") from None
    return CONVERTERS[target](encoding)
