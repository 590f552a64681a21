from typing import ClassVar
from ..types.color_types import ColorSpace, HEX_MAX
from .encoding_base import EncodingBase


class Hex(EncodingBase):
    """24-bit packed ``0xRRGGBB``."""

    __slots__ = ()
    space:  ClassVar[ColorSpace] = ColorSpace.HEX
    maxima: ClassVar[int] = HEX_MAX

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def digits(self) -> str:
        """Six uppercase hex digits, no prefix."""
        return f"{self._value:06X}"
