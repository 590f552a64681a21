from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, HUE_MAX, PERMILLE
from .encoding_base import TripleEncoding


class Hsb(TripleEncoding):
    """Hue in degrees, saturation and brightness in permille."""

    __slots__ = ()
    space:  ClassVar[ColorSpace] = ColorSpace.HSB
    maxima: ClassVar[Tuple[int, int, int]] = (HUE_MAX, PERMILLE, PERMILLE)

    @property
    def h(self) -> int:
        return self[0]

    @property
    def s(self) -> int:
        return self[1]

    @property
    def b(self) -> int:
        return self[2]
