from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, HUE_MAX, PERMILLE
from .encoding_base import TripleEncoding


class Hsl(TripleEncoding):
    """Hue in degrees, saturation and lightness in permille."""

    __slots__ = ()
    space:  ClassVar[ColorSpace] = ColorSpace.HSL
    maxima: ClassVar[Tuple[int, int, int]] = (HUE_MAX, PERMILLE, PERMILLE)

    @property
    def h(self) -> int:
        return self[0]

    @property
    def s(self) -> int:
        return self[1]

    @property
    def l(self) -> int:  # noqa: E743
        return self[2]
