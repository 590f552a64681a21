from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, RGB_MAX
from .encoding_base import TripleEncoding


class Rgb(TripleEncoding):
    __slots__ = ()
    space:  ClassVar[ColorSpace] = ColorSpace.RGB
    maxima: ClassVar[Tuple[int, int, int]] = (RGB_MAX, RGB_MAX, RGB_MAX)

    @property
    def r(self) -> int:
        return self[0]

    @property
    def g(self) -> int:
        return self[1]

    @property
    def b(self) -> int:
        return self[2]
