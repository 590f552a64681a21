from __future__ import annotations
import operator
from typing import Any, Callable, ClassVar, Tuple, cast

from ..types.color_types import ColorSpace, EncodingValue, is_hue_space
from ..utils import get_dimension


class EncodingBase:
    __slots__ = ('_value', '_is_frozen')  # no new attributes

    num_channels: ClassVar[int] = 1
    space:      ClassVar[ColorSpace]
    maxima:     ClassVar[Tuple[int, ...] | int | None] = None
    # def encoding_convert(self, to_space: ColorSpace) -> EncodingBase:
    convert: Callable[[EncodingBase, ColorSpace], EncodingBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *value: Any) -> None:
        # Accept both Rgb(1, 2, 3) and Rgb((1, 2, 3))
        if len(value) == 1:
            value = value[0]

        if isinstance(value, EncodingBase):
            if value.space != self.space:
                raise TypeError(
                    f"{self.__class__.__name__} cannot wrap a {value.space.value} encoding; use convert()"
                )
            value = value.value

        self._value = self._validate(value)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _validate(cls, value: Any) -> EncodingValue:
        value_dim = get_dimension(value)
        if value_dim != cls.num_channels:
            raise ValueError(
                f"{cls.space.value} expects {cls.num_channels} component(s), got {value!r}"
            )

        if cls.num_channels == 1:
            channels: Tuple[int, ...] = (cls._as_int(value),)
            maxima: Tuple[int, ...] = (cast(int, cls.maxima),)
        else:
            channels = tuple(cls._as_int(v) for v in cast(Tuple[Any, ...], value))
            maxima = cast(Tuple[int, ...], cls.maxima)

        # no clamping: out-of-domain input is a caller bug
        for channel, top in zip(channels, maxima):
            if not 0 <= channel <= top:
                raise ValueError(
                    f"{cls.space.value} component {channel} outside [0, {top}] in {value!r}"
                )

        return channels[0] if cls.num_channels == 1 else channels

    @staticmethod
    def _as_int(component: Any) -> int:
        if isinstance(component, bool):
            raise TypeError(f"expected an integer component, got {component!r}")
        try:
            return operator.index(component)
        except TypeError:
            raise TypeError(f"expected an integer component, got {component!r}") from None

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> EncodingValue:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this encoding carries a hue channel."""
        return is_hue_space(self.space)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodingBase):
            return NotImplemented
        return self.space == other.space and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.space, self._value))

    def __repr__(self) -> str:
        value = self._value
        if isinstance(value, tuple):
            inner = ", ".join(str(v) for v in value)
        elif self.space == ColorSpace.HEX:
            inner = f"0x{value:06X}"
        else:
            inner = repr(value)
        return f"{self.__class__.__name__}({inner})"


class TripleEncoding(EncodingBase):
    """Three bounded integer channels."""

    __slots__ = ()
    num_channels: ClassVar[int] = 3

    def __iter__(self):
        return iter(cast(Tuple[int, int, int], self._value))

    def __getitem__(self, index: int) -> int:
        return cast(Tuple[int, int, int], self._value)[index]


def build_registry(*classes: type[EncodingBase]):
    return {cls.space: cls for cls in classes}
