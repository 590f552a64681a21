from __future__ import annotations
from typing import Tuple, Union

from .conversions import to_hex, to_hsb, to_hsl, to_name, to_rgb
from .encodings import EncodingBase, Hex, Hsb, Hsl, Name, Rgb
from .types.color_types import PERMILLE

_BLACK = Rgb(0, 0, 0)
_WHITE = Rgb(255, 255, 255)


class Color:
    """
    One color, resolved into every supported encoding at construction.

    All five fields describe the same color up to integer rounding; they do
    not round-trip exactly. Everything is read-only except ``locked``, which
    the palette editor toggles to keep a slot through regeneration.

    Args:
        encoding: Any ``Rgb``, ``Hsl``, ``Hsb``, ``Hex`` or ``Name``
        locked: Initial lock state

    Raises:
        UnknownNameError: ``encoding`` is a ``Name`` missing from the table
        TypeError: ``encoding`` is not an encoding instance
    """

    __slots__ = ('_rgb', '_hsl', '_hsb', '_hex', '_name', 'locked', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes, except the lock flag."""
        if name != 'locked' and getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, encoding: EncodingBase, locked: bool = False) -> None:
        if not isinstance(encoding, EncodingBase):
            raise TypeError(f"Color expects an encoding, got {encoding!r}")

        # resolve everything before assigning anything
        rgb = to_rgb(encoding)
        resolved = (
            rgb,
            to_hsl(encoding),
            to_hsb(encoding),
            to_hex(rgb),
            to_name(encoding if isinstance(encoding, Name) else rgb),
        )

        self._rgb, self._hsl, self._hsb, self._hex, self._name = resolved
        self.locked = bool(locked)
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        return cls(Rgb(r, g, b))

    @classmethod
    def from_hsl(cls, h: int, s: int, l: int) -> Color:
        return cls(Hsl(h, s, l))

    @classmethod
    def from_hsb(cls, h: int, s: int, b: int) -> Color:
        return cls(Hsb(h, s, b))

    @classmethod
    def from_hex(cls, value: int) -> Color:
        return cls(Hex(value))

    @classmethod
    def from_name(cls, name: str) -> Color:
        return cls(Name(name))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def rgb(self) -> Rgb:
        return self._rgb

    @property
    def hsl(self) -> Hsl:
        return self._hsl

    @property
    def hsb(self) -> Hsb:
        return self._hsb

    @property
    def hex(self) -> Hex:
        return self._hex

    @property
    def name(self) -> Name:
        return self._name

    # ------------------ PROJECTIONS ------------------
    def rgb_to_string(self) -> str:
        """Palette cache line: ``"r,g,b\\n"`` in plain decimal."""
        r, g, b = self._rgb
        return f"{r},{g},{b}\n"

    def hex_to_string(self) -> str:
        """Six uppercase hex digits for display."""
        return self._hex.digits()

    def text_rgb(self) -> Rgb:
        """Black on light swatches, white on dark ones."""
        return _BLACK if self._hsl.l > PERMILLE // 2 else _WHITE

    def toggle_lock(self) -> bool:
        self.locked = not self.locked
        return self.locked

    def _key(self) -> Tuple[Union[Tuple[int, ...], int, str], ...]:
        return (self._rgb.value, self._hsl.value, self._hsb.value, self._hex.value, self._name.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        lock = ", locked" if self.locked else ""
        return f"Color(#{self.hex_to_string()}, {self._name.value!r}{lock})"
