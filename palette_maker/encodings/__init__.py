"""
palette_maker Encodings
=======================

Immutable value objects for the five supported color representations.
Together they form a closed tagged union; ``.space`` is the tag.

| Class | Components | Domain |
|-------|------------|--------|
| Rgb   | r, g, b    | 0-255 each |
| Hsl   | h, s, l    | h 0-360, s/l 0-1000 (permille) |
| Hsb   | h, s, b    | h 0-360, s/b 0-1000 (permille) |
| Hex   | value      | 0x000000-0xFFFFFF |
| Name  | text       | a key of the named-color table |

Usage
-----
>>> from palette_maker.encodings import Rgb
>>> red = Rgb(255, 0, 0)
>>> red.convert("hsl")
Hsl(0, 1000, 500)
>>> red.convert("hex")
Hex(0xFF0000)

Notes
-----
- Components must be integers; floats raise ``TypeError``
- Out-of-domain components raise ``ValueError``; nothing is clamped
- Instances are frozen and hashable
"""

from .encoding_base import EncodingBase
from .rgb import Rgb
from .hsl import Hsl
from .hsb import Hsb
from .hex import Hex
from .name import Name
from .encoding import encoding_convert, get_encoding_class, make_encoding


__all__ = [
    'EncodingBase',
    'Rgb',
    'Hsl',
    'Hsb',
    'Hex',
    'Name',
    'encoding_convert',
    'get_encoding_class',
    'make_encoding',
]
