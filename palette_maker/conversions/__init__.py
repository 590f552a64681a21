"""
palette_maker Encoding Conversions
==================================

Pure functions translating any of the five encodings (RGB, HSL, HSB, Hex,
Name) into any other.

Raw formulas (integer tuples in, integer tuples out)
----------------------------------------------------
    hsl_to_rgb, hsb_to_rgb, hex_to_rgb, name_to_rgb
    rgb_to_hsl, hsb_to_hsl
    rgb_to_hsb, hsl_to_hsb
    rgb_to_hex
    rgb_to_name

Encoding-level API
------------------
    to_rgb(encoding), to_hsl(encoding), to_hsb(encoding),
    to_hex(encoding), to_name(encoding)
        Identity on the same space, otherwise resolve and convert.
    convert(encoding, to_space)
        Dispatch to one of the above by ``ColorSpace``.

HSL and HSB convert into each other directly instead of through RGB, which
keeps 8-bit quantisation out of the result.

Examples
--------
>>> from palette_maker.encodings import Rgb, Hsl
>>> from palette_maker.conversions import to_hsl, to_name
>>> to_hsl(Rgb(205, 92, 92))
Hsl(0, 531, 583)
>>> to_name(Hsl(0, 531, 583)).value
'Indian Red'
"""

from .to_rgb import hsl_to_rgb, hsb_to_rgb, hex_to_rgb, name_to_rgb
from .to_hsl import rgb_to_hsl, hsb_to_hsl
from .to_hsb import rgb_to_hsb, hsl_to_hsb
from .to_hex import rgb_to_hex
from .to_name import rgb_to_name

from .wrapper import convert, to_rgb, to_hsl, to_hsb, to_hex, to_name

__all__ = [
    'hsl_to_rgb',
    'hsb_to_rgb',
    'hex_to_rgb',
    'name_to_rgb',
    'rgb_to_hsl',
    'hsb_to_hsl',
    'rgb_to_hsb',
    'hsl_to_hsb',
    'rgb_to_hex',
    'rgb_to_name',
    'convert',
    'to_rgb',
    'to_hsl',
    'to_hsb',
    'to_hex',
    'to_name',
]
