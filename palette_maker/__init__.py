"""palette_maker: color encodings, harmonies and randomized palettes."""

import logging

from .types.color_types import ColorSpace
from .encodings import EncodingBase, Rgb, Hsl, Hsb, Hex, Name
from .conversions import convert, to_rgb, to_hsl, to_hsb, to_hex, to_name
from .utils.distance import rgb_distance
from .color import Color
from .harmony import complement, triad, square, analogous, monochromatic
from .gradients import gradient
from .palette import (
    Method,
    METHOD_WEIGHTS,
    generate_color,
    generate_palette,
    generate_palette_from_base,
    regenerate_palette,
)
from .palette_io import load_palette, save_palette
from .render import render_palette, save_palette_image
from .errors import (
    PaletteError,
    PaletteIOError,
    PaletteParseError,
    InvalidFormatError,
    UntranslatableEncodingError,
    UnknownNameError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # encodings
    "ColorSpace",
    "EncodingBase",
    "Rgb",
    "Hsl",
    "Hsb",
    "Hex",
    "Name",
    # conversions
    "convert",
    "to_rgb",
    "to_hsl",
    "to_hsb",
    "to_hex",
    "to_name",
    "rgb_distance",
    # colors and harmonies
    "Color",
    "complement",
    "triad",
    "square",
    "analogous",
    "monochromatic",
    "gradient",
    # palettes
    "Method",
    "METHOD_WEIGHTS",
    "generate_color",
    "generate_palette",
    "generate_palette_from_base",
    "regenerate_palette",
    "load_palette",
    "save_palette",
    "render_palette",
    "save_palette_image",
    # errors
    "PaletteError",
    "PaletteIOError",
    "PaletteParseError",
    "InvalidFormatError",
    "UntranslatableEncodingError",
    "UnknownNameError",
    # Version
    "__version__",
]
