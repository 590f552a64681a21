from __future__ import annotations
import os
from typing import Sequence, Tuple, Union

import numpy as np
from PIL import Image, ImageDraw

from .color import Color

LABEL_MARGIN = 4


def palette_array(colors: Sequence[Color], swatch_size: Tuple[int, int] = (64, 64)) -> np.ndarray:
    """
    Rasterize ``colors`` as a horizontal strip of solid swatches.

    Returns:
        ``(height, width * len(colors), 3)`` uint8 array
    """
    width, height = swatch_size
    if width <= 0 or height <= 0:
        raise ValueError("swatch width and height must be positive")
    if not colors:
        raise ValueError("palette must contain at least one color")

    row = np.array([c.rgb.value for c in colors], dtype=np.uint8)
    strip = np.repeat(row, width, axis=0)
    return np.broadcast_to(strip, (height,) + strip.shape).copy()


def render_palette(
    colors: Sequence[Color],
    swatch_size: Tuple[int, int] = (64, 64),
    label: bool = False,
) -> Image.Image:
    """
    Render ``colors`` into a Pillow image, optionally labelled with hex digits.

    Labels are drawn in each color's ``text_rgb()`` so they stay legible.
    """
    img = Image.fromarray(palette_array(colors, swatch_size))
    if label:
        draw = ImageDraw.Draw(img)
        width, _ = swatch_size
        for index, color in enumerate(colors):
            draw.text(
                (index * width + LABEL_MARGIN, LABEL_MARGIN),
                color.hex_to_string(),
                fill=tuple(color.text_rgb()),
            )
    return img


def save_palette_image(
    path: Union[str, "os.PathLike[str]"],
    colors: Sequence[Color],
    **kwargs,
) -> None:
    """Render ``colors`` and save them; the format follows the file extension."""
    render_palette(colors, **kwargs).save(path)
