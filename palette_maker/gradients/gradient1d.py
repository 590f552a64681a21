from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from typing import Callable, List, Optional

from ..color import Color
from ..encodings import Hsl
from ..types.color_types import HUE_MAX
from ..utils.hue import shortest_hue_delta


def gradient(
    color1: Color,
    color2: Color,
    steps: int,
    unit_transform: Optional[Callable[[NDArray], NDArray]] = None,
) -> List[Color]:
    """
    Interpolate ``steps`` HSL points from ``color1`` to ``color2``, endpoints included.

    Saturation and lightness are interpolated linearly. Hue follows the
    shorter arc of the wheel, so the path never turns more than 180°, and
    every step is wrapped into [0, 360). An achromatic start (saturation 0)
    has no meaningful hue, so the hue track starts at ``color2``'s hue.

    Args:
        color1: Start color
        color2: End color
        steps: Number of points; must be greater than 1
        unit_transform: Optional function to reshape the interpolation parameter

    Returns:
        List of ``steps`` colors
    """
    if steps <= 1:
        raise ValueError(f"steps must be greater than 1, got {steps}")

    start = np.array(color1.hsl.value, dtype=float)
    end = np.array(color2.hsl.value, dtype=float)

    u = np.linspace(0.0, 1.0, steps, dtype=float)
    if unit_transform is not None:
        u = unit_transform(u)

    h1 = end[0] % HUE_MAX
    h0 = h1 if start[1] == 0 else start[0] % HUE_MAX
    dh = shortest_hue_delta(h0, h1)

    # half-up rounding, matching the scalar conversions
    hues = np.floor(h0 + u * dh + 0.5) % HUE_MAX
    sats = np.floor(start[1] * (1 - u) + end[1] * u + 0.5)
    lights = np.floor(start[2] * (1 - u) + end[2] * u + 0.5)

    return [
        Color(Hsl(int(h), int(s), int(l)))
        for h, s, l in zip(hues, sats, lights)
    ]
