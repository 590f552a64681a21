"""
Hue wheel helpers.

Hues are degrees on a 360° wheel. Wrapping always uses Python's floor
modulo, so ``wrap_hue(-30) == 330`` regardless of sign.
"""

from ..types.color_types import HUE_MAX


def wrap_hue(hue: float) -> float:
    """Wrap any hue into ``[0, 360)``."""
    return hue % HUE_MAX


def shift_hue(hue: int, degrees: int) -> int:
    """Rotate an integer hue by ``degrees`` and wrap into ``[0, 360)``."""
    return (hue + degrees) % HUE_MAX


def shortest_hue_delta(h0: float, h1: float) -> float:
    """
    Signed hue difference from ``h0`` to ``h1`` along the shorter arc.

    The result lies in ``[-180, 180]``.
    """
    delta = h1 - h0
    if delta > HUE_MAX / 2:
        delta -= HUE_MAX
    elif delta < -HUE_MAX / 2:
        delta += HUE_MAX
    return delta
