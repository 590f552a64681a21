from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    from ..encodings.rgb import Rgb


def rgb_distance(a: Rgb, b: Rgb) -> int:
    """
    Squared Euclidean distance between two RGB encodings.

    Python integers do not overflow, so squaring a channel difference of up to
    255 is exact.
    """
    dr = int(a.r) - int(b.r)
    dg = int(a.g) - int(b.g)
    db = int(a.b) - int(b.b)
    return dr * dr + dg * dg + db * db


def np_rgb_distance(table: np.ndarray, rgb: Sequence[int]) -> np.ndarray:
    """
    Vectorized squared distance from every row of ``table`` to ``rgb``.

    Args:
        table: ``(N, 3)`` integer array of RGB rows
        rgb: A single ``(r, g, b)`` triple

    Returns:
        ``(N,)`` int64 array of squared distances
    """
    diff = np.asarray(table, dtype=np.int64) - np.asarray(rgb, dtype=np.int64)
    return np.einsum("ij,ij->i", diff, diff)
