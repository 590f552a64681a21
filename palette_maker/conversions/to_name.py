import numpy as np

from ..samples.named_colors import NAME_KEYS, NAME_TABLE, RGB_TO_NAME
from ..utils.distance import np_rgb_distance


def rgb_to_name(r: int, g: int, b: int) -> str:
    """
    Nearest table name by squared RGB distance.

    An exact match returns immediately. Otherwise the whole table is scored
    at once and ``argmin`` picks the first minimal entry in table order.
    """
    exact = RGB_TO_NAME.get((r, g, b))
    if exact is not None:
        return exact
    distances = np_rgb_distance(NAME_TABLE, (r, g, b))
    return NAME_KEYS[int(np.argmin(distances))]
