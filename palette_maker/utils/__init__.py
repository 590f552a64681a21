from .dimension import get_dimension
from .default import value_or_default
from .num_utils import round_half_up
from .hue import wrap_hue, shift_hue, shortest_hue_delta
from .distance import rgb_distance, np_rgb_distance

__all__ = [
    "get_dimension",
    "value_or_default",
    "round_half_up",
    "wrap_hue",
    "shift_hue",
    "shortest_hue_delta",
    "rgb_distance",
    "np_rgb_distance",
]
