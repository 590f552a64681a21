import numpy as np

from palette_maker.encodings import Rgb
from palette_maker.types import ColorSpace, is_hue_space
from palette_maker.utils import (
    get_dimension,
    np_rgb_distance,
    rgb_distance,
    round_half_up,
    shift_hue,
    shortest_hue_delta,
    value_or_default,
    wrap_hue,
)


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.5) == -1
    assert round_half_up(-1.4) == -1


def test_hue_helpers():
    assert wrap_hue(-30) == 330
    assert wrap_hue(360) == 0
    assert shift_hue(350, 20) == 10
    assert shift_hue(10, -20) == 350
    assert shortest_hue_delta(350, 10) == 20
    assert shortest_hue_delta(10, 350) == -20
    assert shortest_hue_delta(0, 180) == 180


def test_rgb_distance():
    assert rgb_distance(Rgb(0, 0, 0), Rgb(255, 255, 255)) == 3 * 255 ** 2
    assert rgb_distance(Rgb(205, 92, 92), Rgb(205, 91, 93)) == 2


def test_np_rgb_distance():
    table = np.array([[0, 0, 0], [255, 255, 255], [10, 0, 0]], dtype=np.uint8)
    result = np_rgb_distance(table, (255, 255, 255))
    assert result.dtype == np.int64
    assert result.tolist() == [3 * 255 ** 2, 0, 245 ** 2 + 2 * 255 ** 2]


def test_get_dimension():
    assert get_dimension(None) == 0
    assert get_dimension(5) == 1
    assert get_dimension("Red") == 1
    assert get_dimension((1, 2, 3)) == 3


def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0


def test_is_hue_space():
    assert is_hue_space(ColorSpace.HSL)
    assert is_hue_space("hsb")
    assert not is_hue_space(ColorSpace.HEX)
