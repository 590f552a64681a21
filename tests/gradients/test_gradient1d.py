import numpy as np
import pytest

from palette_maker import Color
from palette_maker.gradients import gradient


def _hsl(colors):
    return [c.hsl.value for c in colors]


def test_endpoints_included():
    start = Color.from_hsl(0, 1000, 500)
    end = Color.from_hsl(120, 1000, 500)
    result = gradient(start, end, 5)
    assert len(result) == 5
    assert [h for h, _, _ in _hsl(result)] == [0, 30, 60, 90, 120]
    assert result[0] == start
    assert result[-1] == end


def test_saturation_and_lightness_linear():
    result = gradient(Color.from_hsl(0, 0, 0), Color.from_hsl(0, 1000, 1000), 3)
    assert [(s, l) for _, s, l in _hsl(result)] == [(0, 0), (500, 500), (1000, 1000)]


def test_hue_takes_short_arc():
    result = gradient(Color.from_hsl(350, 1000, 500), Color.from_hsl(10, 1000, 500), 3)
    assert [h for h, _, _ in _hsl(result)] == [350, 0, 10]


def test_hue_short_arc_backwards():
    result = gradient(Color.from_hsl(10, 1000, 500), Color.from_hsl(350, 1000, 500), 3)
    assert [h for h, _, _ in _hsl(result)] == [10, 0, 350]


def test_achromatic_start_uses_end_hue():
    result = gradient(Color.from_hsl(200, 0, 500), Color.from_hsl(40, 1000, 500), 4)
    assert {h for h, _, _ in _hsl(result)} == {40}


def test_unit_transform():
    start = Color.from_hsl(0, 0, 0)
    end = Color.from_hsl(0, 0, 1000)
    result = gradient(start, end, 3, unit_transform=lambda u: np.square(u))
    assert [l for _, _, l in _hsl(result)] == [0, 250, 1000]


@pytest.mark.parametrize("steps", [1, 0, -3])
def test_too_few_steps(steps):
    red = Color.from_rgb(255, 0, 0)
    with pytest.raises(ValueError, match="greater than 1"):
        gradient(red, red, steps)
