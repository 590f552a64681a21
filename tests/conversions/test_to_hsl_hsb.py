from palette_maker.conversions import rgb_to_hsl, rgb_to_hsb, hsl_to_hsb, hsb_to_hsl
from ..samples import samples_rgb_hsl, samples_rgb_hsb, samples_hsl_hsb, samples_hsb_hsl


def test_rgb_to_hsl():
    for rgb, expected in samples_rgb_hsl.items():
        assert rgb_to_hsl(*rgb) == expected, rgb


def test_rgb_to_hsb():
    for rgb, expected in samples_rgb_hsb.items():
        assert rgb_to_hsb(*rgb) == expected, rgb


def test_hsl_to_hsb():
    for hsl, expected in samples_hsl_hsb.items():
        assert hsl_to_hsb(*hsl) == expected, hsl


def test_hsb_to_hsl():
    for hsb, expected in samples_hsb_hsl.items():
        assert hsb_to_hsl(*hsb) == expected, hsb


def test_hsb_to_hsl_known_pair():
    assert hsb_to_hsl(200, 667, 600) == (200, 500, 400)


def test_hue_is_kept_through_direct_conversion():
    # no trip through 8-bit RGB, so the hue survives exactly
    for h in (0, 17, 123, 359):
        assert hsl_to_hsb(h, 400, 600)[0] == h
        assert hsb_to_hsl(h, 400, 600)[0] == h


def test_achromatic_hue_is_zero():
    for v in range(0, 256, 17):
        assert rgb_to_hsl(v, v, v)[:2] == (0, 0)
        assert rgb_to_hsb(v, v, v)[:2] == (0, 0)


def test_outputs_stay_in_domain():
    for r in range(0, 256, 51):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                for h, s, x in (rgb_to_hsl(r, g, b), rgb_to_hsb(r, g, b)):
                    assert 0 <= h < 360
                    assert 0 <= s <= 1000
                    assert 0 <= x <= 1000
