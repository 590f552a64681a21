from palette_maker.conversions import hsl_to_rgb, rgb_to_hsl, hsb_to_rgb, rgb_to_hsb, hex_to_rgb, rgb_to_hex


def _hue_close(a, b, tol):
    diff = abs(a - b) % 360
    return min(diff, 360 - diff) <= tol


def test_rgb_hex_exact():
    for r in range(0, 256, 15):
        for g in range(0, 256, 15):
            for b in range(0, 256, 15):
                assert hex_to_rgb(rgb_to_hex(r, g, b)) == (r, g, b)


def test_rgb_round_trip_through_hue_spaces():
    # integer hue degrees cost up to about two 8-bit steps
    for r in range(0, 256, 15):
        for g in range(0, 256, 15):
            for b in range(0, 256, 15):
                rgb = (r, g, b)
                back = hsl_to_rgb(*rgb_to_hsl(*rgb))
                assert all(abs(x - y) <= 3 for x, y in zip(back, rgb)), rgb
                back = hsb_to_rgb(*rgb_to_hsb(*rgb))
                assert all(abs(x - y) <= 3 for x, y in zip(back, rgb)), rgb


def test_hsl_rgb_hsl_within_tolerance():
    for h in range(0, 360, 7):
        for s in (500, 750, 1000):
            for l in (300, 500, 700):
                h2, s2, l2 = rgb_to_hsl(*hsl_to_rgb(h, s, l))
                assert _hue_close(h, h2, 2), (h, s, l)
                assert abs(s - s2) <= 10, (h, s, l)
                assert abs(l - l2) <= 10, (h, s, l)
