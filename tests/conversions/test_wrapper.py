import pytest

from palette_maker.conversions import convert, to_rgb, to_hsl, to_hsb, to_hex, to_name
from palette_maker.encodings import Hex, Hsb, Hsl, Name, Rgb
from palette_maker.errors import UnknownNameError
from palette_maker.types import ColorSpace


class TestIdentity:
    def test_same_space_returns_input(self):
        rgb = Rgb(1, 2, 3)
        hsl = Hsl(10, 20, 30)
        hsb = Hsb(10, 20, 30)
        hx = Hex(0x123456)
        name = Name("Indian Red")
        assert to_rgb(rgb) is rgb
        assert to_hsl(hsl) is hsl
        assert to_hsb(hsb) is hsb
        assert to_hex(hx) is hx
        assert to_name(name) is name

    def test_user_name_is_not_validated_by_identity(self):
        assert to_name(Name("whatever")).value == "whatever"


class TestConvert:
    def test_enum_and_string_targets(self):
        rgb = Rgb(205, 92, 92)
        assert convert(rgb, ColorSpace.HSL) == Hsl(0, 531, 583)
        assert convert(rgb, "hsb") == Hsb(0, 551, 804)
        assert convert(rgb, "HEX") == Hex(0xCD5C5C)
        assert convert(rgb, "name") == Name("Indian Red")

    def test_from_every_source(self):
        sources = [Rgb(255, 0, 0), Hsl(0, 1000, 500), Hsb(0, 1000, 1000), Hex(0xFF0000), Name("Red")]
        for source in sources:
            assert to_rgb(source) == Rgb(255, 0, 0), source
            assert to_hex(source) == Hex(0xFF0000), source
            assert to_name(source) == Name("Red"), source

    def test_hsl_hsb_are_direct(self):
        assert to_hsb(Hsl(200, 500, 400)) == Hsb(200, 667, 600)
        assert to_hsl(Hsb(200, 667, 600)) == Hsl(200, 500, 400)

    def test_method_on_encoding(self):
        assert Rgb(0, 0, 255).convert("hsl") == Hsl(240, 1000, 500)

    def test_unknown_space(self):
        with pytest.raises(ValueError, match="Unknown color space"):
            convert(Rgb(0, 0, 0), "cmyk")

    def test_unknown_name(self):
        with pytest.raises(UnknownNameError):
            to_rgb(Name("Nope"))

    def test_not_an_encoding(self):
        with pytest.raises(TypeError):
            to_rgb((1, 2, 3))
