import pytest

from palette_maker.encodings import Hex, Hsb, Hsl, Name, Rgb, get_encoding_class, make_encoding
from palette_maker.types import ColorSpace


class TestConstruction:
    def test_positional_and_tuple_forms(self):
        assert Rgb(1, 2, 3) == Rgb((1, 2, 3))
        assert Rgb(1, 2, 3).value == (1, 2, 3)

    def test_channel_accessors(self):
        r, g, b = Rgb(10, 20, 30)
        assert (r, g, b) == (10, 20, 30)
        assert Rgb(10, 20, 30).g == 20
        assert Hsl(120, 500, 250).l == 250
        assert Hsb(120, 500, 250).b == 250
        assert Hsb(120, 500, 250)[0] == 120

    def test_domain_edges_accepted(self):
        Rgb(0, 0, 0)
        Rgb(255, 255, 255)
        Hsl(360, 1000, 1000)
        Hsb(0, 0, 0)
        Hex(0xFFFFFF)
        Hex(0)

    @pytest.mark.parametrize("cls, value", [
        (Rgb, (256, 0, 0)),
        (Rgb, (0, -1, 0)),
        (Hsl, (361, 0, 0)),
        (Hsl, (0, 1001, 0)),
        (Hsb, (0, 0, 1001)),
        (Hex, 0x1000000),
        (Hex, -1),
    ])
    def test_out_of_domain_rejected(self, cls, value):
        with pytest.raises(ValueError, match="outside"):
            cls(value)

    @pytest.mark.parametrize("value", [(1, 2), (1, 2, 3, 4), ()])
    def test_wrong_arity(self, value):
        with pytest.raises(ValueError, match="component"):
            Rgb(value)

    @pytest.mark.parametrize("value", [(1.0, 2, 3), ("1", 2, 3), (True, 2, 3)])
    def test_non_integer_components(self, value):
        with pytest.raises(TypeError):
            Rgb(value)

    def test_name(self):
        assert Name("Indian Red").value == "Indian Red"
        assert str(Name("Indian Red")) == "Indian Red"
        with pytest.raises(ValueError):
            Name("")
        with pytest.raises(TypeError):
            Name(42)

    def test_wrap_same_space(self):
        rgb = Rgb(1, 2, 3)
        assert Rgb(rgb) == rgb

    def test_wrap_other_space_rejected(self):
        with pytest.raises(TypeError, match="convert"):
            Rgb(Hsl(0, 0, 0))


class TestValueSemantics:
    def test_immutable(self):
        rgb = Rgb(1, 2, 3)
        with pytest.raises(AttributeError):
            rgb._value = (4, 5, 6)
        with pytest.raises(AttributeError):
            rgb.extra = 1

    def test_equality_includes_space(self):
        assert Hsl(10, 20, 30) != Hsb(10, 20, 30)
        assert Hsl(10, 20, 30) == Hsl(10, 20, 30)
        assert len({Hsl(10, 20, 30), Hsl(10, 20, 30), Hsb(10, 20, 30)}) == 2

    def test_has_hue(self):
        assert Hsl(0, 0, 0).has_hue
        assert Hsb(0, 0, 0).has_hue
        assert not Rgb(0, 0, 0).has_hue
        assert not Hex(0).has_hue

    def test_repr(self):
        assert repr(Rgb(1, 2, 3)) == "Rgb(1, 2, 3)"
        assert repr(Hex(0xFF0000)) == "Hex(0xFF0000)"
        assert repr(Name("Red")) == "Name('Red')"

    def test_hex_helpers(self):
        h = Hex(0xCD5C5C)
        assert int(h) == 0xCD5C5C
        assert h.digits() == "CD5C5C"
        assert Hex(0x0A).digits() == "00000A"
        assert hex(h) == "0xcd5c5c"


class TestRegistry:
    def test_get_encoding_class(self):
        assert get_encoding_class("rgb") is Rgb
        assert get_encoding_class(ColorSpace.NAME) is Name
        with pytest.raises(ValueError, match="Unsupported"):
            get_encoding_class("lab")

    def test_make_encoding(self):
        assert make_encoding((255, 0, 0), "rgb") == Rgb(255, 0, 0)
        assert make_encoding(Rgb(255, 0, 0), ColorSpace.HSL) == Hsl(0, 1000, 500)
