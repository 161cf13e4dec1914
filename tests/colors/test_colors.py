import pytest

from chromahub.colors import (
    AdobeRGBColor,
    HSLColor,
    HSVColor,
    RGBColor,
    ROMMRGBColor,
    XYZColor,
    color_convert,
    convert,
    get_color_class,
    parse_color,
)
from chromahub.consts import TEST_PRECISION
from chromahub.exceptions import GamutWarning, InvalidColorSyntax, InvalidNumericSyntax
from chromahub.samples.colors import LAVENDER_FLOAT_HSL, LAVENDER_HEX, LAVENDER_INT_RGB, samples_rgb_hsl


def test_hsl_rgb_conversion():
    red_hsl = RGBColor((1.0, 0.0, 0.0)).convert(HSLColor)
    assert abs(red_hsl.h) <= 0.0001 or abs(red_hsl.h - 360) <= 0.0001
    assert abs(red_hsl.s - 1.0) <= 0.0001
    assert abs(red_hsl.l - 0.5) <= 0.0001
    assert red_hsl.distance(RGBColor((1.0, 0.0, 0.0))) < 1e-9

    lavender_rgb = HSLColor(tuple(LAVENDER_FLOAT_HSL)).convert(RGBColor)
    assert lavender_rgb.to_hex() == LAVENDER_HEX
    assert str(lavender_rgb) == LAVENDER_HEX
    assert lavender_rgb.int_value == tuple(int(v) for v in LAVENDER_INT_RGB)


def test_hsl_string_parsing():
    red_hsl = HSLColor.from_str("hsl(0, 120%, 50%)")
    assert red_hsl.value == (0.0, 1.0, 0.5)
    lavender_hsl = HSLColor.from_str("hsl(-475, 50%, 60%)")
    assert str(lavender_hsl.convert(RGBColor)) == LAVENDER_HEX
    with pytest.raises(InvalidColorSyntax):
        HSLColor.from_str("hsl(254%, 0, 0)")
    with pytest.raises(InvalidColorSyntax):
        HSLColor.from_str("hsv(254, 0%, 0%)")


def test_hsv_string_parsing():
    hsv = HSVColor.from_str("hsv(480, 50%, 100%)")
    assert hsv.value == (120.0, 0.5, 1.0)
    with pytest.raises(InvalidColorSyntax):
        HSVColor.from_str("HSV(1, 2%, 3%)")


def test_rgb_string_parsing():
    rgb = RGBColor.from_str("rgb(125, 20%, 0.5)")
    assert rgb.int_value == (125, 51, 127)
    with pytest.raises(InvalidColorSyntax):
        RGBColor.from_str("rgB(123, 33, 2)")


def test_parse_color_dispatch():
    assert isinstance(parse_color("rgb(1, 2, 3)"), RGBColor)
    assert isinstance(parse_color("  hsl(1, 2%, 3%) "), HSLColor)
    assert isinstance(parse_color("hsv(1, 2%, 3%)"), HSVColor)
    with pytest.raises(InvalidColorSyntax):
        parse_color("lab(1, 2, 3)")
    with pytest.raises(InvalidNumericSyntax):
        parse_color("hsl(1.2.3, 2%, 3%)")


def test_class_conversion_rgb_to_hsl():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        hsl = RGBColor(rgb).convert(HSLColor)
        h, s, l = hsl.value
        assert abs(l - l_exp) < 1e-9
        if s_exp == 0.0:
            assert (h, s) == (0.0, 0.0)
        hue_diff = abs(h - h_exp) % 360
        assert min(hue_diff, 360 - hue_diff) < 1e-6
        assert abs(s - s_exp) < 1e-9
        assert isinstance(hsl, HSLColor)


@pytest.mark.parametrize("v", [0.0, 0.1, 0.2, 0.5, 0.7, 1.0])
def test_gray_through_hub_has_zero_hue_and_saturation(v):
    for cls in (HSLColor, HSVColor):
        h, s, third = RGBColor((v, v, v)).convert(cls).value
        assert h == 0.0
        assert s == 0.0
        assert abs(third - v) < 1e-12

def test_construct_from_other_color_converts():
    lavender = HSLColor(tuple(LAVENDER_FLOAT_HSL))
    assert RGBColor(lavender).to_hex() == LAVENDER_HEX
    assert HSVColor(lavender).is_close(lavender, tol=1e-9)


def test_color_is_immutable():
    color = RGBColor((0.1, 0.2, 0.3))
    with pytest.raises(AttributeError):
        color.r = 0.5
    with pytest.raises(AttributeError):
        color.extra = 1


def test_component_count_checked():
    with pytest.raises(ValueError):
        RGBColor((0.1, 0.2))
    with pytest.raises(ValueError):
        HSLColor((1, 2, 3, 4))


def test_values_are_not_auto_clamped():
    color = RGBColor((1.2, -0.1, 0.5))
    assert color.value == (1.2, -0.1, 0.5)
    assert not color.in_bounds()
    assert color.clamped().value == (1.0, 0.0, 0.5)
    assert color.clamped().in_bounds()


def test_clamped_wraps_hue():
    hsl = HSLColor((-30.0, 1.5, 0.5)).clamped()
    assert hsl.value == (330.0, 1.0, 0.5)


def test_out_of_gamut_rendering_warns():
    with pytest.warns(GamutWarning):
        assert RGBColor((1.2, -0.1, 0.5)).to_hex() == "#FF007F"


def test_from_ints_and_channels():
    rgb = RGBColor.from_ints((255, 0, 127))
    assert rgb.r == 1.0
    assert rgb.g == 0.0
    assert (rgb.int_r, rgb.int_g, rgb.int_b) == (255, 0, 127)


def test_equality_and_hash():
    a = HSLColor((10.0, 0.5, 0.5))
    b = HSLColor((10, 0.5, 0.5))
    assert a == b
    assert hash(a) == hash(b)
    assert a != HSVColor((10.0, 0.5, 0.5))
    assert repr(a) == "HSLColor(h=10.0, s=0.5, l=0.5)"


def test_coord_plumbing():
    hsv = HSVColor.from_coord([10, 0.25, 0.75])
    assert hsv.to_coord() == (10.0, 0.25, 0.75)
    assert tuple(hsv) == hsv.to_coord()
    assert hsv.has_hue
    assert not RGBColor((0, 0, 0)).has_hue


def test_distance_uses_short_hue_arc():
    a = HSLColor((350.0, 0.5, 0.5))
    b = HSLColor((10.0, 0.5, 0.5))
    assert a.distance(b) == pytest.approx(20.0 / 360.0)


def test_registry():
    assert get_color_class("RGB") is RGBColor
    assert get_color_class("adobe_rgb") is AdobeRGBColor
    assert get_color_class("romm_rgb") is ROMMRGBColor
    assert get_color_class("xyz") is XYZColor
    with pytest.raises(ValueError):
        get_color_class("cmyk")


def test_color_convert_by_name():
    rgb = color_convert(HSLColor(tuple(LAVENDER_FLOAT_HSL)), "rgb")
    assert isinstance(rgb, RGBColor)
    assert rgb.to_hex() == LAVENDER_HEX


def test_tuple_convert():
    r, g, b = convert(tuple(LAVENDER_FLOAT_HSL), "hsl", "rgb")
    assert abs(r - 110.5 / 255) < 1e-9
    assert abs(g - 0.4) < 1e-9
    assert abs(b - 0.8) < 1e-9


def test_every_leaf_round_trips_through_hub():
    rgb = RGBColor((0.2, 0.55, 0.9))
    for cls in (XYZColor, AdobeRGBColor, ROMMRGBColor, HSLColor, HSVColor):
        back = rgb.convert(cls).convert(RGBColor)
        assert back.distance(rgb) < TEST_PRECISION * 1000
