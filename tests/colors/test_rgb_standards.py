import numpy as np
import pytest

from chromahub.colors import AdobeRGBColor, RGBColor, ROMMRGBColor, XYZColor
from chromahub.consts import TEST_PRECISION
from chromahub.illuminants import Illuminant

STANDARDS = (RGBColor, AdobeRGBColor, ROMMRGBColor)


@pytest.mark.parametrize("cls", STANDARDS)
def test_hub_round_trip(cls):
    rng = np.random.default_rng(11)
    for rgb in rng.random((50, 3)):
        color = cls(rgb)
        back = cls.from_xyz(color.to_xyz(Illuminant.D50))
        assert np.allclose(back.value, rgb, rtol=0.0, atol=TEST_PRECISION)


@pytest.mark.parametrize("cls", STANDARDS)
def test_white_maps_to_native_white(cls):
    white = cls((1.0, 1.0, 1.0)).to_xyz(cls.native_illuminant)
    assert np.allclose(white.value, cls.native_illuminant.white_point, atol=2e-3)


@pytest.mark.parametrize("cls", STANDARDS)
def test_black_is_zero(cls):
    black = cls((0.0, 0.0, 0.0)).to_xyz(Illuminant.D50)
    assert np.allclose(black.value, 0.0, atol=1e-15)


def test_wider_gamuts_hold_srgb_colors():
    srgb_teal = RGBColor((0.2, 0.6, 0.4))
    for cls in (AdobeRGBColor, ROMMRGBColor):
        converted = srgb_teal.convert(cls)
        assert converted.in_bounds()
        assert converted.convert(RGBColor).distance(srgb_teal) < 1e-9


def test_romm_green_is_outside_srgb():
    romm_green = ROMMRGBColor((0.0, 1.0, 0.0))
    assert not romm_green.convert(RGBColor).in_bounds()


def test_modes_are_distinct():
    assert {cls.mode for cls in STANDARDS} == {"rgb", "adobe_rgb", "romm_rgb"}
    assert ROMMRGBColor.native_illuminant == Illuminant.D50
    assert AdobeRGBColor.native_illuminant == Illuminant.D65


def test_convert_between_rgb_standards_goes_through_xyz():
    adobe = AdobeRGBColor((0.4, 0.5, 0.6))
    romm = adobe.convert(ROMMRGBColor)
    via_hub = ROMMRGBColor.from_xyz(adobe.to_xyz(Illuminant.D50))
    assert np.allclose(romm.value, via_hub.value, atol=1e-15)
    assert isinstance(XYZColor(romm), XYZColor)
