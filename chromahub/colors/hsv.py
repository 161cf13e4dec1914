from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions.hexagonal import hsv_to_rgb, rgb_to_hsv
from ..exceptions import InvalidColorSyntax
from ..illuminants import Illuminant
from ..parsing.css_color import parse_hsl_hsv_tuple
from ..types.color_types import Bounds, ColorMode
from .color_base import ColorBase, _channel
from .rgb import RGBColor
from .xyz import XYZColor


class HSVColor(ColorBase):
    """
    Hue, saturation and value over sRGB.

    Unlike HSL, value runs from black to the fully saturated color, so the
    space is a single hexcone with white at ``s = 0, v = 1``.
    """
    __slots__ = ()

    mode:      ClassVar[ColorMode] = "hsv"
    channels:  ClassVar[Tuple[str, str, str]] = ("h", "s", "v")
    bounds:    ClassVar[Bounds] = ((0.0, 360.0), (0.0, 1.0), (0.0, 1.0))
    hue_index: ClassVar[int] = 0

    h = _channel(0, "Hue in degrees, [0, 360)")
    s = _channel(1, "Saturation, [0, 1]")
    v = _channel(2, "Value, [0, 1]")

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        return RGBColor(hsv_to_rgb(*self._value)).to_xyz(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> HSVColor:
        return cls(rgb_to_hsv(*RGBColor.from_xyz(xyz).value))

    @classmethod
    def from_str(cls, text: str) -> HSVColor:
        """Parse ``"hsv(h, s%, v%)"``."""
        if not text.startswith("hsv("):
            raise InvalidColorSyntax(f"Expected 'hsv(h, s%, v%)', got {text!r}")
        return cls(parse_hsl_hsv_tuple(text[3:]))
