from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions.hexagonal import hsl_to_rgb, rgb_to_hsl
from ..exceptions import InvalidColorSyntax
from ..illuminants import Illuminant
from ..parsing.css_color import parse_hsl_hsv_tuple
from ..types.color_types import Bounds, ColorMode
from .color_base import ColorBase, _channel
from .rgb import RGBColor
from .xyz import XYZColor


class HSLColor(ColorBase):
    """
    Hue, saturation and lightness over sRGB.

    Lightness runs from black through the fully saturated color at 0.5 to
    white, which makes this a bi-hexcone: near black or white a large
    saturation barely changes the color. Hue is hexagonal, not circular; see
    :mod:`chromahub.conversions.hexagonal`.

    >>> str(HSLColor((245, 0.5, 0.6)).convert(RGBColor))
    '#6E66CC'
    """
    __slots__ = ()

    mode:      ClassVar[ColorMode] = "hsl"
    channels:  ClassVar[Tuple[str, str, str]] = ("h", "s", "l")
    bounds:    ClassVar[Bounds] = ((0.0, 360.0), (0.0, 1.0), (0.0, 1.0))
    hue_index: ClassVar[int] = 0

    h = _channel(0, "Hue in degrees, [0, 360)")
    s = _channel(1, "Saturation, [0, 1]")
    l = _channel(2, "Lightness, [0, 1]")

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        return RGBColor(hsl_to_rgb(*self._value)).to_xyz(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> HSLColor:
        return cls(rgb_to_hsl(*RGBColor.from_xyz(xyz).value))

    @classmethod
    def from_str(cls, text: str) -> HSLColor:
        """Parse ``"hsl(h, s%, l%)"``; the hue may not be a percentage."""
        if not text.startswith("hsl("):
            raise InvalidColorSyntax(f"Expected 'hsl(h, s%, l%)', got {text!r}")
        return cls(parse_hsl_hsv_tuple(text[3:]))
