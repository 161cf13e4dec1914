"""
chromahub Color Classes
=======================

Immutable color types built around one hub. Each type converts only to and
from :class:`XYZColor`; any other conversion is ``from_xyz(to_xyz(...))``.

>>> from chromahub.colors import HSLColor, RGBColor
>>> lavender = HSLColor((245, 0.5, 0.6))
>>> str(lavender.convert(RGBColor))
'#6E66CC'
>>> RGBColor(lavender).int_value
(110, 102, 204)

Color Classes
-------------
    - XYZColor: CIE XYZ with its illuminant (the hub)
    - RGBColor: sRGB
    - AdobeRGBColor: Adobe RGB (1998)
    - ROMMRGBColor: ROMM / ProPhoto RGB
    - HSLColor: hue, saturation, lightness over sRGB
    - HSVColor: hue, saturation, value over sRGB

Notes
-----
- Components are stored unclamped; ``bounds``/``clamped()`` are opt-in.
- Constructing a class from another color instance converts it.
"""

from .color_base import ColorBase
from .xyz import XYZColor
from .rgb import RGBStandard, RGBColor, AdobeRGBColor, ROMMRGBColor
from .hsl import HSLColor
from .hsv import HSVColor
from .color import color_convert, convert, get_color_class, parse_color, unified_mode_to_class


__all__ = [
    'ColorBase',
    'XYZColor',
    'RGBStandard',
    'RGBColor',
    'AdobeRGBColor',
    'ROMMRGBColor',
    'HSLColor',
    'HSVColor',
    'color_convert',
    'convert',
    'get_color_class',
    'parse_color',
    'unified_mode_to_class',
]
