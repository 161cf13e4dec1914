"""
chromahub Color Space Conversions
=================================

Functional conversions underneath the color classes.

RGB ↔ HSL / HSV (hexagonal projection, no trigonometry):
    rgb_to_hsl(r, g, b), hsl_to_rgb(h, s, l)
    rgb_to_hsv(r, g, b), hsv_to_rgb(h, s, v)
    np_rgb_to_hsl(rgb), np_hsl_to_rgb(hsl), np_rgb_to_hsv(rgb), np_hsv_to_rgb(hsv)

Transfer functions:
    srgb_decode / srgb_encode, adobe_decode / adobe_encode, romm_decode / romm_encode

Chromatic adaptation:
    bradford_adapt(xyz, source, target)

Arrays:
    np_convert(color, from_space, to_space, illuminant=Illuminant.D50)

Examples
--------
>>> from chromahub.conversions import hsl_to_rgb, rgb_to_hsl
>>> rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
"""

from .hexagonal import (
    hue_sector,
    hexagonal_hue,
    hsl_to_rgb,
    rgb_to_hsl,
    hsv_to_rgb,
    rgb_to_hsv,
    np_hexagonal_hue,
    np_hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsv_to_rgb,
    np_rgb_to_hsv,
)
from .companding import (
    srgb_decode,
    srgb_encode,
    adobe_decode,
    adobe_encode,
    romm_decode,
    romm_encode,
)
from .adaptation import bradford_adapt
from .wrapper import np_convert

__all__ = [
    'hue_sector',
    'hexagonal_hue',
    'hsl_to_rgb',
    'rgb_to_hsl',
    'hsv_to_rgb',
    'rgb_to_hsv',
    'np_hexagonal_hue',
    'np_hsl_to_rgb',
    'np_rgb_to_hsl',
    'np_hsv_to_rgb',
    'np_rgb_to_hsv',
    'srgb_decode',
    'srgb_encode',
    'adobe_decode',
    'adobe_encode',
    'romm_decode',
    'romm_encode',
    'bradford_adapt',
    'np_convert',
]
