"""chromahub: color-space conversion through a single XYZ hub, and CSS color parsing."""

from .colors.color_base import ColorBase
from .colors.xyz import XYZColor
from .colors.rgb import RGBColor, AdobeRGBColor, ROMMRGBColor
from .colors.hsl import HSLColor
from .colors.hsv import HSVColor
from .colors.color import color_convert, convert, get_color_class, parse_color
from .illuminants import Illuminant
from .exceptions import (
    CSSParseError,
    InvalidNumericCharacters,
    InvalidNumericSyntax,
    InvalidColorSyntax,
    MatrixDecompositionError,
    GamutWarning,
)
from .parsing import (
    CSSNumeric,
    parse_css_number,
    parse_rgb_num,
    parse_rgb_str,
    parse_hsl_hsv_tuple,
)
from .conversions import (
    hsl_to_rgb,
    rgb_to_hsl,
    hsv_to_rgb,
    rgb_to_hsv,
    np_hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsv_to_rgb,
    np_rgb_to_hsv,
    np_convert,
)
from .types.format_type import FormatType

__version__ = "0.1.0"

__all__ = [
    # color types
    "ColorBase",
    "XYZColor",
    "RGBColor",
    "AdobeRGBColor",
    "ROMMRGBColor",
    "HSLColor",
    "HSVColor",
    "Illuminant",
    "color_convert",
    "convert",
    "get_color_class",
    "parse_color",
    # errors
    "CSSParseError",
    "InvalidNumericCharacters",
    "InvalidNumericSyntax",
    "InvalidColorSyntax",
    "MatrixDecompositionError",
    "GamutWarning",
    # parsing
    "CSSNumeric",
    "FormatType",
    "parse_css_number",
    "parse_rgb_num",
    "parse_rgb_str",
    "parse_hsl_hsv_tuple",
    # conversions
    "hsl_to_rgb",
    "rgb_to_hsl",
    "hsv_to_rgb",
    "rgb_to_hsv",
    "np_hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsv_to_rgb",
    "np_rgb_to_hsv",
    "np_convert",
]
