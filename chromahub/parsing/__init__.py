"""
Parsers for CSS numbers and CSS functional color notation.

>>> from chromahub.parsing import parse_rgb_str, parse_hsl_hsv_tuple
>>> parse_rgb_str("rgb(125, 20%, 0.5)")
(125, 51, 127)
>>> parse_hsl_hsv_tuple("(-597, 40%, 40%)")
(123.0, 0.4, 0.4)
"""
from .css_numeric import CSSNumeric, parse_css_number
from .css_color import parse_rgb_num, parse_rgb_str, parse_hsl_hsv_tuple

__all__ = [
    "CSSNumeric",
    "parse_css_number",
    "parse_rgb_num",
    "parse_rgb_str",
    "parse_hsl_hsv_tuple",
]
