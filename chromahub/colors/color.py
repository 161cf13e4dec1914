from __future__ import annotations
from typing import Dict, Type

from ..exceptions import InvalidColorSyntax
from ..types.color_types import ColorMode, Triple
from .color_base import ColorBase
from .hsl import HSLColor
from .hsv import HSVColor
from .rgb import RGBColor, rgb_mode_to_class
from .xyz import XYZColor

unified_mode_to_class: Dict[str, Type[ColorBase]] = {
    XYZColor.mode: XYZColor,
    **rgb_mode_to_class,
    HSLColor.mode: HSLColor,
    HSVColor.mode: HSVColor,
}

_PARSERS = {
    "rgb(": RGBColor,
    "hsl(": HSLColor,
    "hsv(": HSVColor,
}


def get_color_class(color_space: str) -> Type[ColorBase]:
    color_class = unified_mode_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(
            f"Unsupported color space: {color_space!r}; expected one of {sorted(unified_mode_to_class)}"
        )
    return color_class


def color_convert(color: ColorBase, to_space: ColorMode) -> ColorBase:
    """
    Convert a color object to the color type named ``to_space``.

    Args:
        color: any color instance
        to_space: target space, e.g. "rgb", "hsl", "xyz"

    Returns:
        New ColorBase instance in the target space
    """
    return color.convert(get_color_class(to_space))


def convert(value: Triple, from_space: ColorMode, to_space: ColorMode) -> Triple:
    """
    Convert a plain 3-tuple between two named color spaces, e.g.
    ``convert((245, 0.5, 0.6), "hsl", "rgb")``. The value goes through the
    XYZ hub like any class conversion.
    """
    color = get_color_class(from_space)(value)
    return color_convert(color, to_space).value


def parse_color(text: str) -> ColorBase:
    """
    Parse ``rgb(...)``, ``hsl(...)`` or ``hsv(...)`` into the matching color type.

    Raises:
        InvalidColorSyntax: unknown function name or malformed arguments
        InvalidNumericCharacters, InvalidNumericSyntax: a malformed number
    """
    text = text.strip()
    for prefix, color_class in _PARSERS.items():
        if text.startswith(prefix):
            return color_class.from_str(text)  # type: ignore[attr-defined]
    raise InvalidColorSyntax(f"Unknown color function: {text!r}")
