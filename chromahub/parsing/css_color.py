"""
CSS functional color notation: ``rgb(r, g, b)`` and the ``(h, s%, l%)`` body
of ``hsl(...)`` / ``hsv(...)``.

Follows https://www.w3.org/TR/css-color-3/ without arithmetic and without the
four-argument alpha form. Out-of-range values are clamped, never rejected.
"""
from typing import List, Tuple

from ..exceptions import InvalidColorSyntax
from ..types.format_type import FormatType, max_non_hue
from ..utils.num_utils import clamp, normalize_hue, round_half_away, unit_to_byte
from .css_numeric import CSSNumeric, parse_css_number

RGB_PREFIX = "rgb("
RGB_BODY_CHARACTERS = frozenset("0123456789+-,. %")
# shortest legal form is "rgb(0,0,0)"
_RGB_MIN_LENGTH = 10


def parse_rgb_num(num: str) -> int:
    """
    Parse one ``rgb()`` argument into an 8-bit channel.

    - integers clamp to ``0..255`` and are used as-is
    - decimals are read as ``[0, 1]``, clamped, and scaled (``0.5 -> 127``)
    - percentages clamp to ``0..100`` and scale by 2.55 (``48% -> 122``)
    """
    parsed = parse_css_number(num)
    if parsed.kind is FormatType.INT:
        return clamp(parsed.value, 0, max_non_hue[FormatType.INT])
    if parsed.kind is FormatType.FLOAT:
        return unit_to_byte(parsed.value)
    clamped = clamp(parsed.value, 0, max_non_hue[FormatType.PERCENTAGE])
    return round_half_away(clamped * 2.55)


def _split_fields(body: str) -> List[str]:
    return [field.strip() for field in body.split(",")]


def parse_rgb_str(num: str) -> Tuple[int, int, int]:
    """
    Parse ``"rgb(r, g, b)"`` into three 8-bit channels.

    Raises:
        InvalidColorSyntax: wrong prefix (case-sensitive), missing ``)``,
            characters that cannot appear in the body, or not exactly three fields
        InvalidNumericCharacters, InvalidNumericSyntax: a field is not a number
    """
    if not num.startswith(RGB_PREFIX) or len(num) < _RGB_MIN_LENGTH:
        raise InvalidColorSyntax(f"Expected 'rgb(r, g, b)', got {num!r}")
    if not num.endswith(")"):
        raise InvalidColorSyntax(f"Missing closing parenthesis: {num!r}")
    body = num[len(RGB_PREFIX):-1]
    if any(c not in RGB_BODY_CHARACTERS for c in body):
        raise InvalidColorSyntax(f"Invalid characters in rgb(): {num!r}")

    channels = [parse_rgb_num(field) for field in _split_fields(body)]
    if len(channels) != 3:
        raise InvalidColorSyntax(f"rgb() takes exactly 3 arguments, got {len(channels)}")
    return channels[0], channels[1], channels[2]


def _percentage_to_unit(numeric: CSSNumeric) -> float:
    if numeric.kind is not FormatType.PERCENTAGE:
        raise InvalidColorSyntax(f"Expected a percentage, got {numeric.kind.value} {numeric.value!r}")
    max_pct = max_non_hue[FormatType.PERCENTAGE]
    return clamp(numeric.value, 0, max_pct) / max_pct


def parse_hsl_hsv_tuple(tup: str) -> Tuple[float, float, float]:
    """
    Parse the ``"(h, s%, l%)"`` part of an ``hsl()``/``hsv()`` color.

    The hue must be an integer or decimal and is wrapped into ``[0, 360)``.
    The other two fields must be percentages; they are clamped to ``0..100``
    and returned in ``[0, 1]``.

    Raises:
        InvalidColorSyntax: missing brackets, not exactly three fields, a
            percentage hue, or a non-percentage saturation/lightness
        InvalidNumericCharacters, InvalidNumericSyntax: a field is not a number
    """
    if not tup.startswith("(") or not tup.endswith(")"):
        raise InvalidColorSyntax(f"Expected '(h, s%, l%)', got {tup!r}")

    numerics = [parse_css_number(field) for field in _split_fields(tup[1:-1])]
    if len(numerics) != 3:
        raise InvalidColorSyntax(f"Expected exactly 3 arguments, got {len(numerics)}")

    hue_num = numerics[0]
    if hue_num.kind is FormatType.PERCENTAGE:
        raise InvalidColorSyntax(f"Hue cannot be a percentage: {tup!r}")
    hue = float(normalize_hue(hue_num.value))
    return hue, _percentage_to_unit(numerics[1]), _percentage_to_unit(numerics[2])
