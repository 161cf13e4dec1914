import math
from typing import TypeVar

from ..consts import HUE_360, RGB_ROUNDING_BIAS

Number = TypeVar("Number", int, float)

# Past this magnitude the add/subtract loop is replaced by one exact fmod step,
# otherwise ``h + 360`` stops changing ``h`` and the loop never ends.
_HUE_LOOP_LIMIT = HUE_360 * 8


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Clamp ``value`` into ``[low, high]``."""
    if value <= low:
        return low
    if value >= high:
        return high
    return value


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (``2.5 -> 3``, ``-2.5 -> -3``)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def unit_to_byte(value: float) -> int:
    """
    Map a channel in ``[0, 1]`` onto ``0..255``.

    Out-of-range input is clamped first. The small bias keeps exact halves
    rounding down, so ``0.5`` becomes ``127`` rather than ``128``.
    """
    return round_half_away(clamp(float(value), 0.0, 1.0) * 255 - RGB_ROUNDING_BIAS)


def normalize_hue(hue: Number) -> Number:
    """
    Wrap a hue angle into ``[0, 360)`` by repeated addition/subtraction of 360.

    Integers stay integers. Equivalent to a floored modulo for every finite
    input, including angles many turns away from the origin.
    """
    if isinstance(hue, int):
        if not -_HUE_LOOP_LIMIT < hue < _HUE_LOOP_LIMIT:
            hue = hue % HUE_360
    elif not -_HUE_LOOP_LIMIT < hue < _HUE_LOOP_LIMIT:
        hue = math.fmod(hue, HUE_360)
    while hue < 0:
        hue += HUE_360
    while hue >= HUE_360:
        hue -= HUE_360
    return hue
