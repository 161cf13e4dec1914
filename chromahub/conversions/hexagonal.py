"""
RGB <-> HSL / HSV through the hexagonal projection.

Hue comes from linear comparisons of the RGB channels rather than polar
coordinates: tilting the RGB cube onto its gray axis gives a hexagon whose
"radius" is simply ``max - min`` (chroma), and the position along the hexagon
edge is treated as degrees. Results can differ slightly from circular
implementations.

Gray (chroma within ``ACHROMATIC_TOLERANCE`` of 0) gets hue 0 and saturation 0.
"""
import math
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..consts import ACHROMATIC_TOLERANCE, EPSILON, HUE_360
from ..types.color_types import element_to_array
from ..utils.num_utils import normalize_hue

Triple = Tuple[float, float, float]

# Upper (inclusive) hue of each sector; anything above 300 is sector 5.
SECTOR_BOUNDARIES = (60.0, 120.0, 180.0, 240.0, 300.0)


def hue_sector(h: float) -> int:
    """Index 0-5 of the 60 degree sector ``h`` falls in; ``h == 60`` is sector 0."""
    for sector, boundary in enumerate(SECTOR_BOUNDARIES):
        if h <= boundary:
            return sector
    return 5


def _sector_rgb(h: float, chroma: float) -> Triple:
    # position of the second-largest channel along the current hexagon edge
    x = chroma * (1.0 - abs(math.fmod(h / 60.0, 2.0) - 1.0))
    sector = hue_sector(h)
    if sector == 0:
        return chroma, x, 0.0
    if sector == 1:
        return x, chroma, 0.0
    if sector == 2:
        return 0.0, chroma, x
    if sector == 3:
        return 0.0, x, chroma
    if sector == 4:
        return x, 0.0, chroma
    return chroma, 0.0, x


def hexagonal_hue(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Hue, max and min of an RGB triple.

    A chroma below ``ACHROMATIC_TOLERANCE`` counts as gray and yields hue 0.
    The sector is picked by whichever channel equals the maximum, testing red,
    then green, then blue. The comparison is tolerant by ``EPSILON`` because the
    maximum may come out of a lossy upstream conversion.

    Returns:
        (hue in [0, 360), max channel, min channel)
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    chroma = max_c - min_c

    if chroma < ACHROMATIC_TOLERANCE:
        hue = 0.0
    elif abs(max_c - r) < EPSILON:
        hue = 60.0 * ((g - b) / chroma)
    elif abs(max_c - g) < EPSILON:
        hue = 60.0 * ((b - r) / chroma) + 120.0
    else:
        hue = 60.0 * ((r - g) / chroma) + 240.0
    return normalize_hue(hue), max_c, min_c


## HSL

def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b), not clamped
    """
    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    r1, g1, b1 = _sector_rgb(h, chroma)
    offset = l - chroma / 2.0
    return r1 + offset, g1 + offset, b1 + offset


def rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """
    Convert RGB to HSL.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    hue, max_c, min_c = hexagonal_hue(r, g, b)
    chroma = max_c - min_c
    lightness = (max_c + min_c) / 2.0
    denominator = 1.0 - abs(2.0 * lightness - 1.0)
    if (chroma < ACHROMATIC_TOLERANCE or lightness == 0.0
            or abs(lightness - 1.0) < EPSILON or abs(denominator) < EPSILON):
        saturation = 0.0
    else:
        saturation = chroma / denominator
    return hue, saturation, lightness


## HSV

def hsv_to_rgb(h: float, s: float, v: float) -> Triple:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b), not clamped
    """
    chroma = v * s
    r1, g1, b1 = _sector_rgb(h, chroma)
    offset = v - chroma
    return r1 + offset, g1 + offset, b1 + offset


def rgb_to_hsv(r: float, g: float, b: float) -> Triple:
    """
    Convert RGB to HSV.

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    hue, max_c, min_c = hexagonal_hue(r, g, b)
    chroma = max_c - min_c
    gray = chroma < ACHROMATIC_TOLERANCE or abs(max_c) < EPSILON
    saturation = 0.0 if gray else chroma / max_c
    return hue, saturation, max_c


## Vectorized

def _np_sector_rgb(h: NDArray, chroma: NDArray) -> NDArray:
    x = chroma * (1.0 - np.abs(np.fmod(h / 60.0, 2.0) - 1.0))
    zero = np.zeros_like(chroma)
    # np.select takes the first matching condition, same as the scalar chain
    conditions = [h <= boundary for boundary in SECTOR_BOUNDARIES]
    r = np.select(conditions, [chroma, x, zero, zero, x], default=chroma)
    g = np.select(conditions, [x, chroma, chroma, x, zero], default=zero)
    b = np.select(conditions, [zero, zero, x, chroma, chroma], default=x)
    return np.stack([r, g, b], axis=-1)


def _np_normalize_hue(hue: NDArray) -> NDArray:
    hue = np.mod(hue, HUE_360)
    # np.mod of a tiny negative can round up to exactly 360
    return np.where(hue >= HUE_360, 0.0, hue)


def np_hexagonal_hue(rgb: NDArray) -> Tuple[NDArray, NDArray, NDArray]:
    """Vectorized ``hexagonal_hue`` over an array of shape (..., 3)."""
    rgb = element_to_array(rgb)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    chroma = max_c - min_c
    gray = chroma < ACHROMATIC_TOLERANCE
    safe_chroma = np.where(gray, 1.0, chroma)

    hue = np.select(
        [gray, np.abs(max_c - r) < EPSILON, np.abs(max_c - g) < EPSILON],
        [
            np.zeros_like(chroma),
            60.0 * ((g - b) / safe_chroma),
            60.0 * ((b - r) / safe_chroma) + 120.0,
        ],
        default=60.0 * ((r - g) / safe_chroma) + 240.0,
    )
    return _np_normalize_hue(hue), max_c, min_c


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])

    Returns:
        rgb: array of shape (..., 3)
    """
    hsl = element_to_array(hsl)
    h, s, l = hsl[..., 0], hsl[..., 1], hsl[..., 2]
    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    offset = l - chroma / 2.0
    return _np_sector_rgb(h, chroma) + offset[..., None]


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        rgb: array of shape (..., 3) in [0, 1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    hue, max_c, min_c = np_hexagonal_hue(rgb)
    chroma = max_c - min_c
    lightness = (max_c + min_c) / 2.0
    denominator = 1.0 - np.abs(2.0 * lightness - 1.0)
    singular = (
        (chroma < ACHROMATIC_TOLERANCE) | (lightness == 0.0)
        | (np.abs(lightness - 1.0) < EPSILON) | (np.abs(denominator) < EPSILON)
    )
    saturation = np.where(singular, 0.0, chroma / np.where(singular, 1.0, denominator))
    return np.stack([hue, saturation, lightness], axis=-1)


def np_hsv_to_rgb(hsv: NDArray) -> NDArray:
    """Vectorized: Convert HSV (..., 3) to RGB (..., 3)."""
    hsv = element_to_array(hsv)
    h, s, v = hsv[..., 0], hsv[..., 1], hsv[..., 2]
    chroma = v * s
    return _np_sector_rgb(h, chroma) + (v - chroma)[..., None]


def np_rgb_to_hsv(rgb: NDArray) -> NDArray:
    """Vectorized: Convert RGB (..., 3) to HSV (..., 3)."""
    hue, max_c, min_c = np_hexagonal_hue(rgb)
    chroma = max_c - min_c
    dark = (chroma < ACHROMATIC_TOLERANCE) | (np.abs(max_c) < EPSILON)
    saturation = np.where(dark, 0.0, chroma / np.where(dark, 1.0, max_c))
    return np.stack([hue, saturation, max_c], axis=-1)
