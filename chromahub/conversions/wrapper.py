import numpy as np
from typing import Callable, Dict, NamedTuple

from ..consts import ADOBE_RGB_TRANSFORM, ROMM_RGB_TRANSFORM, STANDARD_RGB_TRANSFORM
from ..illuminants import Illuminant
from ..types.color_types import ColorMode, element_to_array
from . import companding
from .adaptation import bradford_adapt
from .hexagonal import np_hsl_to_rgb, np_hsv_to_rgb, np_rgb_to_hsl, np_rgb_to_hsv

ArrayConversion = Callable[[np.ndarray, Illuminant], np.ndarray]


class _RGBStandard(NamedTuple):
    decode: Callable
    encode: Callable
    linear_to_xyz: Callable[[np.ndarray], np.ndarray]
    xyz_to_linear: Callable[[np.ndarray], np.ndarray]
    native_illuminant: Illuminant


# Same transforms as the RGB color classes, applied to whole arrays.
_RGB_STANDARDS: Dict[str, _RGBStandard] = {
    "rgb": _RGBStandard(
        companding.srgb_decode, companding.srgb_encode,
        STANDARD_RGB_TRANSFORM.solve, STANDARD_RGB_TRANSFORM.apply,
        Illuminant.D65,
    ),
    "adobe_rgb": _RGBStandard(
        companding.adobe_decode, companding.adobe_encode,
        ADOBE_RGB_TRANSFORM.solve, ADOBE_RGB_TRANSFORM.apply,
        Illuminant.D65,
    ),
    "romm_rgb": _RGBStandard(
        companding.romm_decode, companding.romm_encode,
        ROMM_RGB_TRANSFORM.apply, ROMM_RGB_TRANSFORM.solve,
        Illuminant.D50,
    ),
}


def _rgb_to_xyz(space: str) -> ArrayConversion:
    std = _RGB_STANDARDS[space]

    def to_xyz(rgb: np.ndarray, illuminant: Illuminant) -> np.ndarray:
        native = std.linear_to_xyz(np.asarray(std.decode(rgb)))
        return bradford_adapt(native, std.native_illuminant, illuminant)
    return to_xyz


def _xyz_to_rgb(space: str) -> ArrayConversion:
    std = _RGB_STANDARDS[space]

    def from_xyz(xyz: np.ndarray, illuminant: Illuminant) -> np.ndarray:
        native = bradford_adapt(xyz, illuminant, std.native_illuminant)
        return np.asarray(std.encode(std.xyz_to_linear(native)))
    return from_xyz


_srgb_to_xyz = _rgb_to_xyz("rgb")
_xyz_to_srgb = _xyz_to_rgb("rgb")

# Every array space reaches XYZ in one step; XYZ is the hub, as for the classes.
TO_XYZ: Dict[str, ArrayConversion] = {
    "xyz": lambda arr, _: arr,
    **{space: _rgb_to_xyz(space) for space in _RGB_STANDARDS},
    "hsl": lambda arr, ill: _srgb_to_xyz(np_hsl_to_rgb(arr), ill),
    "hsv": lambda arr, ill: _srgb_to_xyz(np_hsv_to_rgb(arr), ill),
}

FROM_XYZ: Dict[str, ArrayConversion] = {
    "xyz": lambda arr, _: arr,
    **{space: _xyz_to_rgb(space) for space in _RGB_STANDARDS},
    "hsl": lambda arr, ill: np_rgb_to_hsl(_xyz_to_srgb(arr, ill)),
    "hsv": lambda arr, ill: np_rgb_to_hsv(_xyz_to_srgb(arr, ill)),
}


def _lookup(table: Dict[str, ArrayConversion], space: str) -> ArrayConversion:
    try:
        return table[space.lower()]
    except KeyError:
        raise ValueError(f"Unknown space: {space}; expected one of {sorted(table)}") from None


def np_convert(
    color: np.ndarray,
    from_space: ColorMode,
    to_space: ColorMode,
    illuminant: Illuminant = Illuminant.D50,
) -> np.ndarray:
    """
    Vectorized conversion of an array of colors between any two of "xyz",
    "rgb" (sRGB), "adobe_rgb", "romm_rgb", "hsl" and "hsv".

    Like the color classes, every conversion goes ``from_space -> xyz ->
    to_space``; nothing converts leaf to leaf directly.

    Args:
        color: array of shape (..., 3)
        from_space: space of the input
        to_space: space of the output
        illuminant: white the hub (and any "xyz" input/output) is relative to

    Returns:
        array of shape (..., 3) in ``to_space``
    """
    arr = element_to_array(color)
    to_xyz = _lookup(TO_XYZ, from_space)
    from_xyz = _lookup(FROM_XYZ, to_space)
    if from_space.lower() == to_space.lower():
        return arr.copy()
    return from_xyz(to_xyz(arr, illuminant), illuminant)
