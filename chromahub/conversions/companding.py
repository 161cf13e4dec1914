"""
Transfer functions (gamma companding) of the supported RGB standards.

``decode`` maps stored channel values to linear light, ``encode`` goes back.
All functions work elementwise on floats or numpy arrays. Negative inputs
always fall in the linear segment, so no fractional power of a negative number
is ever taken.
"""
import numpy as np
from numpy import ndarray as NDArray

# sRGB (IEC 61966-2-1)
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

# Adobe RGB (1998)
ADOBE_GAMMA = 563 / 256

# ROMM RGB (ISO 22028-2)
ROMM_GAMMA = 1.8
ROMM_ET = 1 / 512


def srgb_decode(c):
    c = np.asarray(c, dtype=np.float64)
    linear = np.where(
        c <= SRGB_DECODE_THRESHOLD,
        c / 12.92,
        np.power((np.maximum(c, SRGB_DECODE_THRESHOLD) + 0.055) / 1.055, SRGB_GAMMA),
    )
    return _unwrap(linear)


def srgb_encode(c):
    c = np.asarray(c, dtype=np.float64)
    encoded = np.where(
        c <= SRGB_ENCODE_THRESHOLD,
        c * 12.92,
        1.055 * np.power(np.maximum(c, SRGB_ENCODE_THRESHOLD), 1 / SRGB_GAMMA) - 0.055,
    )
    return _unwrap(encoded)


def adobe_decode(c):
    c = np.asarray(c, dtype=np.float64)
    return _unwrap(np.sign(c) * np.power(np.abs(c), ADOBE_GAMMA))


def adobe_encode(c):
    c = np.asarray(c, dtype=np.float64)
    return _unwrap(np.sign(c) * np.power(np.abs(c), 1 / ADOBE_GAMMA))


def romm_decode(c):
    c = np.asarray(c, dtype=np.float64)
    toe = 16 * ROMM_ET
    linear = np.where(c < toe, c / 16, np.power(np.maximum(c, toe), ROMM_GAMMA))
    return _unwrap(linear)


def romm_encode(c):
    c = np.asarray(c, dtype=np.float64)
    encoded = np.where(c < ROMM_ET, c * 16, np.power(np.maximum(c, ROMM_ET), 1 / ROMM_GAMMA))
    return _unwrap(encoded)


def _unwrap(arr: NDArray):
    # 0-d results go back to plain floats for the scalar color classes
    return float(arr) if arr.ndim == 0 else arr
