from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Triple = Tuple[float, float, float]
IntTriple = Tuple[int, int, int]
Bounds = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]
ColorValue = Union[Triple, ndarray]
ColorMode = Literal["xyz", "rgb", "adobe_rgb", "romm_rgb", "hsl", "hsv"]
HUE_SPACES = {"hsl", "hsv"}


def element_to_array(element: ColorValue) -> np.ndarray:
    """
    Convert a color triple (or stack of triples) to a float64 array.

    Args:
        element: tuple, list, or already an ndarray

    Returns:
        numpy array whose last dimension holds the three channels
    """
    arr = np.asarray(element, dtype=np.float64)
    if arr.shape[-1:] != (3,):
        raise ValueError(f"Expected last dimension size 3, got shape {arr.shape}")
    return arr


def is_hue_space(color_space: str) -> bool:
    """Check if the given color space is a hue-based space (HSV or HSL)."""
    return color_space.lower() in HUE_SPACES
