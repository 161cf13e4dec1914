"""
Constant transform matrices and numeric tolerances.

Every matrix is stored together with its LU decomposition, computed once at
import. Applying the inverse transform solves against that decomposition
instead of multiplying by a separately inverted matrix, so going to a space
and straight back reproduces the input to floating-point precision.

The explicit inverse (``TransformMatrix.inverse``) is kept only for inspection
and diagnostics, e.g. checking ``inverse @ matrix`` against the identity;
conversions never multiply by it.

All arrays here are flagged read-only and may be shared between threads.
"""
from typing import Final, Sequence

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import lu_factor, lu_solve

from .exceptions import MatrixDecompositionError
from .types.format_type import HUE_360

__all__ = [
    "HUE_360",
    "EPSILON",
    "ACHROMATIC_TOLERANCE",
    "RGB_ROUNDING_BIAS",
    "TEST_PRECISION",
    "TransformMatrix",
    "STANDARD_RGB_TRANSFORM",
    "ADOBE_RGB_TRANSFORM",
    "ROMM_RGB_TRANSFORM",
    "BRADFORD_TRANSFORM",
]

EPSILON: Final[float] = float(np.finfo(np.float64).eps)

# Chroma below this is gray: hue and saturation are 0. Covers the few ulps of
# noise a round trip through XYZ leaves on an R = G = B input.
ACHROMATIC_TOLERANCE: Final[float] = 64 * EPSILON

# Subtracted before rounding a unit float to 8 bits so that 0.5 maps to 127.
RGB_ROUNDING_BIAS: Final[float] = 1e-6

# Largest difference two conversions of the same color may show in tests.
TEST_PRECISION: Final[float] = 1e-12


class TransformMatrix:
    """
    A fixed 3x3 linear map with a precomputed decomposition of itself.

    ``apply`` multiplies by the matrix, ``solve`` applies the exact inverse.
    Both accept a single length-3 vector or any array of shape ``(..., 3)``.
    """

    __slots__ = ("matrix", "_lu_piv", "_inverse")

    def __init__(self, rows: Sequence[Sequence[float]]) -> None:
        matrix = np.array(rows, dtype=np.float64)
        if matrix.shape != (3, 3):
            raise MatrixDecompositionError(f"Expected a 3x3 matrix, got shape {matrix.shape}")

        lu, piv = lu_factor(matrix, check_finite=True)
        pivots = np.abs(np.diag(lu))
        if not np.all(pivots > EPSILON * np.abs(matrix).max()):
            raise MatrixDecompositionError(f"Matrix is not invertible:\n{matrix}")

        inverse = lu_solve((lu, piv), np.eye(3))
        for arr in (matrix, lu, piv, inverse):
            arr.setflags(write=False)

        self.matrix: NDArray[np.float64] = matrix
        self._lu_piv = (lu, piv)
        self._inverse: NDArray[np.float64] = inverse

    @property
    def inverse(self) -> NDArray[np.float64]:
        """The inverse matrix, derived from the stored decomposition."""
        return self._inverse

    def apply(self, vec) -> NDArray[np.float64]:
        arr = np.asarray(vec, dtype=np.float64)
        return arr @ self.matrix.T

    def solve(self, vec) -> NDArray[np.float64]:
        arr = np.asarray(vec, dtype=np.float64)
        if arr.ndim == 1:
            return lu_solve(self._lu_piv, arr)
        # lu_solve wants column vectors: (..., 3) -> (3, N) -> back
        flat = arr.reshape(-1, 3).T
        return lu_solve(self._lu_piv, flat).T.reshape(arr.shape)

    def __repr__(self) -> str:
        return f"TransformMatrix({self.matrix.tolist()!r})"


# XYZ -> linear sRGB (IEC 61966-2-1, D65)
STANDARD_RGB_TRANSFORM: Final[TransformMatrix] = TransformMatrix([
    [ 3.2406, -1.5372, -0.4986],
    [-0.9689,  1.8758,  0.0415],
    [ 0.0557, -0.2040,  1.0570],
])

# XYZ -> linear Adobe RGB (1998), D65
ADOBE_RGB_TRANSFORM: Final[TransformMatrix] = TransformMatrix([
    [ 2.04159, -0.56501, -0.34473],
    [-0.96924,  1.87957,  0.04156],
    [ 0.01344, -0.11836,  1.01517],
])

# Linear ROMM RGB (ProPhoto) -> XYZ, D50
ROMM_RGB_TRANSFORM: Final[TransformMatrix] = TransformMatrix([
    [0.7976749, 0.1351917, 0.0313534],
    [0.2880402, 0.7118741, 0.0000857],
    [0.0000000, 0.0000000, 0.8252100],
])

# XYZ -> sharpened cone response, for chromatic adaptation
BRADFORD_TRANSFORM: Final[TransformMatrix] = TransformMatrix([
    [ 0.8951,  0.2664, -0.1614],
    [-0.7502,  1.7135,  0.0367],
    [ 0.0389, -0.0685,  1.0296],
])
