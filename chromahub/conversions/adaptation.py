import numpy as np
from numpy import ndarray as NDArray

from ..consts import BRADFORD_TRANSFORM
from ..illuminants import Illuminant


def bradford_adapt(xyz, source: Illuminant, target: Illuminant) -> NDArray:
    """
    Re-express XYZ values measured under ``source`` as seen under ``target``.

    Von Kries scaling in the Bradford cone space: transform to cone response,
    scale each cone by the ratio of the two white points, transform back
    through the stored decomposition.

    Args:
        xyz: length-3 vector or array of shape (..., 3)
        source: illuminant the input is relative to
        target: illuminant the output should be relative to

    Returns:
        array with the same shape as ``xyz``
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    if source == target:
        return xyz.copy()
    src_cone = BRADFORD_TRANSFORM.apply(source.white_point_array())
    dst_cone = BRADFORD_TRANSFORM.apply(target.white_point_array())
    cone = BRADFORD_TRANSFORM.apply(xyz) * (dst_cone / src_cone)
    return BRADFORD_TRANSFORM.solve(cone)
