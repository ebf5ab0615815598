"""
Pyramid mesh. The shape is fixed, so the resolution argument is ignored.
"""

import numpy as np

from ..core.primitives import Pyramid

PYRAMID_VERTEX_COUNT = 18


def pyramid_coordinates(p: Pyramid, resolution=None) -> np.ndarray:
    """
    The six triangles of the pyramid as 18 unshared vertices.

    Four side triangles share the tip, followed by two triangles
    covering the square base. The base triangles are wound facing up,
    into the pyramid.
    """
    dtype = p.dtype
    half = p.width / dtype.type(2)
    leftup = np.array([-half, half, 0], dtype=dtype)
    leftdown = np.array([-half, -half, 0], dtype=dtype)

    tip = p.middle + np.array([0, 0, p.length], dtype=dtype)
    lu = p.middle + leftup
    ld = p.middle + leftdown
    ru = p.middle - leftdown
    rd = p.middle - leftup

    return np.array([
        tip, rd, ru,
        tip, ru, lu,
        tip, lu, ld,
        tip, ld, rd,
        rd, ru, lu,
        lu, ld, rd,
    ], dtype=dtype)


def pyramid_faces(resolution=None) -> np.ndarray:
    """Consecutive vertex triples: (0, 1, 2), (3, 4, 5), ..."""
    return np.arange(PYRAMID_VERTEX_COUNT, dtype=np.int64).reshape(-1, 3)
