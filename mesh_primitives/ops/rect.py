"""
Regular grid tessellation of rectangles and quads.

Grid vertices are laid out with the first axis outer and the second
inner, so vertex ``(i, j)`` of an ``(nw, nh)`` grid has index
``i * nh + j``.
"""

from typing import Tuple

import numpy as np

from ..core.primitives import Rect, Quad
from ..core.types import normalize
from ..params.validation import validate_resolution


def grid_faces(resolution: Tuple[int, int]) -> np.ndarray:
    """
    Quad faces of an ``(nw, nh)`` vertex grid.

    Faces run counter-clockwise over the grid cells:
    ``(i, j) -> (i+1, j) -> (i+1, j+1) -> (i, j+1)``.

    Returns
    -------
    np.ndarray, shape ((nw-1)*(nh-1), 4)
    """
    nw, nh = validate_resolution(resolution, 2, minimum=2)
    idx = np.arange(nw * nh).reshape(nw, nh)
    faces = np.stack(
        [idx[:-1, :-1], idx[1:, :-1], idx[1:, 1:], idx[:-1, 1:]],
        axis=-1,
    )
    return faces.reshape(-1, 4)


def grid_texturecoordinates(resolution: Tuple[int, int], dtype=np.float64) -> np.ndarray:
    """UVs of an ``(nw, nh)`` grid, u from 0 to 1 and v from 1 to 0."""
    nw, nh = validate_resolution(resolution, 2, minimum=2)
    u = np.linspace(0, 1, nw, dtype=dtype)
    v = np.linspace(1, 0, nh, dtype=dtype)
    uu, vv = np.meshgrid(u, v, indexing="ij")
    return np.stack([uu.ravel(), vv.ravel()], axis=-1)


def _grid_parameters(resolution: Tuple[int, int], dtype) -> Tuple[np.ndarray, np.ndarray]:
    nw, nh = validate_resolution(resolution, 2, minimum=2)
    s = np.linspace(0, 1, nw, dtype=dtype)
    t = np.linspace(0, 1, nh, dtype=dtype)
    ss, tt = np.meshgrid(s, t, indexing="ij")
    return ss.ravel(), tt.ravel()


def rect_coordinates(rect: Rect, resolution=(2, 2)) -> np.ndarray:
    """Grid points covering the rectangle, corners included."""
    s, t = _grid_parameters(resolution, rect.dtype)
    x = rect.origin[0] + s * rect.widths[0]
    y = rect.origin[1] + t * rect.widths[1]
    return np.stack([x, y], axis=-1)


def quad_coordinates(quad: Quad, resolution=(2, 2)) -> np.ndarray:
    """Grid points ``downleft + s * width + t * height``."""
    s, t = _grid_parameters(resolution, quad.dtype)
    return quad.downleft + s[:, None] * quad.width + t[:, None] * quad.height


def quad_normals(quad: Quad, resolution=(2, 2)) -> np.ndarray:
    """The plane normal ``width x height`` repeated for every grid vertex."""
    nw, nh = validate_resolution(resolution, 2, minimum=2)
    n = normalize(np.cross(quad.width, quad.height))
    return np.tile(n, (nw * nh, 1))
