"""
Cylinder tessellation.

A 3D cylinder is meshed as a closed prism: ``nbv = facets / 2`` slots
around the axis, each with a bottom and a top ring point, plus the two
cap centers. A 2D cylinder is a rectangle of width ``r`` laid along the
segment from origin to extremity.
"""

import logging

import numpy as np

from ..core.primitives import Cylinder, Rect
from ..core.types import norm, normalize
from ..params.validation import validate_resolution
from .rect import grid_faces, rect_coordinates

logger = logging.getLogger(__name__)

MIN_FACETS = 8


def height(c: Cylinder):
    """Distance from origin to extremity."""
    return norm(c.extremity - c.origin)


def direction(c: Cylinder) -> np.ndarray:
    """
    Unit vector from origin to extremity.

    Raises
    ------
    ValueError
        If origin and extremity coincide.
    """
    h = height(c)
    if h == 0:
        raise ValueError(
            f"Cylinder has zero length (origin == extremity == {c.origin.tolist()}); "
            "direction is undefined"
        )
    return (c.extremity - c.origin) / h


def rotation(c: Cylinder) -> np.ndarray:
    """
    Orthonormal frame of the cylinder as a 3x3 matrix.

    In 3D the columns are ``(v, w, u)`` with ``u`` the axis direction,
    ``v`` perpendicular to it and ``w = u x v``. The seed for ``v`` swaps
    x and y of the axis, unless the axis is parallel to z where it swaps
    y and z instead.

    In 2D the columns are ``(v, u, e_z)`` with ``u`` the direction lifted
    to z = 0 and ``v`` its clockwise perpendicular.
    """
    d = direction(c)
    dtype = c.dtype

    if c.ndim == 2:
        u = np.array([d[0], d[1], 0], dtype=dtype)
        v = normalize(np.array([u[1], -u[0], 0], dtype=dtype))
        return np.column_stack([v, u, np.array([0, 0, 1], dtype=dtype)])

    u = d
    if abs(u[0]) > 0 or abs(u[1]) > 0:
        v = np.array([u[1], -u[0], 0], dtype=dtype)
    else:
        v = np.array([0, -u[2], u[1]], dtype=dtype)
    # the seed is nonzero on either branch, however small its components
    v = v / np.linalg.norm(v)
    w = np.cross(u, v)
    return np.column_stack([v, w, u])


def clamp_facets(facets: int) -> int:
    """Round odd facet counts down to even, with a minimum of 8."""
    requested = validate_resolution(facets, 1, minimum=1)
    clamped = max(MIN_FACETS, 2 * (requested // 2))
    if clamped != requested:
        logger.debug("Cylinder facets %d clamped to %d", requested, clamped)
    return clamped


def cylinder3_coordinates(c: Cylinder, facets: int = 30) -> np.ndarray:
    """
    Vertices of a 3D cylinder.

    Returns
    -------
    np.ndarray, shape (facets + 2, 3)
        Index ``2k`` is the bottom ring point and ``2k + 1`` the top ring
        point of slot ``k``; the last two rows are exactly ``origin`` and
        ``extremity``.
    """
    nbv = clamp_facets(facets) // 2
    dtype = c.dtype
    M = rotation(c)
    h = height(c)

    phi = np.arange(nbv, dtype=dtype) * dtype.type(2 * np.pi) / dtype.type(nbv)
    ring = np.stack([c.r * np.cos(phi), c.r * np.sin(phi), np.zeros(nbv, dtype=dtype)], axis=-1)
    lift = np.array([0, 0, h], dtype=dtype)

    points = np.empty((2 * nbv + 2, 3), dtype=dtype)
    points[0:2 * nbv:2] = ring @ M.T + c.origin
    points[1:2 * nbv:2] = (ring + lift) @ M.T + c.origin
    points[-2] = c.origin
    points[-1] = c.extremity
    return points


def cylinder3_faces(facets: int = 30) -> np.ndarray:
    """
    Triangles of a closed 3D cylinder, indexing ``cylinder3_coordinates``.

    The side wall takes two triangles per slot. Each side triangle is then
    matched by one cap triangle fanned to the bottom or top center, so
    the result has ``2 * facets`` triangles, all wound outward.
    """
    nbv = clamp_facets(facets) // 2
    n_ring = 2 * nbv
    k = np.arange(nbv)
    bottom = 2 * k
    top = 2 * k + 1
    bottom_next = (2 * k + 2) % n_ring
    top_next = (2 * k + 3) % n_ring

    side = np.empty((n_ring, 3), dtype=np.int64)
    side[0::2] = np.stack([bottom_next, top, bottom], axis=-1)
    side[1::2] = np.stack([top_next, top, bottom_next], axis=-1)

    caps = np.empty((n_ring, 3), dtype=np.int64)
    caps[0::2] = np.stack([bottom_next, bottom, np.full(nbv, n_ring)], axis=-1)
    caps[1::2] = np.stack([top, top_next, np.full(nbv, n_ring + 1)], axis=-1)

    return np.concatenate([side, caps])


def cylinder2_coordinates(c: Cylinder, resolution=(2, 2)) -> np.ndarray:
    """Grid over the rectangle of width ``r`` and length ``height(c)``, rotated onto the segment."""
    dtype = c.dtype
    rect = Rect(
        origin=(c.origin[0] - c.r / 2, c.origin[1]),
        widths=(c.r, height(c)),
        dtype=dtype,
    )
    M = rotation(c)
    local = rect_coordinates(rect, resolution)
    pivot = np.array([c.origin[0], c.origin[1], 0], dtype=dtype)
    lifted = np.column_stack([local, np.zeros(len(local), dtype=dtype)])
    return ((lifted - pivot) @ M.T + pivot)[:, :2]


def cylinder2_faces(resolution=(2, 2)) -> np.ndarray:
    """Grid faces matching ``cylinder2_coordinates``."""
    return grid_faces(resolution)
