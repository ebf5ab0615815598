"""
Circle and sphere tessellation.
"""

import numpy as np

from ..core.faces import NgonFace, TriangleFace
from ..core.primitives import HyperSphere, Circle, Sphere
from ..params.validation import validate_resolution
from .rect import grid_faces
from .simplex import convert_simplex


def contains(circle: HyperSphere, point) -> bool:
    """True if point lies inside or on the sphere (squared distance <= r^2)."""
    offset = np.asarray(point, dtype=circle.dtype) - circle.center
    return bool(np.dot(offset, offset) <= circle.r * circle.r)


def circle_coordinates(circle: HyperSphere, nvertices: int = 64) -> np.ndarray:
    """
    Points on the circle for angles evenly spaced over [0, 2pi].

    Both ends of the range are sampled, so the first and last points
    coincide. Sampling starts at the bottom of the circle and runs
    clockwise: ``r * (sin(phi + pi), cos(phi + pi)) + center``.
    """
    n = validate_resolution(nvertices, 1, minimum=2)
    dtype = circle.dtype
    phi = np.linspace(0, 2 * np.pi, n, dtype=dtype) + dtype.type(np.pi)
    return np.stack([circle.r * np.sin(phi), circle.r * np.cos(phi)], axis=-1) + circle.center


def circle_texturecoordinates(circle: HyperSphere, nvertices: int = 64) -> np.ndarray:
    """The circle parametrization mapped onto the unit UV square."""
    return circle_coordinates(Circle((0.5, 0.5), 0.5, dtype=circle.dtype), nvertices)


def circle_faces(nvertices: int = 64) -> np.ndarray:
    """
    Triangle fan over the circle's samples, anchored at the first one.

    The closing sample duplicates the first and is left out of the fan,
    giving ``nvertices - 3`` triangles wound like the samples (clockwise).
    """
    n = validate_resolution(nvertices, 1, minimum=4)
    return np.array(convert_simplex(TriangleFace, NgonFace(range(n - 1))), dtype=np.int64)


def sphere_coordinates(sphere: HyperSphere, nvertices: int = 24) -> np.ndarray:
    """
    UV-sphere vertices on a theta x phi grid.

    theta runs over [0, pi] (outer) and phi over [0, 2pi] (inner), each
    with ``nvertices`` samples, giving ``nvertices**2`` points. The
    poles and the phi seam are repeated rather than merged.
    """
    n = validate_resolution(nvertices, 1, minimum=2)
    dtype = sphere.dtype
    theta = np.linspace(0, np.pi, n, dtype=dtype)
    phi = np.linspace(0, 2 * np.pi, n, dtype=dtype)
    tt, pp = np.meshgrid(theta, phi, indexing="ij")
    unit = np.stack(
        [np.cos(pp) * np.sin(tt), np.sin(pp) * np.sin(tt), np.cos(tt)],
        axis=-1,
    ).reshape(-1, 3)
    return unit * sphere.r + sphere.center


def sphere_texturecoordinates(sphere: HyperSphere, nvertices: int = 24) -> np.ndarray:
    """``(u, v)`` per vertex, u following phi and v running from 1 at theta = 0 to 0."""
    n = validate_resolution(nvertices, 1, minimum=2)
    v = np.linspace(1, 0, n, dtype=sphere.dtype)
    u = np.linspace(0, 1, n, dtype=sphere.dtype)
    vv, uu = np.meshgrid(v, u, indexing="ij")
    return np.stack([uu.ravel(), vv.ravel()], axis=-1)


def sphere_faces(nvertices: int = 24) -> np.ndarray:
    """Quad faces of the theta x phi grid."""
    n = validate_resolution(nvertices, 1, minimum=2)
    return grid_faces((n, n))


def sphere_normals(sphere: HyperSphere, nvertices: int = 24) -> np.ndarray:
    """Unit normals: the vertices of a unit sphere at the origin."""
    return sphere_coordinates(Sphere((0, 0, 0), 1, dtype=sphere.dtype), nvertices)
