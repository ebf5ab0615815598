"""
Mesh generation entry points that dispatch over the primitive kind.

Every function takes a primitive and an optional resolution. When the
resolution is omitted it comes from ``params`` (a TessellationParams,
library defaults if not given).
"""

import logging
from typing import Optional, Tuple

import numpy as np

from ..core.faces import TriangleFace
from ..core.primitives import (
    GeometryPrimitive, HyperSphere, Cylinder, Rect, Quad, Pyramid,
)
from ..core.types import PointType
from ..params.presets import TessellationParams
from .cylinder import (
    cylinder2_coordinates, cylinder2_faces,
    cylinder3_coordinates, cylinder3_faces,
)
from .normals import vertex_normals
from .pyramid import pyramid_coordinates, pyramid_faces
from .rect import (
    rect_coordinates, quad_coordinates, quad_normals,
    grid_faces, grid_texturecoordinates,
)
from .simplex import collect_with_eltype
from .sphere import (
    circle_coordinates, circle_texturecoordinates, circle_faces,
    sphere_coordinates, sphere_texturecoordinates, sphere_faces, sphere_normals,
)

logger = logging.getLogger(__name__)


def primitive_kind(p: GeometryPrimitive) -> str:
    """
    Name of the generator family for a primitive.

    Raises
    ------
    TypeError
        If no mesh generator exists for the primitive.
    """
    if isinstance(p, HyperSphere):
        if p.ndim == 2:
            return "circle"
        if p.ndim == 3:
            return "sphere"
    elif isinstance(p, Cylinder):
        return "cylinder2" if p.ndim == 2 else "cylinder3"
    elif isinstance(p, Rect):
        return "rect"
    elif isinstance(p, Quad):
        return "quad"
    elif isinstance(p, Pyramid):
        return "pyramid"
    raise TypeError(f"No mesh generator for {type(p).__name__} in {p.ndim}D")


def default_resolution(p: GeometryPrimitive, params: Optional[TessellationParams] = None):
    """Resolution used for p when the caller gives none."""
    kind = primitive_kind(p)
    if kind == "pyramid":
        return None
    if params is None:
        params = TessellationParams()
    return getattr(params, kind)


def _resolve(p, resolution, params) -> Tuple[str, object]:
    kind = primitive_kind(p)
    if resolution is None:
        resolution = default_resolution(p, params)
    return kind, resolution


def coordinates(p: GeometryPrimitive, resolution=None, params: Optional[TessellationParams] = None) -> np.ndarray:
    """
    Vertex positions of the primitive's mesh.

    Returns
    -------
    np.ndarray, shape (n, p.ndim)
        Points in the primitive's dtype
    """
    kind, resolution = _resolve(p, resolution, params)

    if kind == "circle":
        return circle_coordinates(p, resolution)
    elif kind == "sphere":
        return sphere_coordinates(p, resolution)
    elif kind == "cylinder2":
        return cylinder2_coordinates(p, resolution)
    elif kind == "cylinder3":
        return cylinder3_coordinates(p, resolution)
    elif kind == "rect":
        return rect_coordinates(p, resolution)
    elif kind == "quad":
        return quad_coordinates(p, resolution)
    else:
        return pyramid_coordinates(p, resolution)


def faces(p: GeometryPrimitive, resolution=None, params: Optional[TessellationParams] = None) -> np.ndarray:
    """
    0-based faces indexing ``coordinates(p, resolution)``.

    Triangles for circles, cylinders in 3D and pyramids; quads for the
    grid-based kinds (sphere, rect, quad, 2D cylinder).
    """
    kind, resolution = _resolve(p, resolution, params)

    if kind == "circle":
        return circle_faces(resolution)
    elif kind == "sphere":
        return sphere_faces(resolution)
    elif kind == "cylinder2":
        return cylinder2_faces(resolution)
    elif kind == "cylinder3":
        return cylinder3_faces(resolution)
    elif kind in ("rect", "quad"):
        return grid_faces(resolution)
    else:
        return pyramid_faces(resolution)


def texturecoordinates(p: GeometryPrimitive, resolution=None, params: Optional[TessellationParams] = None) -> np.ndarray:
    """
    UV coordinates aligned with ``coordinates(p, resolution)``.

    Raises
    ------
    TypeError
        For cylinders and pyramids, which have no UV layout.
    """
    kind, resolution = _resolve(p, resolution, params)

    if kind == "circle":
        return circle_texturecoordinates(p, resolution)
    elif kind == "sphere":
        return sphere_texturecoordinates(p, resolution)
    elif kind in ("rect", "quad"):
        return grid_texturecoordinates(resolution, dtype=p.dtype)
    raise TypeError(f"No texture coordinates for {type(p).__name__}")


def normals(p: GeometryPrimitive, resolution=None, params: Optional[TessellationParams] = None) -> np.ndarray:
    """
    Unit normal per vertex of ``coordinates(p, resolution)``.

    Spheres and quads use their analytic normals. Other kinds average
    face normals with ``vertex_normals``; 2D kinds are lifted to z = 0
    first, so their normals are +-z. Vertices no face uses, such as the
    closing sample of a circle, get the zero vector.
    """
    kind, resolution = _resolve(p, resolution, params)

    if kind == "sphere":
        return sphere_normals(p, resolution)
    if kind == "quad":
        return quad_normals(p, resolution)

    points = coordinates(p, resolution)
    if p.ndim == 2:
        points = np.array(collect_with_eltype(PointType(3, p.dtype), points))
    return vertex_normals(points, faces(p, resolution))


def decompose(
    target: type,
    p: GeometryPrimitive,
    resolution=None,
    params: Optional[TessellationParams] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vertices and faces retargeted to a single face type.

    Parameters
    ----------
    target : type
        ``TriangleFace`` for a renderable triangle soup, ``LineFace`` for
        a wireframe (shared edges appear once per face).
    p : GeometryPrimitive
        Primitive to mesh
    resolution : int or tuple, optional
        Generator resolution

    Returns
    -------
    vertices : np.ndarray, shape (n, p.ndim)
    faces : np.ndarray, shape (m, target.N)

    Example
    -------
    >>> vertices, triangles = decompose(TriangleFace, Sphere((0, 0, 0), 1.0), 12)
    >>> triangles.shape
    (242, 3)
    """
    if getattr(target, "N", None) is None:
        raise ValueError(f"decompose needs a fixed-arity face type, got {target!r}")

    kind, resolution = _resolve(p, resolution, params)
    vertices = coordinates(p, resolution)
    retargeted = collect_with_eltype(target, faces(p, resolution))
    logger.debug(
        "Decomposed %s into %d vertices and %d %s",
        kind, len(vertices), len(retargeted), target.__name__,
    )
    return vertices, np.array(retargeted, dtype=np.int64).reshape(-1, target.N)
