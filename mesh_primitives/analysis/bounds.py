"""
Axis-aligned bounds and common accessors for primitives.
"""

from typing import Tuple

import numpy as np

from ..core.primitives import (
    GeometryPrimitive, HyperSphere, Cylinder, Rect, Quad, Pyramid, Particle,
)
from ..ops.cylinder import direction, cylinder2_coordinates
from ..ops.pyramid import pyramid_coordinates


def _corner_points(p: GeometryPrimitive) -> np.ndarray:
    if isinstance(p, Rect):
        return np.array([p.origin, p.origin + p.widths])
    if isinstance(p, Quad):
        return np.array([
            p.downleft,
            p.downleft + p.width,
            p.downleft + p.height,
            p.downleft + p.width + p.height,
        ])
    if isinstance(p, Pyramid):
        return pyramid_coordinates(p)
    if isinstance(p, Cylinder) and p.ndim == 2:
        return cylinder2_coordinates(p, (2, 2))
    if isinstance(p, Particle):
        return p.position[None, :]
    raise TypeError(f"No bounds for {type(p).__name__}")


def _cylinder3_bounds(c: Cylinder) -> Tuple[np.ndarray, np.ndarray]:
    # each end disc reaches r * sqrt(1 - d_i^2) along axis i
    d = direction(c)
    reach = c.r * np.sqrt(np.clip(1 - d * d, 0, 1))
    low = np.minimum(c.origin, c.extremity) - reach
    high = np.maximum(c.origin, c.extremity) + reach
    return low, high


def minimum(p: GeometryPrimitive) -> np.ndarray:
    """Lower corner of the axis-aligned bounding box."""
    if isinstance(p, HyperSphere):
        return p.center - p.r
    if isinstance(p, Cylinder) and p.ndim == 3:
        return _cylinder3_bounds(p)[0]
    return _corner_points(p).min(axis=0)


def maximum(p: GeometryPrimitive) -> np.ndarray:
    """Upper corner of the axis-aligned bounding box."""
    if isinstance(p, HyperSphere):
        return p.center + p.r
    if isinstance(p, Cylinder) and p.ndim == 3:
        return _cylinder3_bounds(p)[1]
    return _corner_points(p).max(axis=0)


def extrema(p: GeometryPrimitive) -> Tuple[np.ndarray, np.ndarray]:
    """``(minimum(p), maximum(p))``."""
    return minimum(p), maximum(p)


def widths(p: GeometryPrimitive) -> np.ndarray:
    """Extent of the bounding box along each axis."""
    if isinstance(p, HyperSphere):
        return np.full(p.ndim, 2 * p.r, dtype=p.dtype)
    low, high = extrema(p)
    return high - low


def origin(p: GeometryPrimitive) -> np.ndarray:
    """Anchor point of the primitive."""
    if isinstance(p, HyperSphere):
        return p.center
    if isinstance(p, (Cylinder, Rect)):
        return p.origin
    if isinstance(p, Quad):
        return p.downleft
    if isinstance(p, Pyramid):
        return p.middle
    if isinstance(p, Particle):
        return p.position
    raise TypeError(f"No origin for {type(p).__name__}")


def radius(p: GeometryPrimitive):
    """Radius of spheres and cylinders."""
    if isinstance(p, (HyperSphere, Cylinder)):
        return p.r
    raise TypeError(f"{type(p).__name__} has no radius")
