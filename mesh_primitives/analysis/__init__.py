"""Queries over primitives."""

from .bounds import minimum, maximum, extrema, widths, origin, radius

__all__ = [
    "minimum",
    "maximum",
    "extrema",
    "widths",
    "origin",
    "radius",
]
