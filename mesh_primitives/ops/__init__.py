"""Mesh generation operations."""

from .simplex import convert_simplex, collect_with_eltype, to_pointn
from .normals import orthogonal_vector, vertex_normals
from .cylinder import height, direction, rotation, clamp_facets
from .sphere import contains
from .decompose import (
    primitive_kind,
    default_resolution,
    coordinates,
    faces,
    texturecoordinates,
    normals,
    decompose,
)

__all__ = [
    "convert_simplex",
    "collect_with_eltype",
    "to_pointn",
    "orthogonal_vector",
    "vertex_normals",
    "height",
    "direction",
    "rotation",
    "clamp_facets",
    "contains",
    "primitive_kind",
    "default_resolution",
    "coordinates",
    "faces",
    "texturecoordinates",
    "normals",
    "decompose",
]
