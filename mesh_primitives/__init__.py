"""
Mesh Primitives - polygonal meshes for analytic shapes

Turns parametric primitives (circles, spheres, cylinders, rectangles,
quads, pyramids) into vertex, texture-coordinate, face and normal
buffers as numpy arrays.

Key Features:
- Immutable primitives with a single floating dtype per shape
- Resolution-controlled generators with named presets
- Face retargeting (n-gons to triangles or edges) that keeps winding
- Per-vertex normals from any triangle or polygon soup
- trimesh adapter for analysis and export

Example Usage:
    from mesh_primitives import Cylinder3, TriangleFace, decompose, vertex_normals

    cyl = Cylinder3(origin=(0, 0, 0), extremity=(0, 0, 2), r=0.5)
    vertices, triangles = decompose(TriangleFace, cyl, 16)
    normals = vertex_normals(vertices, triangles)
"""

__version__ = "1.0.0"

from .core.types import PointType, Point2, Point3, Point2f, Point3f
from .core.faces import NgonFace, LineFace, TriangleFace, QuadFace
from .core.primitives import (
    GeometryPrimitive,
    HyperSphere,
    Circle,
    Sphere,
    Cylinder,
    Cylinder2,
    Cylinder3,
    Rect,
    Quad,
    Pyramid,
    Particle,
    primitive_from_dict,
)
from .core.result import OperationResult, ErrorCode

from .ops.simplex import convert_simplex, collect_with_eltype, to_pointn
from .ops.normals import orthogonal_vector, vertex_normals
from .ops.cylinder import height, direction, rotation
from .ops.sphere import contains
from .ops.decompose import (
    coordinates,
    faces,
    texturecoordinates,
    normals,
    decompose,
)

from .analysis.bounds import minimum, maximum, extrema, widths, origin, radius

from .params import TessellationParams, get_preset, list_presets

from .logging_config import setup_logging

__all__ = [
    "PointType",
    "Point2",
    "Point3",
    "Point2f",
    "Point3f",
    "NgonFace",
    "LineFace",
    "TriangleFace",
    "QuadFace",
    "GeometryPrimitive",
    "HyperSphere",
    "Circle",
    "Sphere",
    "Cylinder",
    "Cylinder2",
    "Cylinder3",
    "Rect",
    "Quad",
    "Pyramid",
    "Particle",
    "primitive_from_dict",
    "OperationResult",
    "ErrorCode",
    "convert_simplex",
    "collect_with_eltype",
    "to_pointn",
    "orthogonal_vector",
    "vertex_normals",
    "height",
    "direction",
    "rotation",
    "contains",
    "coordinates",
    "faces",
    "texturecoordinates",
    "normals",
    "decompose",
    "minimum",
    "maximum",
    "extrema",
    "widths",
    "origin",
    "radius",
    "TessellationParams",
    "get_preset",
    "list_presets",
    "setup_logging",
]
