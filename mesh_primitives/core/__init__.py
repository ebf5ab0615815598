"""Core data structures: point and face types, primitives, results."""

from .types import PointType, Point2, Point3, Point2f, Point3f
from .faces import NgonFace, LineFace, TriangleFace, QuadFace
from .primitives import (
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
from .result import OperationResult, OperationStatus, ErrorCode

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
    "OperationStatus",
    "ErrorCode",
]
