"""
Simplex conversion: retarget faces to lines or triangles, and points
to a fixed dimension.
"""

import logging
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from ..core.faces import NgonFace, LineFace, TriangleFace
from ..core.types import PointType

logger = logging.getLogger(__name__)

Target = Union[type, PointType]


def _triangulate(face: Sequence[int]) -> Tuple[TriangleFace, ...]:
    n = len(face)
    if n < 3:
        raise ValueError(f"Cannot triangulate a face with {n} vertices (need >= 3)")
    return tuple(
        TriangleFace((face[0], face[i - 1], face[i]))
        for i in range(2, n)
    )


def _edges(face: Sequence[int]) -> Tuple[LineFace, ...]:
    n = len(face)
    if n < 2:
        raise ValueError(f"Cannot extract edges from a face with {n} vertices (need >= 2)")
    edges = [LineFace((face[i], face[i + 1])) for i in range(n - 1)]
    # close the loop
    edges.append(LineFace((face[n - 1], face[0])))
    return tuple(edges)


def convert_simplex(target: Target, element) -> tuple:
    """
    Convert one element into a tuple of ``target`` elements.

    Parameters
    ----------
    target : type or PointType
        ``TriangleFace`` fan-triangulates from the first vertex
        (N-2 triangles), ``LineFace`` extracts the N edges of the closed
        polygon, other face types convert an element of matching arity.
        A ``PointType`` pads or truncates a point.
    element : sequence
        Face indices or point coordinates.

    Returns
    -------
    tuple
        Always a tuple, so one quad can become two triangles.

    Raises
    ------
    ValueError
        If the element has too few vertices for the target, or its arity
        cannot be converted to the target arity.
    """
    if isinstance(target, PointType):
        return (target(element),)

    if not (isinstance(target, type) and issubclass(target, NgonFace)):
        raise TypeError(f"Unsupported simplex target: {target!r}")

    if type(element) is target:
        return (element,)

    if isinstance(element, np.ndarray):
        element = element.tolist()

    n = len(element)
    if target.N is None or n == target.N:
        return (target(element),)
    if issubclass(target, TriangleFace):
        return _triangulate(element)
    if issubclass(target, LineFace):
        return _edges(element)

    raise ValueError(f"Cannot convert a {n}-vertex face to {target.__name__}")


def to_pointn(target: PointType, point) -> np.ndarray:
    """Convert a point to the dimension and dtype of ``target``."""
    return convert_simplex(target, point)[0]


def collect_with_eltype(target: Target, iterable: Iterable) -> List:
    """
    Collect elements into a flat list of ``target`` elements.

    Each element goes through ``convert_simplex`` and its results are
    appended in order, so the output keeps input order and the winding
    of every face. Nothing is deduplicated.

    Example
    -------
    >>> collect_with_eltype(TriangleFace, [QuadFace((0, 1, 2, 3))])
    [TriangleFace(0, 1, 2), TriangleFace(0, 2, 3)]
    """
    result = []
    for element in iterable:
        result.extend(convert_simplex(target, element))
    logger.debug("Collected %d elements of %s", len(result), target)
    return result
