"""
Per-vertex normals from a vertex and face soup.
"""

import logging
from typing import Iterable, Sequence

import numpy as np

logger = logging.getLogger(__name__)


def orthogonal_vector(v1: np.ndarray, v2: np.ndarray, v3: np.ndarray) -> np.ndarray:
    """The unnormalized normal of three vertices."""
    return np.cross(v2 - v1, v3 - v1)


def vertex_normals(
    vertices: np.ndarray,
    faces: Iterable[Sequence[int]],
) -> np.ndarray:
    """
    Compute per-vertex normals by averaging face normals.

    Every face contributes the unnormalized cross product of its first
    two edges to each vertex it references. Contributions are not weighted
    by angle or area, so large faces and vertices shared by many faces
    dominate the result. Accumulated normals are normalized at the end.

    Parameters
    ----------
    vertices : array-like, shape (M, 3)
        Vertex positions
    faces : iterable of index sequences
        0-based faces with at least 3 indices each. Faces are assumed
        planar, so only their first three vertices define the normal.

    Returns
    -------
    np.ndarray, shape (M, 3)
        Unit normals. Vertices not referenced by any face, or only by
        degenerate faces, get the zero vector.

    Raises
    ------
    ValueError
        If a face has fewer than 3 indices.
    """
    vertices = np.asarray(vertices)
    if not np.issubdtype(vertices.dtype, np.floating):
        vertices = vertices.astype(np.float64)
    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise ValueError(f"vertices must have shape (M, 3), got {vertices.shape}")

    result = np.zeros_like(vertices)
    for face in faces:
        if len(face) < 3:
            raise ValueError(f"Face {tuple(face)} has fewer than 3 vertices")
        idx = np.asarray(face, dtype=np.intp)
        v = vertices[idx]
        n = orthogonal_vector(v[0], v[1], v[2])
        # np.add.at so repeated indices in one face accumulate like a loop
        np.add.at(result, idx, n)

    lengths = np.linalg.norm(result, axis=1)
    isolated = lengths == 0
    if isolated.any():
        logger.debug("%d vertices have no normal contribution", int(isolated.sum()))
    result[~isolated] /= lengths[~isolated, None]
    return result
