"""
Adapter for converting primitives to trimesh.Trimesh.
"""

import logging
from typing import Optional

import numpy as np
import trimesh

from ..core.faces import TriangleFace
from ..core.primitives import GeometryPrimitive
from ..core.result import OperationResult, OperationStatus, ErrorCode
from ..core.types import PointType
from ..ops.decompose import decompose, faces, primitive_kind
from ..ops.simplex import collect_with_eltype
from ..params.presets import TessellationParams

logger = logging.getLogger(__name__)

# triangles at or below this area count as collapsed (sphere poles)
DEGENERATE_AREA = 1e-18


def to_trimesh(
    primitive: GeometryPrimitive,
    resolution=None,
    params: Optional[TessellationParams] = None,
    process: bool = False,
) -> OperationResult:
    """
    Convert a primitive to trimesh.Trimesh.

    Faces are triangulated and 2D primitives are lifted to z = 0.

    Parameters
    ----------
    primitive : GeometryPrimitive
        The primitive to mesh
    resolution : int or tuple, optional
        Generator resolution, preset default when omitted
    params : TessellationParams, optional
        Source of default resolutions
    process : bool
        Passed to trimesh; True merges duplicate vertices, which changes
        the vertex order relative to ``coordinates``

    Returns
    -------
    OperationResult
        Result with mesh in metadata['mesh']. PARTIAL_SUCCESS when the
        mesh contains zero-area triangles.
    """
    try:
        kind = primitive_kind(primitive)
    except TypeError as e:
        return OperationResult.from_exception(e, ErrorCode.UNSUPPORTED_PRIMITIVE)

    # topology depends on the resolution only, so this isolates resolution errors
    try:
        faces(primitive, resolution, params)
    except ValueError as e:
        return OperationResult.from_exception(e, ErrorCode.INVALID_RESOLUTION)

    try:
        vertices, triangles = decompose(TriangleFace, primitive, resolution, params)
    except ValueError as e:
        return OperationResult.from_exception(e, ErrorCode.DEGENERATE_GEOMETRY)

    if primitive.ndim == 2:
        vertices = np.array(collect_with_eltype(PointType(3, primitive.dtype), vertices))

    try:
        mesh = trimesh.Trimesh(vertices=vertices, faces=triangles, process=process)
    except Exception as e:
        return OperationResult.from_exception(e, ErrorCode.MESH_EXPORT_FAILED)

    result = OperationResult.success(
        f"{kind} mesh: {len(mesh.vertices)} vertices, {len(mesh.faces)} faces",
        metadata={
            'mesh': mesh,
            'kind': kind,
            'num_vertices': int(len(mesh.vertices)),
            'num_faces': int(len(mesh.faces)),
            'is_watertight': bool(mesh.is_watertight),
        },
    )

    degenerate = int(np.sum(mesh.area_faces <= DEGENERATE_AREA))
    if degenerate:
        result.status = OperationStatus.PARTIAL_SUCCESS
        result.add_warning(f"{degenerate} degenerate faces (zero area)")
        logger.debug("%s mesh has %d degenerate faces", kind, degenerate)

    return result
