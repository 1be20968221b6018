"""Axis-aligned box mesh generation."""

from __future__ import annotations

import logging

import numpy as np

from shapegen.mesh.data import MeshData, index_dtype
from shapegen.mesh.parameters import BoxParameters
from shapegen.mesh.plane import FaceOrientation, build_plane

logger = logging.getLogger(__name__)

FACE_NAMES = ("+x", "-x", "+y", "-y", "+z", "-z")


def box_face_orientations(params: BoxParameters) -> list[FaceOrientation]:
    """Return the six face placements of a box, ordered +x, -x, +y, -y, +z, -z.

    Args:
        params: Validated box parameters.

    Returns:
        List of six FaceOrientation objects.
    """
    w, h, d = params.width, params.height, params.depth
    ws, hs, ds = params.width_segments, params.height_segments, params.depth_segments
    return [
        FaceOrientation(2, 1, 0, -1, -1, d, h, w, ds, hs),
        FaceOrientation(2, 1, 0, 1, -1, d, h, -w, ds, hs),
        FaceOrientation(0, 2, 1, 1, 1, w, d, h, ws, ds),
        FaceOrientation(0, 2, 1, 1, -1, w, d, -h, ws, ds),
        FaceOrientation(0, 1, 2, 1, -1, w, h, d, ws, hs),
        FaceOrientation(0, 1, 2, -1, -1, w, h, -d, ws, hs),
    ]


def build_box(params: BoxParameters | None = None, **kwargs) -> MeshData:
    """Generate a box mesh centred on the origin.

    Each face is an independent grid patch, so vertices along the box edges
    are duplicated with the normal of their own face.

    Args:
        params: Box parameters. If None, ``kwargs`` are passed to
            BoxParameters.
        **kwargs: Parameter values used when ``params`` is None.

    Returns:
        MeshData with ``params.n_vertices`` vertices and ``params.n_indices``
        indices.

    Raises:
        InvalidParameterError: If the parameters are out of range.

    Example:
        >>> mesh = build_box(width=2, height=2, depth=2)
        >>> mesh.n_vertices, mesh.n_triangles
        (24, 12)
    """
    if params is None:
        params = BoxParameters(**kwargs)
    elif kwargs:
        raise TypeError("pass either a BoxParameters object or keyword arguments")

    if params.is_degenerate:
        logger.debug("Building zero-volume box: %r", params)

    n_vertices = params.n_vertices
    positions = np.empty((n_vertices, 3), dtype=np.float32)
    normals = np.empty((n_vertices, 3), dtype=np.float32)
    uvs = np.empty((n_vertices, 2), dtype=np.float32)
    indices = np.empty(params.n_indices, dtype=index_dtype(n_vertices))

    v_offset = 0
    i_offset = 0
    for orientation in box_face_orientations(params):
        patch = build_plane(orientation, vertex_offset=v_offset)
        n, k = orientation.n_vertices, orientation.n_indices
        positions[v_offset:v_offset + n] = patch.positions
        normals[v_offset:v_offset + n] = patch.normals
        uvs[v_offset:v_offset + n] = patch.uvs
        indices[i_offset:i_offset + k] = patch.indices
        v_offset += n
        i_offset += k

    mesh = MeshData(positions, normals, uvs, indices, parameters=params, kind="box")
    logger.debug(
        "Built box: %d vertices, %d triangles", mesh.n_vertices, mesh.n_triangles
    )
    return mesh
