"""Bodies of revolution built by sweeping a profile around the y axis."""

from __future__ import annotations

import logging
import math

import numpy as np

from shapegen.geometry.profile import Profile
from shapegen.mesh.data import MeshData, index_dtype
from shapegen.mesh.plane import quad_triangles
from shapegen.validation import validate_segments

logger = logging.getLogger(__name__)

MIN_RADIAL_SEGMENTS = 3


def ring_angles(radial_segments: int) -> tuple[np.ndarray, np.ndarray]:
    """Return cos/sin of the ``radial_segments + 1`` revolution angles.

    The last ring closes the UV seam and reuses the first ring's angle
    exactly, so the seam vertices coincide bit for bit.
    """
    phi = np.arange(radial_segments + 1) / radial_segments * (2.0 * math.pi)
    cos_phi = np.cos(phi)
    sin_phi = np.sin(phi)
    cos_phi[-1] = cos_phi[0]
    sin_phi[-1] = sin_phi[0]
    return cos_phi, sin_phi


def lathe(
    profile: Profile,
    radial_segments: int,
    parameters=None,
    kind: str = "lathe",
) -> MeshData:
    """Revolve a profile around the y axis.

    Profile point ``(r, y)`` on ring ``j`` becomes vertex
    ``(r cos(phi), y, r sin(phi))`` with ``phi = 2 pi j / radial_segments``,
    at index ``j * n_points + i``. Normals are the profile normals revolved
    by the same angle. UVs are ``(j / radial_segments, 1 - i / (n_points - 1))``.

    Args:
        profile: Cross-section, ordered bottom to top.
        radial_segments: Number of sides (>= 3).
        parameters: Parameters to echo on the resulting mesh.
        kind: Generator name stored on the mesh.

    Returns:
        MeshData with ``(radial_segments + 1) * n_points`` vertices.

    Raises:
        InvalidParameterError: If radial_segments is not a finite number or
            is below 3 after truncation toward zero.
    """
    radial_segments = validate_segments(
        "radial_segments", radial_segments, MIN_RADIAL_SEGMENTS
    )

    n_points = profile.n_points
    n_rings = radial_segments + 1
    n_vertices = n_rings * n_points

    px, py = profile.coords[:, 0], profile.coords[:, 1]
    profile_normals = profile.normals()
    nx, ny = profile_normals[:, 0], profile_normals[:, 1]
    cos_phi, sin_phi = ring_angles(radial_segments)

    positions = np.empty((n_vertices, 3), dtype=np.float32)
    positions[:, 0] = np.outer(cos_phi, px).ravel()
    positions[:, 1] = np.tile(py, n_rings)
    positions[:, 2] = np.outer(sin_phi, px).ravel()

    normals = np.empty((n_vertices, 3), dtype=np.float32)
    normals[:, 0] = np.outer(cos_phi, nx).ravel()
    normals[:, 1] = np.tile(ny, n_rings)
    normals[:, 2] = np.outer(sin_phi, nx).ravel()

    uvs = np.empty((n_vertices, 2), dtype=np.float32)
    uvs[:, 0] = np.repeat(np.arange(n_rings) / radial_segments, n_points)
    uvs[:, 1] = np.tile(1 - np.arange(n_points) / (n_points - 1), n_rings)

    j, i = np.meshgrid(
        np.arange(radial_segments), np.arange(n_points - 1), indexing="ij"
    )
    corners = j.ravel() * n_points + i.ravel()
    indices = quad_triangles(corners, b_step=1, d_step=n_points).astype(
        index_dtype(n_vertices)
    )

    mesh = MeshData(
        positions, normals, uvs, indices, parameters=parameters, kind=kind
    )
    logger.debug(
        "Built %s: %d rings x %d profile points, %d triangles",
        kind,
        n_rings,
        n_points,
        mesh.n_triangles,
    )
    return mesh
