"""Geometric and topological checks for generated meshes."""

from __future__ import annotations

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components
from scipy.spatial import cKDTree

from shapegen.geometry import vector
from shapegen.mesh.data import MeshData


def validate_mesh(
    mesh: MeshData,
    normal_tolerance: float = 1e-5,
) -> tuple[bool, str]:
    """Validate the buffers of a mesh.

    Checks that:
    - Positions, normals and UVs contain no NaN or infinite values
    - Every normal has unit length (within tolerance)
    - Every UV component lies in [0, 1]
    - The index list is a whole number of in-range triangles

    Args:
        mesh: Mesh to check.
        normal_tolerance: Allowed deviation of normal length from 1.

    Returns:
        Tuple of (is_valid, message).
    """
    for name in ("positions", "normals", "uvs"):
        if np.any(~np.isfinite(getattr(mesh, name))):
            return False, f"{name} contain NaN or infinite values"

    if mesh.n_vertices:
        deviation = np.abs(vector.length(mesh.normals) - 1.0)
        bad = deviation > normal_tolerance
        if np.any(bad):
            return False, (
                f"{int(bad.sum())} normals are not unit length "
                f"(max deviation: {deviation.max():.2e})"
            )

        uv_bad = (mesh.uvs < 0.0) | (mesh.uvs > 1.0)
        if np.any(uv_bad):
            return False, f"{int(uv_bad.any(axis=1).sum())} UVs outside [0, 1]"

    if len(mesh.indices) % 3 != 0:
        return False, f"index count {len(mesh.indices)} is not a multiple of 3"
    if len(mesh.indices) and int(mesh.indices.max()) >= mesh.n_vertices:
        return False, "indices reference missing vertices"

    return True, "Mesh is valid"


def weld_vertices(positions: np.ndarray, tolerance: float = 1e-6) -> np.ndarray:
    """Label coincident vertices with a shared id.

    Vertices closer than ``tolerance`` (transitively) get the same label, so
    duplicated seam and face-edge vertices can be treated as one.

    Args:
        positions: Vertex positions, shape (n, 3).
        tolerance: Maximum distance between coincident vertices.

    Returns:
        Integer labels of shape (n,).
    """
    positions = np.asarray(positions, dtype=float)
    n = len(positions)
    if n == 0:
        return np.zeros(0, dtype=np.int64)

    pairs = cKDTree(positions).query_pairs(r=tolerance, output_type="ndarray")
    graph = coo_matrix(
        (np.ones(len(pairs)), (pairs[:, 0], pairs[:, 1])),
        shape=(n, n),
    )
    _, labels = connected_components(graph, directed=False)
    return labels.astype(np.int64)


def edge_manifold_report(mesh: MeshData, tolerance: float = 1e-6) -> dict:
    """Count edge defects after welding coincident vertices.

    Triangles that collapse to a line or point after welding (the pole fans
    of a lathe, the zero-length span of a sphere) are skipped.

    Args:
        mesh: Mesh to analyse.
        tolerance: Welding distance passed to weld_vertices.

    Returns:
        Dictionary with ``n_edges``, ``boundary_edges`` (used by one
        triangle), ``non_manifold_edges`` (used by more than two),
        ``inconsistent_edges`` (same direction used twice, i.e. flipped
        winding) and ``degenerate_triangles``.
    """
    labels = weld_vertices(mesh.positions, tolerance)
    tris = labels[mesh.triangles.astype(np.int64)]

    degenerate = (
        (tris[:, 0] == tris[:, 1])
        | (tris[:, 1] == tris[:, 2])
        | (tris[:, 2] == tris[:, 0])
    )
    tris = tris[~degenerate]

    directed = np.concatenate([tris[:, [0, 1]], tris[:, [1, 2]], tris[:, [2, 0]]])
    _, directed_counts = np.unique(directed, axis=0, return_counts=True)
    undirected = np.sort(directed, axis=1)
    _, counts = np.unique(undirected, axis=0, return_counts=True)

    return {
        "n_edges": int(len(counts)),
        "boundary_edges": int(np.sum(counts == 1)),
        "non_manifold_edges": int(np.sum(counts > 2)),
        "inconsistent_edges": int(np.sum(directed_counts > 1)),
        "degenerate_triangles": int(degenerate.sum()),
    }


def is_closed_manifold(mesh: MeshData, tolerance: float = 1e-6) -> bool:
    """Return True if every welded edge is shared by exactly two triangles
    with opposite directions."""
    if mesh.n_triangles == 0:
        return False
    report = edge_manifold_report(mesh, tolerance)
    return (
        report["n_edges"] > 0
        and report["boundary_edges"] == 0
        and report["non_manifold_edges"] == 0
        and report["inconsistent_edges"] == 0
    )


def face_normals(mesh: MeshData) -> np.ndarray:
    """Return unnormalized triangle normals (right-hand rule), shape (m, 3)."""
    p = mesh.positions.astype(float)[mesh.triangles.astype(np.int64)]
    return vector.cross(
        vector.subtract(p[:, 1], p[:, 0]),
        vector.subtract(p[:, 2], p[:, 0]),
    )


def surface_area(mesh: MeshData) -> float:
    """Return the total triangle area."""
    if mesh.n_triangles == 0:
        return 0.0
    return float(0.5 * vector.length(face_normals(mesh)).sum())


def enclosed_volume(mesh: MeshData) -> float:
    """Return the signed volume enclosed by the triangles.

    Positive for closed meshes with outward counter-clockwise winding.
    """
    if mesh.n_triangles == 0:
        return 0.0
    p = mesh.positions.astype(float)[mesh.triangles.astype(np.int64)]
    triple = np.einsum("ij,ij->i", p[:, 0], vector.cross(p[:, 1], p[:, 2]))
    return float(triple.sum() / 6.0)
