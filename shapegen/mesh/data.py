"""Triangle mesh container shared by every builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import numpy as np

from shapegen.exceptions import MeshGenerationError

if TYPE_CHECKING:
    from shapegen.mesh.parameters import BoxParameters, CapsuleParameters

UINT16_VERTEX_LIMIT = 65536


def index_dtype(n_vertices: int) -> np.dtype:
    """Return the smallest unsigned index type able to address n_vertices."""
    if n_vertices <= UINT16_VERTEX_LIMIT:
        return np.dtype(np.uint16)
    return np.dtype(np.uint32)


class MeshData:
    """Indexed triangle mesh with per-vertex normals and texture coordinates.

    Arrays are stored in the formats a rendering pipeline consumes directly
    and are read-only once the mesh exists: float32 positions, normals and
    UVs, and a flat triangle list of uint16 or uint32 indices depending on
    the vertex count.

    Args:
        positions: Vertex positions, shape (n, 3).
        normals: Unit vertex normals, shape (n, 3).
        uvs: Texture coordinates, shape (n, 2).
        indices: Flat triangle list, length divisible by 3.
        parameters: Parameters the mesh was generated from, if any.
        kind: Short name of the generator ("box", "capsule", "lathe").

    Raises:
        MeshGenerationError: If the arrays do not form a valid mesh.
    """

    def __init__(
        self,
        positions: np.ndarray,
        normals: np.ndarray,
        uvs: np.ndarray,
        indices: np.ndarray,
        parameters: BoxParameters | CapsuleParameters | None = None,
        kind: str | None = None,
    ):
        positions = np.array(positions, dtype=np.float32).reshape(-1, 3)
        normals = np.array(normals, dtype=np.float32).reshape(-1, 3)
        uvs = np.array(uvs, dtype=np.float32).reshape(-1, 2)
        indices = np.array(indices).reshape(-1)

        n = len(positions)
        if len(normals) != n:
            raise MeshGenerationError(
                f"normals length ({len(normals)}) must match "
                f"number of vertices ({n})"
            )
        if len(uvs) != n:
            raise MeshGenerationError(
                f"uvs length ({len(uvs)}) must match number of vertices ({n})"
            )
        if len(indices) % 3 != 0:
            raise MeshGenerationError(
                f"index count ({len(indices)}) is not a multiple of 3"
            )
        if len(indices):
            if not np.issubdtype(indices.dtype, np.integer):
                raise MeshGenerationError(
                    f"indices must be integers, got {indices.dtype}"
                )
            if indices.min() < 0 or indices.max() >= n:
                raise MeshGenerationError(
                    f"indices out of range [0, {n}): "
                    f"min={indices.min()}, max={indices.max()}"
                )
        indices = indices.astype(index_dtype(n), copy=False)

        for arr in (positions, normals, uvs, indices):
            arr.setflags(write=False)

        self._positions = positions
        self._normals = normals
        self._uvs = uvs
        self._indices = indices
        self._parameters = parameters
        self._kind = kind

    @property
    def positions(self) -> np.ndarray:
        """Vertex positions, shape (n, 3), float32."""
        return self._positions

    @property
    def normals(self) -> np.ndarray:
        """Vertex normals, shape (n, 3), float32."""
        return self._normals

    @property
    def uvs(self) -> np.ndarray:
        """Texture coordinates, shape (n, 2), float32."""
        return self._uvs

    @property
    def indices(self) -> np.ndarray:
        """Flat counter-clockwise triangle list."""
        return self._indices

    @property
    def triangles(self) -> np.ndarray:
        """Indices viewed as shape (n_triangles, 3)."""
        return self._indices.reshape(-1, 3)

    @property
    def parameters(self) -> BoxParameters | CapsuleParameters | None:
        """Parameters the mesh was generated from."""
        return self._parameters

    @property
    def kind(self) -> str | None:
        """Name of the generator that produced the mesh."""
        return self._kind

    @property
    def n_vertices(self) -> int:
        """Number of vertices."""
        return len(self._positions)

    @property
    def n_triangles(self) -> int:
        """Number of triangles."""
        return len(self._indices) // 3

    @property
    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Return axis-aligned bounds as (min_xyz, max_xyz)."""
        if self.n_vertices == 0:
            zero = np.zeros(3, dtype=np.float32)
            return zero, zero.copy()
        return self._positions.min(axis=0), self._positions.max(axis=0)

    def copy(self) -> MeshData:
        """Return an independent copy of the mesh."""
        return MeshData(
            self._positions.copy(),
            self._normals.copy(),
            self._uvs.copy(),
            self._indices.copy(),
            parameters=self._parameters,
            kind=self._kind,
        )

    def get_mesh_info(self) -> dict:
        """Return information about the mesh.

        Returns:
            Dictionary with counts, bounds and generation parameters.
        """
        lo, hi = self.bounds
        return {
            "kind": self._kind,
            "n_vertices": self.n_vertices,
            "n_triangles": self.n_triangles,
            "index_dtype": str(self._indices.dtype),
            "bounds_min": lo.tolist(),
            "bounds_max": hi.tolist(),
            "parameters": (
                self._parameters.to_dict() if self._parameters is not None else None
            ),
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, MeshData):
            return NotImplemented
        return (
            self._kind == other._kind
            and self._parameters == other._parameters
            and self._indices.dtype == other._indices.dtype
            and np.array_equal(self._positions, other._positions)
            and np.array_equal(self._normals, other._normals)
            and np.array_equal(self._uvs, other._uvs)
            and np.array_equal(self._indices, other._indices)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"MeshData(kind={self._kind!r}, n_vertices={self.n_vertices}, "
            f"n_triangles={self.n_triangles})"
        )


def merge(
    meshes: Iterable[MeshData],
    parameters: BoxParameters | CapsuleParameters | None = None,
    kind: str | None = None,
) -> MeshData:
    """Concatenate meshes into one, re-basing each mesh's indices.

    Args:
        meshes: Meshes to join, in order.
        parameters: Parameters to attach to the merged mesh.
        kind: Generator name to attach to the merged mesh.

    Returns:
        New MeshData holding all vertices and triangles.
    """
    meshes = list(meshes)
    n_total = sum(m.n_vertices for m in meshes)

    positions = np.empty((n_total, 3), dtype=np.float32)
    normals = np.empty((n_total, 3), dtype=np.float32)
    uvs = np.empty((n_total, 2), dtype=np.float32)
    indices = np.empty(sum(len(m.indices) for m in meshes), dtype=index_dtype(n_total))

    v_offset = 0
    i_offset = 0
    for mesh in meshes:
        n, k = mesh.n_vertices, len(mesh.indices)
        positions[v_offset:v_offset + n] = mesh.positions
        normals[v_offset:v_offset + n] = mesh.normals
        uvs[v_offset:v_offset + n] = mesh.uvs
        indices[i_offset:i_offset + k] = mesh.indices.astype(np.int64) + v_offset
        v_offset += n
        i_offset += k

    return MeshData(positions, normals, uvs, indices, parameters=parameters, kind=kind)
