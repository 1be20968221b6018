"""Subdivided rectangular patches, the building block of box faces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from shapegen.exceptions import InvalidParameterError
from shapegen.validation import check_real, validate_segments

AXES = (0, 1, 2)


@dataclass(frozen=True)
class FaceOrientation:
    """Placement of one grid patch in world space.

    The patch spans ``width`` along world axis ``u`` and ``height`` along
    world axis ``v``, and sits at ``depth / 2`` on axis ``w``. The direction
    signs flip the in-plane axes so that the fixed triangle winding faces
    outward; the sign of ``depth`` selects the normal direction.

    Attributes:
        u: World axis index (0=x, 1=y, 2=z) of the patch columns.
        v: World axis index of the patch rows.
        w: World axis index of the patch normal.
        u_dir: +1 or -1, direction of increasing column on ``u``.
        v_dir: +1 or -1, direction of increasing row on ``v``.
        width: Extent along ``u``.
        height: Extent along ``v``.
        depth: Signed extent along ``w``; the patch lies at ``depth / 2``.
        grid_x: Number of columns (>= 1, truncated toward zero).
        grid_y: Number of rows (>= 1, truncated toward zero).
    """

    u: int
    v: int
    w: int
    u_dir: int
    v_dir: int
    width: float
    height: float
    depth: float
    grid_x: int
    grid_y: int

    def __post_init__(self):
        if sorted((self.u, self.v, self.w)) != list(AXES):
            raise InvalidParameterError(
                "orientation",
                f"axes (u={self.u}, v={self.v}, w={self.w}) "
                f"must be a permutation of {AXES}",
            )
        for name in ("u_dir", "v_dir"):
            if getattr(self, name) not in (1, -1):
                raise InvalidParameterError(name, "must be +1 or -1")
        for name in ("width", "height", "depth"):
            check_real(name, getattr(self, name))
        # frozen, so the truncated counts are stored through object.__setattr__
        for name in ("grid_x", "grid_y"):
            object.__setattr__(
                self, name, validate_segments(name, getattr(self, name), 1)
            )

    @property
    def n_vertices(self) -> int:
        """Number of vertices in the patch."""
        return (self.grid_x + 1) * (self.grid_y + 1)

    @property
    def n_indices(self) -> int:
        """Number of triangle indices in the patch."""
        return 6 * self.grid_x * self.grid_y

    @property
    def normal_sign(self) -> int:
        """+1 if the patch normal points along +w, else -1."""
        return 1 if self.depth > 0 else -1


class PlanePatch(NamedTuple):
    """Vertex data of one patch, with indices already shifted by an offset."""

    positions: np.ndarray
    normals: np.ndarray
    uvs: np.ndarray
    indices: np.ndarray


def quad_triangles(corners: np.ndarray, b_step: int, d_step: int) -> np.ndarray:
    """Split grid cells into two counter-clockwise triangles each.

    Every cell is identified by its corner ``a``; the other corners are
    ``b = a + b_step``, ``d = a + d_step`` and ``c = a + b_step + d_step``.
    Triangles are emitted as ``(a, b, d)`` and ``(b, c, d)``.

    Args:
        corners: Flat array of ``a`` indices, one per cell.
        b_step: Index distance from ``a`` to ``b``.
        d_step: Index distance from ``a`` to ``d``.

    Returns:
        Flat index array of length ``6 * len(corners)``.
    """
    a = np.asarray(corners, dtype=np.int64)
    b = a + b_step
    c = a + b_step + d_step
    d = a + d_step
    return np.column_stack([a, b, d, b, c, d]).reshape(-1)


def build_plane(orientation: FaceOrientation, vertex_offset: int = 0) -> PlanePatch:
    """Build one subdivided rectangular patch.

    Vertices are laid out row-major: rows follow ``v``, columns follow ``u``,
    and vertex ``(ix, iy)`` has index ``vertex_offset + ix + (grid_x + 1) * iy``.
    UVs map to ``(ix / grid_x, 1 - iy / grid_y)``. All normals are equal and
    point along ``w`` with the sign of ``depth``.

    Args:
        orientation: Face placement and resolution.
        vertex_offset: Number of vertices already in the target buffer.

    Returns:
        PlanePatch with float64 vertex arrays and int64 indices.
    """
    o = orientation
    gx1 = o.grid_x + 1
    gy1 = o.grid_y + 1

    segment_width = o.width / o.grid_x
    segment_height = o.height / o.grid_y
    x = np.arange(gx1) * segment_width - o.width / 2
    y = np.arange(gy1) * segment_height - o.height / 2
    xx, yy = np.meshgrid(x, y)

    n = gx1 * gy1
    positions = np.empty((n, 3))
    positions[:, o.u] = xx.ravel() * o.u_dir
    positions[:, o.v] = yy.ravel() * o.v_dir
    positions[:, o.w] = o.depth / 2

    normals = np.zeros((n, 3))
    normals[:, o.w] = o.normal_sign

    ix, iy = np.meshgrid(np.arange(gx1), np.arange(gy1))
    uvs = np.column_stack([
        ix.ravel() / o.grid_x,
        1 - iy.ravel() / o.grid_y,
    ])

    cx, cy = np.meshgrid(np.arange(o.grid_x), np.arange(o.grid_y))
    corners = vertex_offset + cx.ravel() + gx1 * cy.ravel()
    indices = quad_triangles(corners, b_step=gx1, d_step=1)

    return PlanePatch(positions, normals, uvs, indices)
