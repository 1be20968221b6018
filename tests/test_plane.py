"""Tests for the grid plane builder."""

import numpy as np
import pytest

from shapegen.exceptions import InvalidParameterError
from shapegen.mesh.plane import FaceOrientation, build_plane, quad_triangles


def plus_z_face(grid_x=1, grid_y=1, offset_depth=2.0):
    return FaceOrientation(0, 1, 2, 1, -1, 2.0, 2.0, offset_depth, grid_x, grid_y)


class TestFaceOrientation:
    """Orientation validation."""

    def test_axes_must_be_permutation(self):
        with pytest.raises(InvalidParameterError):
            FaceOrientation(0, 0, 2, 1, 1, 1.0, 1.0, 1.0, 1, 1)

    def test_direction_signs(self):
        with pytest.raises(InvalidParameterError):
            FaceOrientation(0, 1, 2, 2, 1, 1.0, 1.0, 1.0, 1, 1)

    def test_grid_minimum(self):
        with pytest.raises(InvalidParameterError):
            FaceOrientation(0, 1, 2, 1, 1, 1.0, 1.0, 1.0, 0, 1)

    def test_fractional_grid_truncated(self):
        o = plus_z_face(grid_x=2.5, grid_y=1.9)
        assert (o.grid_x, o.grid_y) == (2, 1)
        assert isinstance(o.grid_x, int)
        patch = build_plane(o)
        assert len(patch.positions) == 6
        assert len(patch.indices) == 12
        np.testing.assert_allclose(patch.uvs[:3, 0], [0.0, 0.5, 1.0])

    def test_fractional_grid_below_one(self):
        with pytest.raises(InvalidParameterError) as excinfo:
            plus_z_face(grid_x=1, grid_y=0.5)
        assert excinfo.value.field == "grid_y"

    @pytest.mark.parametrize("grid_x", ["2", None, float("nan")])
    def test_grid_must_be_a_number(self, grid_x):
        with pytest.raises(InvalidParameterError):
            plus_z_face(grid_x=grid_x)

    def test_extent_must_be_finite(self):
        with pytest.raises(InvalidParameterError):
            FaceOrientation(0, 1, 2, 1, 1, float("inf"), 1.0, 1.0, 1, 1)

    def test_counts(self):
        o = plus_z_face(grid_x=3, grid_y=2)
        assert o.n_vertices == 12
        assert o.n_indices == 36

    def test_normal_sign(self):
        assert plus_z_face(offset_depth=2.0).normal_sign == 1
        assert plus_z_face(offset_depth=-2.0).normal_sign == -1
        assert plus_z_face(offset_depth=0.0).normal_sign == -1


class TestQuadTriangles:
    """Cell triangulation."""

    def test_single_cell(self):
        np.testing.assert_array_equal(
            quad_triangles([0], b_step=2, d_step=1), [0, 2, 1, 2, 3, 1]
        )

    def test_multiple_cells(self):
        result = quad_triangles([0, 5], b_step=1, d_step=10)
        np.testing.assert_array_equal(
            result, [0, 1, 10, 1, 11, 10, 5, 6, 15, 6, 16, 15]
        )


class TestBuildPlane:
    """Vertex layout of one patch."""

    def test_positions_row_major(self):
        patch = build_plane(plus_z_face())
        np.testing.assert_allclose(
            patch.positions,
            [[-1, 1, 1], [1, 1, 1], [-1, -1, 1], [1, -1, 1]],
        )

    def test_normals_constant(self):
        patch = build_plane(plus_z_face(grid_x=2, grid_y=3))
        np.testing.assert_array_equal(
            patch.normals, np.tile([0.0, 0.0, 1.0], (12, 1))
        )

    def test_negative_depth_flips_normal(self):
        patch = build_plane(plus_z_face(offset_depth=-2.0))
        assert np.all(patch.normals[:, 2] == -1.0)
        assert np.all(patch.positions[:, 2] == -1.0)

    def test_uvs(self):
        patch = build_plane(plus_z_face(grid_x=2, grid_y=1))
        np.testing.assert_allclose(
            patch.uvs,
            [[0, 1], [0.5, 1], [1, 1], [0, 0], [0.5, 0], [1, 0]],
        )

    def test_vertex_offset(self):
        base = build_plane(plus_z_face(grid_x=2, grid_y=2))
        shifted = build_plane(plus_z_face(grid_x=2, grid_y=2), vertex_offset=7)
        np.testing.assert_array_equal(shifted.indices, base.indices + 7)
        np.testing.assert_array_equal(shifted.positions, base.positions)

    def test_triangles_face_along_normal(self):
        patch = build_plane(plus_z_face(grid_x=3, grid_y=2))
        tris = patch.indices.reshape(-1, 3)
        p = patch.positions[tris]
        n = np.cross(p[:, 1] - p[:, 0], p[:, 2] - p[:, 0])
        assert np.all(n[:, 2] > 0)
