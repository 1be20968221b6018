"""Tests for box mesh generation."""

import numpy as np
import pytest

from shapegen import BoxParameters, InvalidParameterError, build_box
from shapegen.mesh import (
    box_face_orientations,
    enclosed_volume,
    is_closed_manifold,
    surface_area,
    validate_mesh,
)
from shapegen.mesh.analysis import face_normals


class TestCounts:
    """Vertex and index counts follow the segment counts."""

    @pytest.mark.parametrize(
        "segments",
        [(1, 1, 1), (2, 3, 4), (5, 1, 2), (2.7, 3.2, 1.99)],
    )
    def test_counts_match_formula(self, segments):
        w, h, d = (int(s) for s in segments)
        mesh = build_box(
            width_segments=segments[0],
            height_segments=segments[1],
            depth_segments=segments[2],
        )
        expected_vertices = 2 * ((w + 1) * (h + 1) + (h + 1) * (d + 1) + (d + 1) * (w + 1))
        assert mesh.n_vertices == expected_vertices
        assert len(mesh.indices) == 12 * (w * h + h * d + d * w)

    def test_cube(self, cube):
        assert mesh_shape(cube) == (24, 36)
        assert cube.indices.dtype == np.uint16


def mesh_shape(mesh):
    return mesh.n_vertices, len(mesh.indices)


class TestFaces:
    """Face placement, normals and winding."""

    def test_face_order(self):
        orientations = box_face_orientations(BoxParameters())
        axes = [(o.w, o.normal_sign) for o in orientations]
        assert axes == [(0, 1), (0, -1), (1, 1), (1, -1), (2, 1), (2, -1)]

    def test_plus_x_face_first(self, subdivided_box):
        n = (4 + 1) * (3 + 1)
        np.testing.assert_allclose(subdivided_box.positions[:n, 0], 1.0)
        np.testing.assert_array_equal(
            subdivided_box.normals[:n], np.tile([1, 0, 0], (n, 1))
        )

    def test_bounds(self, subdivided_box):
        lo, hi = subdivided_box.bounds
        np.testing.assert_allclose(lo, [-1.0, -1.5, -2.0])
        np.testing.assert_allclose(hi, [1.0, 1.5, 2.0])

    def test_vertices_lie_on_surface(self, subdivided_box):
        half = np.array([1.0, 1.5, 2.0])
        on_face = np.isclose(np.abs(subdivided_box.positions), half, atol=1e-6)
        assert np.all(on_face.any(axis=1))

    def test_winding_matches_vertex_normals(self, subdivided_box):
        n = face_normals(subdivided_box)
        n /= np.linalg.norm(n, axis=1, keepdims=True)
        corner_normals = subdivided_box.normals[subdivided_box.triangles[:, 0]]
        np.testing.assert_allclose(np.sum(n * corner_normals, axis=1), 1.0, atol=1e-5)

    def test_closed_manifold(self, cube, subdivided_box):
        assert is_closed_manifold(cube)
        assert is_closed_manifold(subdivided_box)

    def test_volume_and_area(self, subdivided_box):
        assert enclosed_volume(subdivided_box) == pytest.approx(24.0, rel=1e-5)
        assert surface_area(subdivided_box) == pytest.approx(52.0, rel=1e-5)


class TestBuffers:
    """Buffer contract."""

    def test_valid(self, cube, subdivided_box):
        for mesh in (cube, subdivided_box):
            is_valid, message = validate_mesh(mesh)
            assert is_valid, message

    def test_uv_corners_of_first_face(self, cube):
        np.testing.assert_array_equal(cube.uvs[0], [0.0, 1.0])
        np.testing.assert_array_equal(cube.uvs[3], [1.0, 0.0])

    def test_parameters_echoed(self):
        params = BoxParameters(width=3, width_segments=2.5)
        mesh = build_box(params)
        assert mesh.parameters is params
        assert mesh.parameters.to_dict()["width_segments"] == 2.5
        assert mesh.kind == "box"

    def test_deterministic(self):
        a = build_box(width=1.3, height=0.7, depth=2.1, width_segments=3)
        b = build_box(width=1.3, height=0.7, depth=2.1, width_segments=3)
        assert a == b
        assert a.positions.tobytes() == b.positions.tobytes()


class TestDegenerate:
    """Zero extents give a collapsed but valid mesh."""

    def test_zero_width(self):
        mesh = build_box(width=0.0, height=1.0, depth=1.0)
        is_valid, message = validate_mesh(mesh)
        assert is_valid, message
        assert enclosed_volume(mesh) == pytest.approx(0.0, abs=1e-9)

    def test_all_zero(self):
        mesh = build_box(width=0, height=0, depth=0, width_segments=2)
        assert np.all(mesh.positions == 0.0)
        assert validate_mesh(mesh)[0]


class TestErrors:
    """Invalid input never yields a mesh."""

    def test_negative_size(self):
        with pytest.raises(InvalidParameterError):
            build_box(height=-1)

    def test_zero_segments(self):
        with pytest.raises(InvalidParameterError):
            build_box(depth_segments=0)

    def test_params_and_kwargs_conflict(self):
        with pytest.raises(TypeError):
            build_box(BoxParameters(), width=2)
