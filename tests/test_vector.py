"""Tests for the Vector3 helpers."""

import numpy as np
import pytest

from shapegen.geometry import vector


class TestArithmetic:
    """add / subtract / cross / length."""

    def test_add_and_subtract(self):
        np.testing.assert_allclose(vector.add((1, 2, 3), (4, 5, 6)), [5, 7, 9])
        np.testing.assert_allclose(vector.subtract((4, 5, 6), (1, 2, 3)), [3, 3, 3])

    def test_cross_is_right_handed(self):
        np.testing.assert_allclose(vector.cross((1, 0, 0), (0, 1, 0)), [0, 0, 1])
        np.testing.assert_allclose(vector.cross((0, 1, 0), (1, 0, 0)), [0, 0, -1])

    def test_length_scalar_and_rows(self):
        assert vector.length((3, 4, 0)) == pytest.approx(5.0)
        np.testing.assert_allclose(
            vector.length(np.array([[3, 4, 0], [0, 0, 2]])), [5.0, 2.0]
        )

    def test_rejects_non_3d(self):
        with pytest.raises(ValueError):
            vector.add((1, 2), (3, 4))


class TestNormalize:
    """Normalization with zero-length fallback."""

    def test_unit_length(self):
        result = vector.normalize((0, 3, 4))
        np.testing.assert_allclose(result, [0, 0.6, 0.8])

    def test_zero_vector_uses_fallback(self):
        result = vector.normalize((0, 0, 0), fallback=(1, 0, 0))
        np.testing.assert_array_equal(result, [1, 0, 0])

    def test_per_row_fallback(self):
        v = np.array([[0.0, 0.0, 0.0], [2.0, 0.0, 0.0], [0.0, 0.0, 0.0]])
        fallback = np.array([[0, -1, 0], [0, 0, 0], [0, 1, 0]], dtype=float)
        result = vector.normalize(v, fallback=fallback)
        np.testing.assert_array_equal(result, [[0, -1, 0], [1, 0, 0], [0, 1, 0]])
        assert np.all(np.isfinite(result))
