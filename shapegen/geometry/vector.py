"""Vector3 helpers operating on single vectors or (n, 3) arrays."""

from __future__ import annotations

import numpy as np


def _as_vec3(v) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape[-1] != 3:
        raise ValueError(f"expected 3-component vectors, got shape {arr.shape}")
    return arr


def add(a, b) -> np.ndarray:
    """Component-wise sum of two vectors (or arrays of vectors)."""
    return _as_vec3(a) + _as_vec3(b)


def subtract(a, b) -> np.ndarray:
    """Component-wise difference ``a - b``."""
    return _as_vec3(a) - _as_vec3(b)


def cross(a, b) -> np.ndarray:
    """Right-handed cross product ``a x b``."""
    return np.cross(_as_vec3(a), _as_vec3(b))


def length(v) -> np.ndarray | float:
    """Euclidean length of a vector, or of each row of an (n, 3) array."""
    arr = _as_vec3(v)
    result = np.linalg.norm(arr, axis=-1)
    if arr.ndim == 1:
        return float(result)
    return result


def normalize(v, fallback=(0.0, 1.0, 0.0)) -> np.ndarray:
    """Scale vectors to unit length.

    Zero-length vectors cannot be normalized; they are replaced by
    ``fallback`` so the result never contains NaN.

    Args:
        v: A 3-vector or an (n, 3) array.
        fallback: Unit vector substituted for zero-length input, or an
            array shaped like ``v`` giving one substitute per vector.

    Returns:
        Array with the same shape as ``v``.
    """
    arr = _as_vec3(v)
    norms = np.linalg.norm(arr, axis=-1, keepdims=True)
    degenerate = norms[..., 0] == 0.0
    safe = np.where(norms == 0.0, 1.0, norms)
    result = arr / safe
    fallback = np.broadcast_to(np.asarray(fallback, dtype=float), arr.shape)
    result[degenerate] = fallback[degenerate]
    return result
