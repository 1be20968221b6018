"""Capsule mesh generation: two hemispheres joined by a cylinder."""

from __future__ import annotations

import logging

from shapegen.geometry.profile import capsule_profile
from shapegen.mesh.data import MeshData
from shapegen.mesh.lathe import lathe
from shapegen.mesh.parameters import CapsuleParameters

logger = logging.getLogger(__name__)


def build_capsule(params: CapsuleParameters | None = None, **kwargs) -> MeshData:
    """Generate a capsule mesh centred on the origin, axis along y.

    The cross-section from ``capsule_profile`` is revolved by ``lathe``.
    With ``length=0`` the result is a UV sphere of the given radius.

    Args:
        params: Capsule parameters. If None, ``kwargs`` are passed to
            CapsuleParameters.
        **kwargs: Parameter values used when ``params`` is None.

    Returns:
        MeshData with ``params.n_vertices`` vertices and ``params.n_indices``
        indices.

    Raises:
        InvalidParameterError: If the parameters are out of range.

    Example:
        >>> mesh = build_capsule(radius=0.5, length=2, cap_segments=8)
        >>> mesh.n_vertices
        162
    """
    if params is None:
        params = CapsuleParameters(**kwargs)
    elif kwargs:
        raise TypeError("pass either a CapsuleParameters object or keyword arguments")

    if params.radius == 0.0:
        logger.debug("Building zero-radius capsule: %r", params)

    profile = capsule_profile(params.radius, params.length, params.cap_segments)
    return lathe(profile, params.radial_segments, parameters=params, kind="capsule")
