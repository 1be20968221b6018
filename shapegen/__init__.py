"""shapegen - parametric triangle meshes for boxes and capsules.

Generates render-ready buffers (positions, normals, UVs and a triangle
index list) for an axis-aligned box and a capped cylindrical capsule.

Example:
    >>> from shapegen import build_box, build_capsule
    >>> box = build_box(width=2, height=1, depth=1, width_segments=4)
    >>> capsule = build_capsule(radius=0.5, length=2, radial_segments=16)
    >>> capsule.parameters.radial_segments
    16
    >>> from shapegen.io import save_mesh
    >>> save_mesh(capsule, "capsule.npz")
"""

from shapegen.exceptions import (
    DataLoadError,
    InvalidParameterError,
    MeshGenerationError,
    ShapegenError,
)
from shapegen.geometry import Profile, capsule_profile
from shapegen.mesh import (
    BoxParameters,
    CapsuleParameters,
    MeshData,
    build_box,
    build_capsule,
    lathe,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "build_box",
    "build_capsule",
    "lathe",
    "MeshData",
    "BoxParameters",
    "CapsuleParameters",
    "Profile",
    "capsule_profile",
    # Exceptions
    "ShapegenError",
    "InvalidParameterError",
    "MeshGenerationError",
    "DataLoadError",
]
