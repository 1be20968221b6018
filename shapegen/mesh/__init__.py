"""Mesh generation utilities."""

from shapegen.mesh.analysis import (
    edge_manifold_report,
    enclosed_volume,
    is_closed_manifold,
    surface_area,
    validate_mesh,
    weld_vertices,
)
from shapegen.mesh.box import box_face_orientations, build_box
from shapegen.mesh.capsule import build_capsule
from shapegen.mesh.data import MeshData, merge
from shapegen.mesh.lathe import lathe
from shapegen.mesh.parameters import BoxParameters, CapsuleParameters
from shapegen.mesh.plane import FaceOrientation, PlanePatch, build_plane

__all__ = [
    "MeshData",
    "merge",
    "BoxParameters",
    "CapsuleParameters",
    "FaceOrientation",
    "PlanePatch",
    "build_plane",
    "box_face_orientations",
    "build_box",
    "build_capsule",
    "lathe",
    "validate_mesh",
    "weld_vertices",
    "edge_manifold_report",
    "is_closed_manifold",
    "surface_area",
    "enclosed_volume",
]
