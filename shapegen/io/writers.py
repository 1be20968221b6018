"""Mesh export utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np

from shapegen.mesh.data import MeshData

logger = logging.getLogger(__name__)


def save_mesh(mesh: MeshData, path: str | Path) -> Path:
    """Save mesh buffers and generation parameters to a numpy ``.npz`` archive.

    The archive stores the four arrays unchanged plus a JSON ``metadata``
    entry holding the generator kind and the parameters exactly as given,
    so the mesh can be reloaded with load_mesh() or rebuilt with
    regenerate().

    Args:
        mesh: Mesh to save.
        path: Output file path (typically .npz extension).

    Returns:
        Path of the written file.

    Example:
        >>> from shapegen.io import save_mesh, load_mesh
        >>> save_mesh(build_box(), "output/box.npz")
        >>> # Later:
        >>> mesh = load_mesh("output/box.npz")
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    metadata = {
        "kind": mesh.kind,
        "parameters": (
            mesh.parameters.to_dict() if mesh.parameters is not None else None
        ),
    }

    with open(path, "wb") as f:
        np.savez(
            f,
            positions=mesh.positions,
            normals=mesh.normals,
            uvs=mesh.uvs,
            indices=mesh.indices,
            metadata=np.array(json.dumps(metadata)),
        )

    logger.info("Saved %r to %s", mesh, path)
    return path


def write_obj(mesh: MeshData, path: str | Path) -> Path:
    """Export mesh to Wavefront OBJ.

    Writes ``v``, ``vt`` and ``vn`` records followed by one ``f`` record per
    triangle using 1-based ``v/vt/vn`` triples.

    Args:
        mesh: Mesh to export.
        path: Output file path (typically .obj extension).

    Returns:
        Path of the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    faces = np.repeat(mesh.triangles.astype(np.int64) + 1, 3, axis=1)

    with open(path, "w", encoding="utf-8") as f:
        f.write(f"# shapegen {mesh.kind or 'mesh'}\n")
        np.savetxt(f, mesh.positions, fmt="v %.9g %.9g %.9g")
        np.savetxt(f, mesh.uvs, fmt="vt %.9g %.9g")
        np.savetxt(f, mesh.normals, fmt="vn %.9g %.9g %.9g")
        np.savetxt(f, faces, fmt="f %d/%d/%d %d/%d/%d %d/%d/%d")

    logger.info("Wrote %r to %s", mesh, path)
    return path
