"""Readers for saved mesh archives."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np

from shapegen.exceptions import DataLoadError, ShapegenError
from shapegen.mesh.box import build_box
from shapegen.mesh.capsule import build_capsule
from shapegen.mesh.data import MeshData
from shapegen.mesh.parameters import BoxParameters, CapsuleParameters

logger = logging.getLogger(__name__)

PARAMETER_TYPES = {
    "box": BoxParameters,
    "capsule": CapsuleParameters,
}

BUILDERS = {
    "box": build_box,
    "capsule": build_capsule,
}

REQUIRED_ARRAYS = ("positions", "normals", "uvs", "indices", "metadata")


def _read_archive(path: Path) -> tuple[dict, dict]:
    if not path.exists():
        raise DataLoadError(f"File not found: {path}")

    try:
        with np.load(path, allow_pickle=False) as data:
            missing = [name for name in REQUIRED_ARRAYS if name not in data.files]
            if missing:
                raise DataLoadError(
                    f"Missing arrays in mesh archive {path}: {', '.join(missing)}"
                )
            arrays = {name: data[name] for name in REQUIRED_ARRAYS[:-1]}
            metadata = json.loads(str(data["metadata"]))
    except DataLoadError:
        raise
    except Exception as e:
        raise DataLoadError(f"Failed to read mesh archive {path}: {e}") from e

    return arrays, metadata


def _parameters_from_metadata(metadata: dict, path: Path):
    kind = metadata.get("kind")
    raw = metadata.get("parameters")
    if raw is None:
        return None
    if kind not in PARAMETER_TYPES:
        raise DataLoadError(f"Unknown mesh kind {kind!r} in {path}")
    try:
        return PARAMETER_TYPES[kind].from_dict(raw)
    except ShapegenError as e:
        raise DataLoadError(f"Invalid parameters in {path}: {e}") from e


def load_mesh(path: str | Path) -> MeshData:
    """Load a mesh saved with save_mesh().

    Args:
        path: Path to the ``.npz`` archive.

    Returns:
        MeshData with the stored buffers and parameters.

    Raises:
        DataLoadError: If the file is missing, malformed or holds an invalid
            mesh.
    """
    path = Path(path)
    arrays, metadata = _read_archive(path)
    parameters = _parameters_from_metadata(metadata, path)

    try:
        mesh = MeshData(
            arrays["positions"],
            arrays["normals"],
            arrays["uvs"],
            arrays["indices"],
            parameters=parameters,
            kind=metadata.get("kind"),
        )
    except ShapegenError as e:
        raise DataLoadError(f"Invalid mesh data in {path}: {e}") from e

    logger.info("Loaded %r from %s", mesh, path)
    return mesh


def regenerate(path: str | Path) -> MeshData:
    """Rebuild a mesh from the parameters stored in a saved archive.

    Only the metadata is used; the stored buffers are ignored.

    Args:
        path: Path to the ``.npz`` archive.

    Returns:
        Freshly generated MeshData.

    Raises:
        DataLoadError: If the archive holds no generator parameters.
    """
    path = Path(path)
    _, metadata = _read_archive(path)
    parameters = _parameters_from_metadata(metadata, path)
    if parameters is None:
        raise DataLoadError(f"No generation parameters stored in {path}")
    return BUILDERS[metadata["kind"]](parameters)
