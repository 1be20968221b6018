"""I/O utilities for saving, loading and exporting meshes."""

from shapegen.io.readers import load_mesh, regenerate
from shapegen.io.writers import save_mesh, write_obj

__all__ = [
    "load_mesh",
    "regenerate",
    "save_mesh",
    "write_obj",
]
