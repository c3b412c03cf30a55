from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Dict, Optional, Union

import numpy as np

from rvizmesh_geom.core.mesh import TriangleMesh

logger = logging.getLogger(__name__)

TRIMESH_TYPES = ("stl", "ply", "obj", "glb", "off")


class MemoryMeshSink:
    """Keeps the newest mesh per key. Useful for tests and headless runs."""

    def __init__(self):
        self.meshes: Dict[str, TriangleMesh] = {}
        self.updates: Counter = Counter()

    def submit(self, key: str, mesh: TriangleMesh) -> None:
        self.meshes[key] = mesh
        self.updates[key] += 1

    def get(self, key: str) -> Optional[TriangleMesh]:
        return self.meshes.get(key)


class ExportMeshSink:
    """
    Writes each submitted mesh to `<directory>/<key>.<file_type>`.

    STL/PLY/OBJ/GLB/OFF go through trimesh; anything else (vtk, vtu, ...)
    through meshio, with normals stored as point data "Normals".
    Slashes in keys become nested directories.
    """
    def __init__(self, directory: Union[str, Path], file_type: str = "ply"):
        self.directory = Path(directory).expanduser().resolve()
        self.file_type = file_type.lower().lstrip(".")
        self.written: Dict[str, Path] = {}

    def path_for(self, key: str) -> Path:
        path = (self.directory / f"{key}.{self.file_type}").resolve()
        if self.directory not in path.parents:
            raise ValueError(f"Mesh key '{key}' resolves outside {self.directory}")
        return path

    def submit(self, key: str, mesh: TriangleMesh) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)

        if self.file_type in TRIMESH_TYPES:
            mesh.to_trimesh().export(str(path), file_type=self.file_type)
        else:
            import meshio

            faces = np.arange(mesh.n_vertices, dtype=np.int64).reshape(-1, 3)
            mio = meshio.Mesh(
                points=mesh.vertices,
                cells=[("triangle", faces)],
                point_data={"Normals": mesh.normals},
            )
            meshio.write(str(path), mio)

        self.written[key] = path
        logger.debug("Wrote %s (%d triangles)", path, mesh.n_triangles)
