from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass
class TriangleMesh:
    """
    Unindexed triangle mesh (triangle soup), numpy-only.

    vertices: (3M,3) float64, one row per emitted vertex, draw order
    normals:  (3M,3) float64, one row per vertex, constant across a face

    Rows are grouped by 3 per triangle. Normals are NOT unit length; their
    magnitude follows the edge vectors they were computed from.
    """
    vertices: np.ndarray
    normals: np.ndarray

    def __post_init__(self):
        self.vertices = np.ascontiguousarray(self.vertices, dtype=np.float64).reshape(-1, 3)
        self.normals = np.ascontiguousarray(self.normals, dtype=np.float64).reshape(-1, 3)
        if self.vertices.shape != self.normals.shape:
            raise ValueError(
                f"vertices and normals must be parallel, got {self.vertices.shape} vs {self.normals.shape}"
            )
        if self.vertices.shape[0] % 3 != 0:
            raise ValueError("Vertex count must be a multiple of 3 (one triangle per group)")

    @staticmethod
    def empty() -> "TriangleMesh":
        return TriangleMesh(vertices=np.zeros((0, 3)), normals=np.zeros((0, 3)))

    @property
    def n_vertices(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def n_triangles(self) -> int:
        return self.n_vertices // 3

    def triangles(self) -> np.ndarray:
        """(M,3,3) view: triangle, corner, xyz."""
        return self.vertices.reshape(-1, 3, 3)

    def face_normals(self) -> np.ndarray:
        """(M,3) normal of each triangle (first corner's normal)."""
        return self.normals.reshape(-1, 3, 3)[:, 0, :]

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        if self.n_vertices == 0:
            raise ValueError("Empty mesh has no bounds")
        return self.vertices.min(axis=0), self.vertices.max(axis=0)

    def copy(self) -> "TriangleMesh":
        return TriangleMesh(vertices=self.vertices.copy(), normals=self.normals.copy())

    def to_trimesh(self):
        """
        Convert to trimesh.Trimesh (indexed, one vertex per corner, no merging).

        Per-vertex normals are passed through unchanged. trimesh derives face
        normals from counter-clockwise winding, while the engine treats
        clockwise as front, so tm.face_normals point against `normals`.
        """
        import trimesh

        faces = np.arange(self.n_vertices, dtype=np.int64).reshape(-1, 3)
        return trimesh.Trimesh(
            vertices=self.vertices.copy(),
            faces=faces,
            vertex_normals=self.normals.copy(),
            process=False,
        )
