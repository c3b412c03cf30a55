from __future__ import annotations

import numpy as np

from rvizmesh_geom.core.mesh import TriangleMesh


def cross_product(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Right-handed cross product of two 3-vectors (or (N,3) stacks)."""
    return np.cross(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64))


def face_normal(p0: np.ndarray, p1: np.ndarray, p2: np.ndarray) -> np.ndarray:
    """
    Unnormalized normal of triangle (p0, p1, p2), as cross(p2 - p0, p1 - p0).

    Faces wound clockwise as seen from outside get an outward normal.
    """
    return cross_product(p2 - p0, p1 - p0)


def normalize_normals(mesh: TriangleMesh, eps: float = 1e-12) -> TriangleMesh:
    """
    Copy of `mesh` with unit-length normals.

    Extrusion output keeps raw cross-product magnitudes; consumers that need
    unit normals for lighting call this. Zero-length normals stay zero.
    """
    out = mesh.copy()
    lengths = np.linalg.norm(out.normals, axis=1, keepdims=True)
    np.divide(out.normals, lengths, out=out.normals, where=lengths > eps)
    return out
