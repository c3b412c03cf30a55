from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np


def _as_vector(v: Any, size: int, name: str) -> np.ndarray:
    arr = np.array(v, dtype=np.float64).reshape(-1)
    if arr.shape[0] != size:
        raise ValueError(f"{name} must have {size} components, got {arr.shape[0]}")
    return arr


@dataclass(frozen=True, eq=False)
class RigidTransform:
    """
    Translation + rotation, applied as translation * rotation.

    translation: (3,) float64
    rotation:    (4,) float64 unit quaternion, (x, y, z, w) order
    """
    translation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 0.0, 1.0]))

    def __post_init__(self):
        t = _as_vector(self.translation, 3, "translation")
        q = _as_vector(self.rotation, 4, "rotation")
        t.setflags(write=False)
        q.setflags(write=False)
        object.__setattr__(self, "translation", t)
        object.__setattr__(self, "rotation", q)

    @staticmethod
    def identity() -> "RigidTransform":
        return RigidTransform()

    @staticmethod
    def from_pose(position: Any, orientation: Any) -> "RigidTransform":
        """
        Build from middleware-style pose parts.

        position:    object with .x/.y/.z, or a 3-sequence
        orientation: object with .x/.y/.z/.w, or a 4-sequence (x, y, z, w)
        """
        if hasattr(position, "x"):
            position = (position.x, position.y, position.z)
        if hasattr(orientation, "w"):
            orientation = (orientation.x, orientation.y, orientation.z, orientation.w)
        return RigidTransform(translation=position, rotation=orientation)

    def rotation_matrix(self) -> np.ndarray:
        """3x3 rotation matrix of the quaternion part."""
        x, y, z, w = self.rotation
        return np.array([
            [1 - 2*(y**2 + z**2), 2*(x*y - z*w), 2*(x*z + y*w)],
            [2*(x*y + z*w), 1 - 2*(x**2 + z**2), 2*(y*z - x*w)],
            [2*(x*z - y*w), 2*(y*z + x*w), 1 - 2*(x**2 + y**2)],
        ])

    def as_matrix(self) -> np.ndarray:
        """4x4 homogeneous matrix (translation * rotation)."""
        m = np.eye(4)
        m[:3, :3] = self.rotation_matrix()
        m[:3, 3] = self.translation
        return m

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """Map (N,3) local points into the target frame."""
        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise ValueError("points must be a Nx3 array")
        v = np.ones((pts.shape[0], 4), dtype=np.float64)
        v[:, :3] = pts
        return (self.as_matrix() @ v.T).T[:, :3]

    def rotate_vector(self, vector: Any) -> np.ndarray:
        return self.rotation_matrix() @ _as_vector(vector, 3, "vector")
