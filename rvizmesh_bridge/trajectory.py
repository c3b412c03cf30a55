from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple

import numpy as np

from rvizmesh_geom.core.transform import RigidTransform

from .axes import ros_to_engine


@dataclass
class TrajectoryPoint:
    """
    Planner trajectory sample.

    position:    (x, y, z) in the middleware frame
    orientation: (x, y, z, w) unit quaternion
    longitudinal_velocity_mps: speed along the path
    """
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    orientation: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    longitudinal_velocity_mps: float = 0.0


def _pose_of(point: Any) -> Tuple[RigidTransform, float]:
    # message-shaped points carry .pose.position / .pose.orientation
    pose = getattr(point, "pose", point)
    tf = RigidTransform.from_pose(pose.position, pose.orientation)
    return tf, float(point.longitudinal_velocity_mps)


def triangle_strip_arrays(points: Iterable[Any], width: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Ribbon of `width` along a trajectory, as a triangle strip.

    Each point contributes two strip vertices: the left edge (local y=-width/2)
    then the right edge (local y=+width/2), rotated by the point's orientation
    and offset by its position, in engine axes.

    Returns:
      velocities: (2N,) float64, the point's velocity repeated for both edges
      positions:  (2N,3) float64
    """
    half = float(width) / 2.0
    offsets = np.array([[0.0, -half, 0.0], [0.0, half, 0.0]])

    velocities: List[float] = []
    positions: List[np.ndarray] = []
    for p in points:
        tf, v = _pose_of(p)
        edges = (tf.rotation_matrix() @ offsets.T).T + tf.translation
        positions.append(ros_to_engine(edges))
        velocities.extend([v, v])

    if not positions:
        return np.zeros((0,)), np.zeros((0, 3))
    return np.asarray(velocities, dtype=np.float64), np.concatenate(positions, axis=0)


def triangle_strip_with_velocity(points: Iterable[Any], width: float) -> List[Tuple[float, np.ndarray]]:
    """Same as triangle_strip_arrays, as a list of (velocity, xyz) pairs."""
    velocities, positions = triangle_strip_arrays(points, width)
    return [(float(v), positions[i]) for i, v in enumerate(velocities)]
