from __future__ import annotations

import numpy as np

from rvizmesh_geom.core.mesh import TriangleMesh

# Middleware frames are Z-up (x forward, y left); the engine is Y-up.
# (x, y, z) -> (x, z, -y) is a proper rotation, so triangle winding survives.
ROS_TO_ENGINE = np.array(
    [
        [1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.0, -1.0, 0.0],
    ],
    dtype=np.float64,
)


def ros_to_engine(points: np.ndarray) -> np.ndarray:
    """Map (N,3) or (3,) middleware-frame vectors into engine axes."""
    pts = np.asarray(points, dtype=np.float64)
    return pts @ ROS_TO_ENGINE.T


def mesh_to_engine(mesh: TriangleMesh) -> TriangleMesh:
    return TriangleMesh(
        vertices=ros_to_engine(mesh.vertices),
        normals=ros_to_engine(mesh.normals),
    )
