import math
from types import SimpleNamespace

import numpy as np

from rvizmesh_bridge.trajectory import (
    TrajectoryPoint,
    triangle_strip_arrays,
    triangle_strip_with_velocity,
)


def test_strip_identity_orientation():
    pts = [TrajectoryPoint(position=(1.0, 2.0, 3.0), longitudinal_velocity_mps=4.0)]
    strip = triangle_strip_with_velocity(pts, width=2.0)
    assert len(strip) == 2
    (v0, left), (v1, right) = strip
    assert v0 == v1 == 4.0
    # left edge at middleware (1, 1, 3) -> engine (x, z, -y)
    np.testing.assert_allclose(left, [1.0, 3.0, -1.0])
    np.testing.assert_allclose(right, [1.0, 3.0, -3.0])


def test_strip_rotated_message_points():
    half = math.sqrt(0.5)
    msg_point = SimpleNamespace(
        pose=SimpleNamespace(
            position=SimpleNamespace(x=1.0, y=2.0, z=3.0),
            orientation=SimpleNamespace(x=0.0, y=0.0, z=half, w=half),
        ),
        longitudinal_velocity_mps=5.0,
    )
    velocities, positions = triangle_strip_arrays([msg_point, msg_point], width=2.0)
    assert velocities.shape == (4,)
    assert positions.shape == (4, 3)
    # yaw 90deg turns the left offset (0, -1, 0) into (1, 0, 0)
    np.testing.assert_allclose(positions[0], [2.0, 3.0, -2.0], atol=1e-12)
    np.testing.assert_allclose(positions[1], [0.0, 3.0, -2.0], atol=1e-12)
    np.testing.assert_array_equal(velocities, [5.0] * 4)


def test_empty_trajectory():
    assert triangle_strip_with_velocity([], width=1.0) == []
    velocities, positions = triangle_strip_arrays([], width=1.0)
    assert velocities.shape == (0,)
    assert positions.shape == (0, 3)
