from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from rvizmesh_geom.core.errors import NotClockwiseError, TooFewVerticesError
from rvizmesh_geom.core.mesh import TriangleMesh
from rvizmesh_geom.core.polygon import as_polygon2d
from rvizmesh_geom.core.transform import RigidTransform
from rvizmesh_geom.ops.vectors import face_normal
from rvizmesh_geom.ops.winding import is_clockwise

logger = logging.getLogger(__name__)


def _lift(pts: np.ndarray, z: float) -> np.ndarray:
    out = np.empty((pts.shape[0], 3), dtype=np.float64)
    out[:, :2] = pts
    out[:, 2] = z
    return out


def _repeat_rows(normals: np.ndarray, times: int) -> np.ndarray:
    return np.repeat(np.atleast_2d(normals), times, axis=0)


def extrude_polygon(
    polygon: Any,
    height: float,
    transform: Optional[RigidTransform] = None,
) -> TriangleMesh:
    """
    Extrude a clockwise 2D footprint into a closed prism centered on z=0.

    The footprint lives in the local XY plane; the prism spans
    z in [-height/2, +height/2] and is then mapped through `transform`.

    Output order (3 rows per triangle):
      - top cap:    fan (v0, v[i-1], v[i]) for i in [2, n)
      - side walls: per edge (i, j=i+1 mod n):
                    (top_i, bottom_i, bottom_j), (top_i, bottom_j, top_j)
      - bottom cap: fan (v0, v[i], v[i-1]) for i in [2, n)

    Normals:
      - top cap:    one normal from the first fan triangle, reused for all
      - side walls: one normal per edge quad, shared by its 6 vertices
      - bottom cap: negated top normal
    Normals are left unnormalized.

    Raises:
      TooFewVerticesError: fewer than 3 points
      NotClockwiseError:   footprint is not clockwise (see ops.winding)
    """
    pts = as_polygon2d(polygon)
    n = pts.shape[0]

    if n < 3:
        logger.debug("Refusing extrusion: polygon has %d points", n)
        raise TooFewVerticesError(n)
    if not is_clockwise(pts):
        logger.debug("Refusing extrusion: polygon with %d points is not clockwise", n)
        raise NotClockwiseError("Polygon is not clockwise")

    transform = transform or RigidTransform.identity()
    h2 = float(height) / 2

    top = transform.transform_points(_lift(pts, h2))
    bottom = transform.transform_points(_lift(pts, -h2))

    fan_prev = np.arange(1, n - 1)
    fan_next = np.arange(2, n)
    n_fan = n - 2

    # ---------- Top cap ----------
    top_tris = np.stack(
        [np.repeat(top[:1], n_fan, axis=0), top[fan_prev], top[fan_next]],
        axis=1,
    )
    top_normal = face_normal(top[0], top[1], top[2])

    # ---------- Side walls ----------
    i = np.arange(n)
    j = (i + 1) % n
    tri_a = np.stack([top[i], bottom[i], bottom[j]], axis=1)
    tri_b = np.stack([top[i], bottom[j], top[j]], axis=1)
    side_tris = np.stack([tri_a, tri_b], axis=1).reshape(-1, 3, 3)
    side_normals = face_normal(top[i], bottom[i], bottom[j])

    # ---------- Bottom cap ----------
    bottom_tris = np.stack(
        [np.repeat(bottom[:1], n_fan, axis=0), bottom[fan_next], bottom[fan_prev]],
        axis=1,
    )
    bottom_normal = -top_normal

    vertices = np.concatenate(
        [top_tris.reshape(-1, 3), side_tris.reshape(-1, 3), bottom_tris.reshape(-1, 3)],
        axis=0,
    )
    normals = np.concatenate(
        [
            _repeat_rows(top_normal, 3 * n_fan),
            np.repeat(side_normals, 6, axis=0),
            _repeat_rows(bottom_normal, 3 * n_fan),
        ],
        axis=0,
    )
    return TriangleMesh(vertices=vertices, normals=normals)
