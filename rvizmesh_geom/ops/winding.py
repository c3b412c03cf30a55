from __future__ import annotations

from typing import Any

import numpy as np

from rvizmesh_geom.core.polygon import as_polygon2d


def signed_area2(polygon: Any) -> float:
    """
    Twice the signed shoelace area, measured around the first vertex.

    Offsetting by vertex 0 keeps footprints far from the origin (map frame
    coordinates in the hundreds of km) numerically stable.
    Negative => clockwise.
    """
    pts = as_polygon2d(polygon)
    if pts.shape[0] == 0:
        return 0.0
    local = pts - pts[0]
    nxt = np.roll(local, -1, axis=0)
    return float(np.sum(local[:, 0] * nxt[:, 1] - local[:, 1] * nxt[:, 0]))


def is_clockwise(polygon: Any) -> bool:
    return signed_area2(polygon) < 0.0


def reverse_winding(polygon: Any) -> np.ndarray:
    """New polygon with the vertex order reversed."""
    return as_polygon2d(polygon)[::-1].copy()
