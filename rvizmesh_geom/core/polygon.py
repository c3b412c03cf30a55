from __future__ import annotations

from typing import Any

import numpy as np


def as_polygon2d(polygon: Any) -> np.ndarray:
    """
    Coerce a footprint into a (N,2) float64 array.

    Accepts:
      - (N,2) array-like
      - sequence of point objects with .x/.y (extra .z ignored)
      - polygon message with a .points attribute holding such objects
    """
    if hasattr(polygon, "points"):
        polygon = polygon.points

    if isinstance(polygon, np.ndarray):
        pts = np.array(polygon, dtype=np.float64)
    else:
        items = list(polygon)
        if items and hasattr(items[0], "x"):
            pts = np.array([(p.x, p.y) for p in items], dtype=np.float64)
        else:
            pts = np.array(items, dtype=np.float64)

    if pts.size == 0:
        return np.zeros((0, 2), dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"Polygon must be a Nx2 array, got shape {pts.shape}")
    return pts
