from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np

from rvizmesh_geom.core.mesh import TriangleMesh
from rvizmesh_geom.core.transform import RigidTransform
from rvizmesh_geom.gen.extrude import extrude_polygon


def box_footprint(width: float, length: float) -> np.ndarray:
    """Clockwise width x length rectangle centered on the origin."""
    w2, l2 = float(width) / 2, float(length) / 2
    return np.array(
        [
            [ w2,  l2],
            [ w2, -l2],
            [-w2, -l2],
            [-w2,  l2],
        ],
        dtype=np.float64,
    )


def circle_footprint(radius: float, segments: int = 12) -> np.ndarray:
    """
    Clockwise regular `segments`-gon inscribed in a circle of `radius`.

    Point k sits at angle ((segments - k) / segments) * 2pi + pi / segments,
    i.e. walked backwards and rotated half a segment.
    """
    segments = int(segments)
    if segments < 3:
        raise ValueError(f"Cylinder needs at least 3 segments, got {segments}")
    k = np.arange(segments, dtype=np.float64)
    angles = ((segments - k) / segments) * 2.0 * math.pi + math.pi / segments
    return np.stack([np.cos(angles) * radius, np.sin(angles) * radius], axis=1)


def bounding_box(
    width: float,
    height: float,
    length: float,
    transform: Optional[RigidTransform] = None,
) -> TriangleMesh:
    """Box with a width (x) by length (y) footprint, extruded by height (z)."""
    return extrude_polygon(box_footprint(width, length), height, transform)


def cylinder(
    radius: float,
    height: float,
    transform: Optional[RigidTransform] = None,
    segments: int = 12,
) -> TriangleMesh:
    return extrude_polygon(circle_footprint(radius, segments), height, transform)


def build_primitive(name: str, transform: Optional[RigidTransform] = None, **params: Any) -> TriangleMesh:
    """
    Build a primitive by name.

    Supported primitives:
      - "box":      width, height, length (default 1.0 each)
                    aliases: "bounding_box", "cube"
      - "cylinder": radius, height (default 1.0), segments (default 12)
      - "polygon":  points (Nx2, clockwise), height (default 1.0)
                    alias: "prism"
    """
    key = (name or "").lower().strip()

    if key in {"box", "bounding_box", "cube"}:
        return bounding_box(
            float(params.get("width", 1.0)),
            float(params.get("height", 1.0)),
            float(params.get("length", 1.0)),
            transform,
        )

    if key == "cylinder":
        return cylinder(
            float(params.get("radius", 1.0)),
            float(params.get("height", 1.0)),
            transform,
            segments=int(params.get("segments", 12)),
        )

    if key in {"polygon", "prism"}:
        if params.get("points") is None:
            raise ValueError("Primitive 'polygon' requires 'points'")
        return extrude_polygon(params["points"], float(params.get("height", 1.0)), transform)

    raise ValueError(f"Unsupported primitive '{name}'. Supported: box, cylinder, polygon.")
