# rvizmesh_geom/gen/__init__.py
from .extrude import extrude_polygon
from .primitives import (
    box_footprint,
    circle_footprint,
    bounding_box,
    cylinder,
    build_primitive,
)

__all__ = [
    "extrude_polygon",
    "box_footprint",
    "circle_footprint",
    "bounding_box",
    "cylinder",
    "build_primitive",
]
