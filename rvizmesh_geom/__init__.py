# rvizmesh_geom/__init__.py

"""
rvizmesh_geom

Footprint -> mesh geometry for the rvizmesh viewport bridge.

Scope:
- Winding classification of 2D footprints
- Extrusion of a clockwise footprint + pose + height into a triangle soup
- Box / cylinder factories that synthesize a footprint and extrude it

Design principles:
- Pure numpy, no engine or middleware imports
- Output is a flat (vertices, normals) pair, 3 rows per triangle, draw order
- Normals are raw cross products (not unit length); see ops.normalize_normals
"""

from .core.errors import GeometryError, NotClockwiseError, TooFewVerticesError
from .core.mesh import TriangleMesh
from .core.transform import RigidTransform
from .ops.winding import is_clockwise, reverse_winding
from .ops.vectors import normalize_normals
from .gen.extrude import extrude_polygon
from .gen.primitives import bounding_box, cylinder, build_primitive

__all__ = [
    "GeometryError",
    "NotClockwiseError",
    "TooFewVerticesError",
    "TriangleMesh",
    "RigidTransform",
    "is_clockwise",
    "reverse_winding",
    "normalize_normals",
    "extrude_polygon",
    "bounding_box",
    "cylinder",
    "build_primitive",
]
