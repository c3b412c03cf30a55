from .errors import GeometryError, NotClockwiseError, TooFewVerticesError
from .mesh import TriangleMesh
from .polygon import as_polygon2d
from .transform import RigidTransform

__all__ = [
    "GeometryError",
    "NotClockwiseError",
    "TooFewVerticesError",
    "TriangleMesh",
    "as_polygon2d",
    "RigidTransform",
]
