from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Protocol

from rvizmesh_geom.core.mesh import TriangleMesh
from rvizmesh_geom.core.transform import RigidTransform


@dataclass
class GeometryRequest:
    """
    One mesh to (re)build.

    key:       sink slot the mesh replaces (e.g. "ego/bbox", "lanelet/42")
    shape:     primitive name understood by rvizmesh_geom.gen.build_primitive
               ("polygon", "box", "cylinder")
    transform: pose of the shape in the target frame (identity if None)
    params:    shape parameters, e.g. {"points": ..., "height": 2.0}
    """
    key: str
    shape: str = "polygon"
    transform: Optional[RigidTransform] = None
    params: Dict[str, Any] = field(default_factory=dict)


class GeometrySource(Protocol):
    """Emits requests on its own cadence; poll() returns whatever is pending."""

    def poll(self) -> Iterable[GeometryRequest]: ...


class MeshSink(Protocol):
    """Accepts finished meshes; owns upload and buffering downstream."""

    def submit(self, key: str, mesh: TriangleMesh) -> None: ...
