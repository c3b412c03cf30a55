from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from rvizmesh_geom.core.errors import GeometryError
from rvizmesh_geom.core.mesh import TriangleMesh
from rvizmesh_geom.gen.primitives import build_primitive
from rvizmesh_geom.ops.vectors import normalize_normals

from .axes import mesh_to_engine
from .config import BridgeConfig
from .interfaces import GeometryRequest, GeometrySource, MeshSink

logger = logging.getLogger(__name__)


@dataclass
class BridgeStats:
    submitted: int = 0
    dropped: int = 0
    failed: int = 0


class MeshBridge:
    """
    Pulls GeometryRequests from a source, builds meshes, pushes them to a sink.

    A refused request (GeometryError) is logged and skipped; the sink keeps
    whatever mesh it already had for that key.
    """
    def __init__(self, source: GeometrySource, sink: MeshSink, cfg: Optional[BridgeConfig] = None):
        self.source = source
        self.sink = sink
        self.cfg = cfg or BridgeConfig()
        self.stats = BridgeStats()
        if self.cfg.log_level is not None:
            logging.getLogger("rvizmesh_bridge").setLevel(self.cfg.log_level)

    def build_mesh(self, request: GeometryRequest) -> TriangleMesh:
        params = dict(request.params)
        if (request.shape or "").lower().strip() == "cylinder":
            params.setdefault("segments", self.cfg.cylinder_segments)

        mesh = build_primitive(request.shape, request.transform, **params)

        if self.cfg.normalize_normals:
            mesh = normalize_normals(mesh)
        if self.cfg.engine_axes:
            mesh = mesh_to_engine(mesh)
        return mesh

    def step(self) -> int:
        """
        Drain the source once. Returns the number of meshes submitted.

        Every request in the batch is attempted. Refusals (GeometryError) are
        dropped with a warning; any other failure is logged, counted, and the
        first one is re-raised after the rest of the batch has been submitted.
        """
        submitted = 0
        errors: List[Exception] = []
        for request in self.source.poll():
            try:
                mesh = self.build_mesh(request)
                self.sink.submit(request.key, mesh)
            except GeometryError as e:
                self.stats.dropped += 1
                logger.warning("Dropping mesh update for '%s': %s", request.key, e)
                continue
            except Exception as e:
                self.stats.failed += 1
                logger.error("Failed to build mesh for '%s': %s: %s", request.key, type(e).__name__, e)
                errors.append(e)
                continue
            submitted += 1
            self.stats.submitted += 1
            logger.debug("Submitted '%s' (%d triangles)", request.key, mesh.n_triangles)

        if errors:
            raise errors[0]
        return submitted
