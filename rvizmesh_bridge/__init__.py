# rvizmesh_bridge/__init__.py

"""
rvizmesh_bridge

Boundary glue between middleware messages and an engine mesh surface.

- GeometrySource / MeshSink protocols keep rvizmesh_geom engine-agnostic
- MeshBridge drains a source into a sink, keeping old meshes on refusals
- MessageLatch mirrors the subscriber "newest message + is_new" handshake
- Trajectory ribbons and point clouds are converted to engine axes
"""

from .config import BridgeConfig
from .interfaces import GeometryRequest, GeometrySource, MeshSink
from .bridge import MeshBridge, BridgeStats
from .latch import MessageLatch, LatchedGeometrySource
from .sinks import MemoryMeshSink, ExportMeshSink
from .axes import ros_to_engine, mesh_to_engine
from .trajectory import TrajectoryPoint, triangle_strip_arrays, triangle_strip_with_velocity
from .pointcloud import pointcloud_xyz, pointcloud_to_engine

__all__ = [
    "BridgeConfig",
    "GeometryRequest",
    "GeometrySource",
    "MeshSink",
    "MeshBridge",
    "BridgeStats",
    "MessageLatch",
    "LatchedGeometrySource",
    "MemoryMeshSink",
    "ExportMeshSink",
    "ros_to_engine",
    "mesh_to_engine",
    "TrajectoryPoint",
    "triangle_strip_arrays",
    "triangle_strip_with_velocity",
    "pointcloud_xyz",
    "pointcloud_to_engine",
]
