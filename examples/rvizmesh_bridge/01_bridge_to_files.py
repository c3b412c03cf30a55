import logging
import tempfile
from types import SimpleNamespace

from rvizmesh_geom import RigidTransform
from rvizmesh_bridge import (
    BridgeConfig,
    ExportMeshSink,
    GeometryRequest,
    LatchedGeometrySource,
    MeshBridge,
)

logging.basicConfig(level=logging.INFO)


def objects_to_requests(msg):
    # detected-objects message -> one box per object
    return [
        GeometryRequest(
            key=f"objects/{obj.id}",
            shape="box",
            transform=RigidTransform.from_pose(obj.pose.position, obj.pose.orientation),
            params={"width": obj.width, "height": obj.height, "length": obj.length},
        )
        for obj in msg.objects
    ]


source = LatchedGeometrySource()
latch = source.add("objects", objects_to_requests)

# a subscriber callback would do this from its own thread
latch.update(SimpleNamespace(objects=[
    SimpleNamespace(
        id=7,
        pose=SimpleNamespace(
            position=SimpleNamespace(x=5.0, y=1.0, z=0.8),
            orientation=SimpleNamespace(x=0.0, y=0.0, z=0.0, w=1.0),
        ),
        width=1.8, height=1.6, length=4.4,
    ),
]))

with tempfile.TemporaryDirectory() as td:
    sink = ExportMeshSink(td, file_type="ply")
    bridge = MeshBridge(source, sink, BridgeConfig(normalize_normals=True))
    print("submitted:", bridge.step())
    print("written:", sink.written)
