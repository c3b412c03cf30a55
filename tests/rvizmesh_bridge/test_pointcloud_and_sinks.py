import meshio
import numpy as np
import pytest
import trimesh

from rvizmesh_bridge.axes import mesh_to_engine, ros_to_engine
from rvizmesh_bridge.pointcloud import pointcloud_to_engine, pointcloud_xyz
from rvizmesh_bridge.sinks import ExportMeshSink
from rvizmesh_geom.gen.primitives import bounding_box


def test_pointcloud_structured():
    cloud = np.zeros(3, dtype=[("x", "f4"), ("y", "f4"), ("z", "f4"), ("intensity", "f4")])
    cloud["x"] = [1.0, np.nan, 3.0]
    cloud["y"] = [2.0, 0.0, 4.0]
    cloud["z"] = [5.0, 0.0, 6.0]
    out = pointcloud_to_engine(cloud)
    assert out.dtype == np.float32
    np.testing.assert_array_equal(out, [[1.0, 5.0, -2.0], [3.0, 6.0, -4.0]])


def test_pointcloud_plain_array():
    xyz = pointcloud_xyz(np.arange(8.0).reshape(2, 4))
    np.testing.assert_array_equal(xyz, [[0.0, 1.0, 2.0], [4.0, 5.0, 6.0]])


def test_pointcloud_errors():
    with pytest.raises(ValueError):
        pointcloud_xyz(np.zeros(2, dtype=[("x", "f4"), ("y", "f4")]))
    with pytest.raises(ValueError):
        pointcloud_xyz(np.zeros((4, 2)))


def test_axes_keep_outward_normals(identity):
    mesh = mesh_to_engine(bounding_box(2.0, 3.0, 4.0, identity))
    centroids = mesh.triangles().mean(axis=1)
    assert np.all(np.einsum("ij,ij->i", mesh.face_normals(), centroids) > 0)
    np.testing.assert_array_equal(ros_to_engine([0.0, 0.0, 1.0]), [0.0, 1.0, 0.0])


def test_export_sink_trimesh(tmp_path, identity):
    sink = ExportMeshSink(tmp_path, file_type="stl")
    sink.submit("ego/bbox", bounding_box(2.0, 4.0, 2.0, identity))
    path = sink.written["ego/bbox"]
    assert path == tmp_path.resolve() / "ego" / "bbox.stl"
    loaded = trimesh.load(str(path), force="mesh")
    assert len(loaded.faces) == 12


def test_export_sink_meshio(tmp_path, identity):
    sink = ExportMeshSink(tmp_path, file_type=".vtu")
    sink.submit("box", bounding_box(1.0, 1.0, 1.0, identity))
    mio = meshio.read(str(sink.path_for("box")))
    assert mio.cells_dict["triangle"].shape == (12, 3)
    assert mio.point_data["Normals"].shape == (36, 3)


def test_export_sink_rejects_escaping_keys(tmp_path, identity):
    sink = ExportMeshSink(tmp_path / "out", file_type="stl")
    with pytest.raises(ValueError):
        sink.submit("../x", bounding_box(1.0, 1.0, 1.0, identity))
    assert not (tmp_path / "x.stl").exists()
    assert sink.path_for("lanes/7") == (tmp_path / "out" / "lanes" / "7.stl").resolve()
