import numpy as np

from rvizmesh_geom import (
    RigidTransform,
    NotClockwiseError,
    extrude_polygon,
    bounding_box,
    cylinder,
    is_clockwise,
    reverse_winding,
)

# lane-marking style footprint, counter-clockwise as authored
footprint = np.array([[0.0, 0.0], [4.0, 0.0], [4.0, 0.3], [0.0, 0.3]])
print("clockwise:", is_clockwise(footprint))

try:
    extrude_polygon(footprint, 0.05)
except NotClockwiseError as e:
    print("refused:", e)
    footprint = reverse_winding(footprint)

pose = RigidTransform(translation=[12.0, -3.0, 0.0], rotation=[0.0, 0.0, 0.2588, 0.9659])
mesh = extrude_polygon(footprint, 0.05, pose)
print("lane prism vertices:", mesh.n_vertices, "bounds:", mesh.bounds())

box = bounding_box(width=1.8, height=1.5, length=4.5, transform=pose)
print("bbox triangles:", box.n_triangles)

cyl = cylinder(radius=0.4, height=1.7, transform=pose)
print("cylinder vertices:", cyl.n_vertices)
