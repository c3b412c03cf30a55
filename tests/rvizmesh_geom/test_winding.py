from types import SimpleNamespace

import numpy as np

from rvizmesh_geom.ops.winding import is_clockwise, reverse_winding, signed_area2
from rvizmesh_geom.gen.primitives import box_footprint, circle_footprint


def test_triangle_orientation(cw_triangle, ccw_triangle):
    assert is_clockwise(cw_triangle)
    assert not is_clockwise(ccw_triangle)
    assert signed_area2(cw_triangle) == -1.0


def test_reverse_flips_winding():
    for poly in (box_footprint(2.0, 3.0), circle_footprint(1.0, 12), circle_footprint(5.0, 3)):
        assert is_clockwise(poly)
        rev = reverse_winding(poly)
        assert not is_clockwise(rev)
        np.testing.assert_array_equal(rev[0], poly[-1])


def test_reverse_does_not_touch_input(cw_triangle):
    before = cw_triangle.copy()
    reverse_winding(cw_triangle)
    np.testing.assert_array_equal(cw_triangle, before)


def test_far_from_origin_still_clockwise():
    poly = box_footprint(0.5, 0.5) + np.array([8.0e5, -3.0e6])
    assert is_clockwise(poly)
    assert not is_clockwise(poly[::-1])


def test_degenerate_inputs_are_not_clockwise():
    assert not is_clockwise([])
    assert not is_clockwise([(0.0, 0.0), (1.0, 1.0)])


def test_message_shaped_polygon():
    msg = SimpleNamespace(points=[
        SimpleNamespace(x=0.0, y=0.0, z=0.0),
        SimpleNamespace(x=0.0, y=1.0, z=0.0),
        SimpleNamespace(x=1.0, y=0.0, z=0.0),
    ])
    assert is_clockwise(msg)
