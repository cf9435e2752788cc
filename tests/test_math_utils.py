# tests/test_math_utils.py

import pytest

from fast_view_cut.core.math_utils import (
    AxisRect,
    BASIS_Z,
    Plane,
    Transform,
    create_plane,
    project_onto,
    v_dist,
    xyz_to_v,
)


class _P:
    def __init__(self, x, y, z):
        self.X, self.Y, self.Z = x, y, z


def test_project_onto_horizontal_plane_drops_height():
    plane = create_plane(BASIS_Z, (0.0, 0.0, 2.0))
    assert project_onto(plane, (3.0, 4.0, 10.0)) == pytest.approx((3.0, 4.0, 2.0))


def test_project_onto_tilted_plane_lands_on_plane():
    plane = create_plane((1.0, 1.0, 0.0), (1.0, 0.0, 0.0))
    p = project_onto(plane, (5.0, 2.0, 7.0))
    assert plane.signed_distance(p) == pytest.approx(0.0, abs=1e-12)
    # Moved only along the normal
    assert p[2] == pytest.approx(7.0)
    assert p[0] - 5.0 == pytest.approx(p[1] - 2.0)


def test_project_point_already_on_plane_is_unchanged():
    plane = create_plane((0.0, 1.0, 0.0), (0.0, 3.0, 0.0))
    assert project_onto(plane, (9.0, 3.0, -4.0)) == pytest.approx((9.0, 3.0, -4.0))


def test_plane_normal_is_normalized():
    plane = Plane((0.0, 0.0, 5.0), (0.0, 0.0, 0.0))
    assert plane.normal == pytest.approx((0.0, 0.0, 1.0))


def test_zero_normal_is_rejected():
    with pytest.raises(ValueError):
        Plane((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))


def test_in_plane_basis_is_orthonormal():
    plane = create_plane((0.3, -0.5, 0.8), (1.0, 2.0, 3.0))
    x, y, n = plane.x_vec, plane.y_vec, plane.normal
    dot = lambda a, b: sum(i * j for i, j in zip(a, b))
    assert dot(x, y) == pytest.approx(0.0, abs=1e-12)
    assert dot(x, n) == pytest.approx(0.0, abs=1e-12)
    assert dot(x, x) == pytest.approx(1.0)
    assert dot(y, y) == pytest.approx(1.0)


def test_to_local_on_sheet_plane_reads_xy():
    plane = create_plane(BASIS_Z, (0.0, 0.0, 0.0))
    assert plane.to_local((1.5, -2.5, 8.0)) == pytest.approx((1.5, -2.5))


def test_transform_inverse_round_trip():
    t = Transform(
        origin=(10.0, -4.0, 2.0),
        basis_x=(0.0, 1.0, 0.0),
        basis_y=(-1.0, 0.0, 0.0),
        basis_z=(0.0, 0.0, 1.0),
    )
    p = (3.0, 7.0, -1.0)
    back = t.inverse().of_point(t.of_point(p))
    assert back == pytest.approx(p)


def test_transform_inverse_handles_scaled_basis():
    t = Transform(origin=(1.0, 1.0, 1.0), basis_x=(2.0, 0.0, 0.0), basis_y=(0.0, 0.5, 0.0))
    assert t.inverse().of_point((5.0, 2.0, 1.0)) == pytest.approx((2.0, 2.0, 0.0))


def test_transform_multiply_applies_right_operand_first():
    rotate = Transform(basis_x=(0.0, 1.0, 0.0), basis_y=(-1.0, 0.0, 0.0))
    shift = Transform.translation((10.0, 0.0, 0.0))

    combined = rotate.multiply(shift)

    p = (1.0, 2.0, 3.0)
    assert combined.of_point(p) == pytest.approx(rotate.of_point(shift.of_point(p)))
    assert combined.of_point(p) == pytest.approx((-2.0, 11.0, 3.0))


def test_singular_transform_raises():
    t = Transform(basis_x=(1.0, 0.0, 0.0), basis_y=(2.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        t.inverse()


def test_xyz_to_v_accepts_revit_points_and_tuples():
    assert xyz_to_v(_P(1, 2, 3)) == (1.0, 2.0, 3.0)
    assert xyz_to_v([4, 5, 6]) == (4.0, 5.0, 6.0)
    assert v_dist((0, 0, 0), (3, 4, 0)) == pytest.approx(5.0)


def test_axis_rect_clamps_negative_size():
    r = AxisRect(0, 0, -5, 3)
    assert r.width == 0
    assert r.empty


def test_axis_rect_from_extents_normalizes_order():
    assert AxisRect.from_extents(10, 8, 2, 1) == AxisRect(2, 1, 8, 7)


def test_axis_rect_intersection():
    a = AxisRect(0, 0, 100, 100)
    b = AxisRect(50, 50, 100, 100)
    inter = a.intersect(b)
    assert inter == AxisRect(50, 50, 50, 50)
    assert inter.area() == 2500


def test_disjoint_and_touching_rects_are_empty():
    a = AxisRect(0, 0, 10, 10)
    assert a.intersect(AxisRect(20, 20, 10, 10)).empty
    assert a.intersect(AxisRect(10, 0, 10, 10)).empty
