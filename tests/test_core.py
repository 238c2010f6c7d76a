"""
Unit tests for vectors, directions, points, axes, planes and frames.
"""

import math

import numpy as np
import pytest

from geometrix.core import (
    Axis2d,
    Axis3d,
    Direction2d,
    Direction3d,
    Frame2d,
    Frame3d,
    Plane3d,
    Point2d,
    Point3d,
    Vector2d,
    Vector3d,
)

TOL = 1e-9


def random_point2d() -> Point2d:
    x, y = np.random.uniform(-10, 10, size=2)
    return Point2d(float(x), float(y))


def random_point3d() -> Point3d:
    x, y, z = np.random.uniform(-10, 10, size=3)
    return Point3d(float(x), float(y), float(z))


def random_direction3d() -> Direction3d:
    return Vector3d(*[float(v) for v in np.random.randn(3)]).direction()


def random_frame2d() -> Frame2d:
    frame = Frame2d.with_angle(random_point2d(), float(np.random.uniform(-np.pi, np.pi)))
    return frame.reverse_y() if np.random.rand() < 0.5 else frame


def random_frame3d() -> Frame3d:
    frame = Frame3d.with_z_direction(random_point3d(), random_direction3d())
    return frame.reverse_x() if np.random.rand() < 0.5 else frame


class TestVector:
    """Tests for Vector2d and Vector3d."""

    def test_arithmetic(self):
        v = Vector2d(1, 2) + Vector2d(3, -1)
        assert v == Vector2d(4, 1)
        assert Vector2d(1, 2) * 2 == Vector2d(2, 4)
        assert 2 * Vector3d(1, 2, 3) == Vector3d(2, 4, 6)
        assert -Vector3d(1, 0, -1) == Vector3d(-1, 0, 1)

    def test_divide_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Vector2d(1, 1) / 0.0

    def test_length(self):
        assert Vector2d(3, 4).length == 5.0
        assert Vector3d(2, 3, 6).length == 7.0

    def test_cross_products(self):
        assert Vector2d(1, 0).cross(Vector2d(0, 1)) == 1.0
        assert Vector3d(1, 0, 0).cross(Vector3d(0, 1, 0)) == Vector3d(0, 0, 1)

    def test_zero_vector_has_no_direction(self):
        """Zero vector direction should be None, not an error."""
        assert Vector2d.zero().direction() is None
        assert Vector3d.zero().direction() is None
        assert Vector2d.zero().normalize() == Vector2d.zero()

    def test_direction_is_unit(self):
        d = Vector3d(1, 2, 2).direction()
        assert math.isclose(d.to_vector().length, 1.0)

    def test_rotate_around_z(self):
        v = Vector3d(1, 0, 0).rotate_around(Axis3d.z(), math.pi / 2)
        assert v.equal_within(Vector3d(0, 1, 0), TOL)

    def test_rotate_by(self):
        v = Vector2d(2, 0).rotate_by(math.pi / 2)
        assert v.equal_within(Vector2d(0, 2), TOL)

    def test_mirror(self):
        assert Vector2d(1, 1).mirror_across(Axis2d.x()) == Vector2d(1, -1)
        assert Vector3d(1, 2, 3).mirror_across(Plane3d.xy()) == Vector3d(1, 2, -3)

    def test_project_onto_plane(self):
        v = Vector3d(1, 2, 3).project_onto(Plane3d.xy())
        assert v == Vector3d(1, 2, 0)

    def test_to_array(self):
        np.testing.assert_array_equal(Vector3d(1, 2, 3).to_array(), np.array([1.0, 2.0, 3.0]))

    def test_translation_leaves_vectors_unchanged(self):
        assert Vector2d(1, 2).translate_by(Vector2d(5, 5)) == Vector2d(1, 2)
        assert Vector3d(1, 2, 3).translate_by(Vector3d(5, 5, 5)) == Vector3d(1, 2, 3)

    def test_rotate_around_ignores_center(self):
        """Rotating a vector around any point only turns it."""
        v = Vector2d(2, 0).rotate_around(Point2d(5, 5), math.pi / 2)
        assert v.equal_within(Vector2d(0, 2), TOL)


class TestDirection:
    """Tests for Direction2d and Direction3d."""

    def test_from_angle(self):
        d = Direction2d.from_angle(math.pi / 2)
        assert math.isclose(d.y, 1.0)
        assert math.isclose(d.to_angle(), math.pi / 2)

    def test_angle_from_is_signed(self):
        a = Direction2d.positive_x()
        b = Direction2d.positive_y()
        assert math.isclose(b.angle_from(a), math.pi / 2)
        assert math.isclose(a.angle_from(b), -math.pi / 2)

    def test_perpendicular(self):
        assert Direction2d.positive_x().perpendicular() == Direction2d(-0.0, 1.0)

    def test_perpendicular_basis_is_right_handed(self):
        np.random.seed(42)
        for _ in range(50):
            d = random_direction3d()
            x_dir, y_dir = d.perpendicular_basis()
            assert abs(x_dir.component_in(d)) < TOL
            assert abs(y_dir.component_in(d)) < TOL
            assert abs(x_dir.component_in(y_dir)) < TOL
            frame = Frame3d(Point3d.origin(), x_dir, y_dir, d)
            assert frame.is_right_handed()

    def test_angle_from_3d(self):
        a = Direction3d.positive_x()
        b = Direction3d.positive_z()
        assert math.isclose(a.angle_from(b), math.pi / 2)

    def test_from_azimuth_and_elevation(self):
        d = Direction3d.from_azimuth_and_elevation(0.0, math.pi / 2)
        assert d.equal_within(Direction3d.positive_z(), 1e-12)

    def test_translation_leaves_directions_unchanged(self):
        d2 = Direction2d.from_angle(0.3)
        d3 = Direction3d.positive_z()
        assert d2.translate_by(Vector2d(4, -1)) == d2
        assert d3.translate_by(Vector3d(4, -1, 2)) == d3

    def test_rotate_around_point(self):
        d = Direction2d.positive_x().rotate_around(Point2d(3, -2), math.pi / 2)
        assert d.equal_within(Direction2d.positive_y(), 1e-12)
        assert d == Direction2d.positive_x().rotate_by(math.pi / 2)


class TestPoint:
    """Tests for Point2d and Point3d."""

    def test_point_minus_point_is_vector(self):
        assert Point2d(3, 4) - Point2d(1, 1) == Vector2d(2, 3)
        assert Point3d(1, 1, 1) + Vector3d(1, 2, 3) == Point3d(2, 3, 4)

    def test_distance(self):
        assert Point3d(0, 0, 0).distance_from(Point3d(2, 3, 6)) == 7.0

    def test_rotate_around(self):
        p = Point2d(2, 1).rotate_around(Point2d(1, 1), math.pi)
        assert p.equal_within(Point2d(0, 1), TOL)

    def test_rotate_around_axis(self):
        axis = Axis3d(Point3d(1, 0, 0), Direction3d.positive_z())
        p = Point3d(2, 0, 5).rotate_around(axis, math.pi / 2)
        assert p.equal_within(Point3d(1, 1, 5), TOL)

    def test_mirror_across_axis(self):
        axis = Axis2d(Point2d(0, 1), Direction2d.positive_x())
        assert Point2d(3, 3).mirror_across(axis) == Point2d(3, -1)

    def test_mirror_across_plane(self):
        plane = Plane3d(Point3d(0, 0, 1), Direction3d.positive_z())
        assert Point3d(1, 2, 3).mirror_across(plane) == Point3d(1, 2, -1)

    def test_scale_about(self):
        assert Point2d(3, 3).scale_about(Point2d(1, 1), 2) == Point2d(5, 5)

    def test_signed_distances(self):
        axis = Axis2d.x()
        assert Point2d(3, 2).signed_distance_along(axis) == 3
        assert Point2d(3, 2).signed_distance_from(axis) == 2
        assert Point2d(3, -2).signed_distance_from(axis) == -2

    def test_centroid(self):
        points = [Point2d(0, 0), Point2d(2, 0), Point2d(1, 3)]
        assert Point2d.centroid(points).equal_within(Point2d(1, 1), TOL)

    def test_centroid_of_nothing(self):
        """Empty input should give None."""
        assert Point2d.centroid([]) is None
        assert Point3d.centroid([]) is None

    def test_interpolate(self):
        p = Point3d.interpolate_from(Point3d(0, 0, 0), Point3d(2, 4, 6), 0.5)
        assert p == Point3d(1, 2, 3)


class TestFrame:
    """Tests for frame conversions."""

    def test_relative_to_simple(self):
        frame = Frame2d.at_point(Point2d(1, 2))
        assert Point2d(3, 3).relative_to(frame) == Point2d(2, 1)

    def test_relative_to_rotated(self):
        frame = Frame2d.with_angle(Point2d(0, 0), math.pi / 2)
        p = Point2d(0, 1).relative_to(frame)
        assert p.equal_within(Point2d(1, 0), TOL)

    def test_relative_to_place_in_roundtrip_2d(self):
        """place_in should undo relative_to for right- and left-handed frames."""
        np.random.seed(42)
        for _ in range(100):
            frame = random_frame2d()
            p = random_point2d()
            assert p.relative_to(frame).place_in(frame).equal_within(p, 1e-9)
            d = Direction2d.from_angle(float(np.random.uniform(-3, 3)))
            assert d.relative_to(frame).place_in(frame).equal_within(d, 1e-9)

    def test_relative_to_place_in_roundtrip_3d(self):
        np.random.seed(42)
        for _ in range(100):
            frame = random_frame3d()
            p = random_point3d()
            assert p.place_in(frame).relative_to(frame).equal_within(p, 1e-9)
            v = Vector3d(*[float(c) for c in np.random.randn(3)])
            assert v.relative_to(frame).place_in(frame).equal_within(v, 1e-9)

    def test_handedness(self):
        assert Frame2d.at_origin().is_right_handed()
        assert not Frame2d.at_origin().reverse_x().is_right_handed()
        assert Frame3d.at_origin().is_right_handed()
        assert not Frame3d.at_origin().mirror_across(Plane3d.xy()).is_right_handed()

    def test_frame_relative_to_itself_is_identity(self):
        np.random.seed(1)
        frame = random_frame3d()
        local = frame.relative_to(frame)
        assert local.origin_point.equal_within(Point3d.origin(), 1e-9)
        assert local.x_direction.equal_within(Direction3d.positive_x(), 1e-9)
        assert local.y_direction.equal_within(Direction3d.positive_y(), 1e-9)

    def test_to_matrix_matches_place_in(self):
        np.random.seed(3)
        frame = random_frame3d()
        p = random_point3d()
        expected = p.place_in(frame).to_array()
        result = frame.to_matrix() @ np.append(p.to_array(), 1.0)
        np.testing.assert_array_almost_equal(result[:3], expected)

    def test_axis_and_plane_accessors(self):
        frame = Frame3d.at_point(Point3d(1, 2, 3))
        assert frame.z_axis() == Axis3d(Point3d(1, 2, 3), Direction3d.positive_z())
        assert frame.xy_plane().normal_direction == Direction3d.positive_z()

    def test_rotate_frame_around_axis(self):
        frame = Frame3d.at_origin().rotate_around(Axis3d.z(), math.pi / 2)
        assert frame.x_direction.equal_within(Direction3d.positive_y(), 1e-12)
        assert frame.is_right_handed()

    def test_scale_frame_2d(self):
        frame = Frame2d.with_angle(Point2d(1, 1), 0.5)
        scaled = frame.scale_about(Point2d(0, 0), 3.0)
        assert scaled == Frame2d(Point2d(3, 3), frame.x_direction, frame.y_direction)

    def test_negative_scale_reverses_frame_2d(self):
        """A point reflection in 2D is a half turn, so handedness is kept."""
        frame = Frame2d.at_point(Point2d(1, 1))
        scaled = frame.scale_about(Point2d(0, 0), -2.0)
        assert scaled.origin_point == Point2d(-2, -2)
        assert scaled.x_direction == Direction2d.negative_x()
        assert scaled.y_direction == Direction2d.negative_y()
        assert scaled.is_right_handed()

    def test_negative_scale_reverses_frame_3d(self):
        frame = Frame3d.at_point(Point3d(1, 2, 3))
        scaled = frame.scale_about(Point3d(0, 0, 0), -1.0)
        assert scaled.origin_point == Point3d(-1, -2, -3)
        assert scaled.z_direction == Direction3d.negative_z()
        assert not scaled.is_right_handed()
        assert frame.scale_about(Point3d(0, 0, 0), 2.0).is_right_handed()

    def test_scale_axes(self):
        axis = Axis2d(Point2d(1, 0), Direction2d.positive_y())
        assert axis.scale_about(Point2d(0, 0), 2.0) == Axis2d(Point2d(2, 0), Direction2d.positive_y())
        assert axis.scale_about(Point2d(0, 0), -1.0) == Axis2d(Point2d(-1, 0), Direction2d.negative_y())
        axis3 = Axis3d(Point3d(0, 0, 1), Direction3d.positive_x())
        scaled = axis3.scale_about(Point3d(0, 0, 0), -3.0)
        assert scaled == Axis3d(Point3d(0, 0, -3), Direction3d.negative_x())


class TestPlane:
    """Tests for Plane3d."""

    def test_through_points(self):
        plane = Plane3d.through_points(Point3d(0, 0, 1), Point3d(1, 0, 1), Point3d(0, 1, 1))
        assert plane.normal_direction == Direction3d(0, 0, 1)

    def test_through_collinear_points(self):
        """Collinear points should give None."""
        assert Plane3d.through_points(Point3d(0, 0, 0), Point3d(1, 1, 1), Point3d(2, 2, 2)) is None

    def test_offset_by(self):
        plane = Plane3d.xy().offset_by(2.0)
        assert plane.origin_point == Point3d(0, 0, 2)

    def test_scale_about(self):
        plane = Plane3d.xy().offset_by(1.0)
        assert plane.scale_about(Point3d(0, 0, 0), 2.0) == Plane3d(Point3d(0, 0, 2), Direction3d.positive_z())
        flipped = plane.scale_about(Point3d(0, 0, 0), -1.0)
        assert flipped == Plane3d(Point3d(0, 0, -1), Direction3d.negative_z())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
