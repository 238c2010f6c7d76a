"""
Unit tests for the bounding box algebra.
"""

import numpy as np
import pytest

from geometrix.bounds import (
    BoundingBox2d,
    BoundingBox3d,
    hull,
    hull_of,
    intersection,
    contains,
    overlaps,
    is_contained_in,
    centroid,
)
from geometrix.core import Point2d, Point3d, Vector2d, Vector3d


def random_box3d(low: int = -5, high: int = 5) -> BoundingBox3d:
    """Integer-valued boxes so that touching faces occur often."""
    values = np.random.randint(low, high, size=6)
    return BoundingBox3d(*[float(v) for v in values])


def random_box2d(low: int = -5, high: int = 5) -> BoundingBox2d:
    values = np.random.randint(low, high, size=4)
    return BoundingBox2d(*[float(v) for v in values])


class TestConstruction:
    """Tests for box construction and normalization."""

    def test_swapped_extrema_are_normalized(self):
        """Swapped min/max should be reordered on every axis."""
        box = BoundingBox3d(3, 0, 2, 0, 1, 0)
        assert box == BoundingBox3d(0, 3, 0, 2, 0, 1)

    def test_min_never_exceeds_max(self):
        """Random construction always gives min <= max."""
        np.random.seed(42)
        for _ in range(100):
            box = random_box3d()
            assert box.min_x <= box.max_x
            assert box.min_y <= box.max_y
            assert box.min_z <= box.max_z

    def test_2d_normalization(self):
        box = BoundingBox2d(5, -1, 2, -2)
        assert box.extrema() == (-1, 5, -2, 2)

    def test_singleton(self):
        box = BoundingBox2d.singleton(Point2d(1.0, 2.0))
        assert box.dimensions() == (0.0, 0.0)
        assert box.contains(Point2d(1.0, 2.0))

    def test_from_corners(self):
        box = BoundingBox3d.from_corners(Point3d(1, 5, 3), Point3d(4, 2, 0))
        assert box == BoundingBox3d(1, 4, 2, 5, 0, 3)

    def test_hull_of_points(self):
        points = [Point2d(0, 0), Point2d(2, -1), Point2d(-3, 4)]
        box = BoundingBox2d.hull_of_points(points)
        assert box == BoundingBox2d(-3, 2, -1, 4)

    def test_hull_of_no_points(self):
        """Empty point list should give None."""
        assert BoundingBox2d.hull_of_points([]) is None
        assert BoundingBox3d.hull_of_points([]) is None


class TestOverlaps:
    """Tests for overlaps() and intersection()."""

    def test_overlapping_example(self):
        a = BoundingBox3d(0, 3, 0, 2, 0, 1)
        b = BoundingBox3d(0, 3, 1, 4, -1, 2)
        assert overlaps(a, b)

    def test_separated_example(self):
        a = BoundingBox3d(0, 3, 0, 2, 0, 1)
        c = BoundingBox3d(0, 3, 4, 5, -1, 2)
        assert not overlaps(a, c)
        assert intersection(a, c) is None

    def test_touching_boxes_overlap(self):
        """Boxes sharing a face overlap; their intersection is flat."""
        a = BoundingBox3d(0, 1, 0, 1, 0, 1)
        b = BoundingBox3d(1, 2, 0, 1, 0, 1)
        assert a.overlaps(b)
        result = a.intersection(b)
        assert result == BoundingBox3d(1, 1, 0, 1, 0, 1)
        assert result.dimensions()[0] == 0

    def test_intersection_values(self):
        a = BoundingBox2d(0, 4, 0, 4)
        b = BoundingBox2d(2, 6, -1, 3)
        assert a.intersection(b) == BoundingBox2d(2, 4, 0, 3)

    def test_overlaps_iff_intersection_defined(self):
        """overlaps(a, b) == intersection(a, b) is not None, for random boxes."""
        np.random.seed(42)
        for _ in range(300):
            a, b = random_box3d(), random_box3d()
            assert overlaps(a, b) == (intersection(a, b) is not None)
            c, d = random_box2d(), random_box2d()
            assert overlaps(c, d) == (intersection(c, d) is not None)

    def test_intersection_is_contained_in_both(self):
        np.random.seed(7)
        for _ in range(200):
            a, b = random_box3d(), random_box3d()
            result = a.intersection(b)
            if result is not None:
                assert result.is_contained_in(a)
                assert result.is_contained_in(b)

    def test_overlaps_is_symmetric(self):
        np.random.seed(3)
        for _ in range(100):
            a, b = random_box2d(), random_box2d()
            assert a.overlaps(b) == b.overlaps(a)


class TestHull:
    """Tests for hull() and hull_of()."""

    def test_hull_values(self):
        a = BoundingBox2d(0, 1, 0, 1)
        b = BoundingBox2d(2, 3, -1, 0.5)
        assert hull(a, b) == BoundingBox2d(0, 3, -1, 1)

    def test_hull_contains_inputs(self):
        """Both inputs are contained in their hull."""
        np.random.seed(42)
        for _ in range(200):
            a, b = random_box3d(), random_box3d()
            h = hull(a, b)
            assert is_contained_in(h, a)
            assert is_contained_in(h, b)

    def test_hull_of_empty(self):
        """Empty input should give None."""
        assert hull_of([]) is None
        assert BoundingBox3d.hull_of([]) is None

    def test_hull_of_single(self):
        box = BoundingBox2d(0, 1, 2, 3)
        assert hull_of([box]) == box

    def test_hull_of_many(self):
        boxes = [
            BoundingBox2d(0, 1, 0, 1),
            BoundingBox2d(5, 6, -2, 0),
            BoundingBox2d(-1, 0, 3, 4),
        ]
        assert BoundingBox2d.hull_of(boxes) == BoundingBox2d(-1, 6, -2, 4)

    def test_hull_of_generator(self):
        boxes = (BoundingBox3d(i, i + 1, 0, 1, 0, 1) for i in range(4))
        assert hull_of(boxes) == BoundingBox3d(0, 4, 0, 1, 0, 1)


class TestContainment:
    """Tests for contains() and is_contained_in()."""

    def test_contains_is_inclusive(self):
        box = BoundingBox3d(0, 1, 0, 1, 0, 1)
        assert contains(Point3d(0, 0, 0), box)
        assert contains(Point3d(1, 1, 1), box)
        assert contains(Point3d(0.5, 0.5, 0.5), box)
        assert not contains(Point3d(1.0001, 0.5, 0.5), box)

    def test_contains_implies_coordinates_in_range(self):
        np.random.seed(42)
        box = BoundingBox3d(-1, 2, -3, 0, 0.5, 1.5)
        for _ in range(500):
            p = Point3d(*[float(v) for v in np.random.uniform(-4, 3, size=3)])
            if contains(p, box):
                assert box.min_x <= p.x <= box.max_x
                assert box.min_y <= p.y <= box.max_y
                assert box.min_z <= p.z <= box.max_z

    def test_is_contained_in_argument_order(self):
        outer = BoundingBox2d(0, 10, 0, 10)
        inner = BoundingBox2d(2, 3, 4, 5)
        assert is_contained_in(outer, inner)
        assert not is_contained_in(inner, outer)
        assert inner.is_contained_in(outer)

    def test_box_contained_in_itself(self):
        box = BoundingBox2d(0, 1, 0, 1)
        assert box.is_contained_in(box)

    def test_partial_overlap_not_contained(self):
        a = BoundingBox2d(0, 2, 0, 2)
        b = BoundingBox2d(1, 3, 1, 3)
        assert not a.is_contained_in(b)
        assert not b.is_contained_in(a)


class TestMeasuresAndTransforms:
    """Tests for centroid, dimensions and transforms."""

    def test_centroid(self):
        box = BoundingBox3d(0, 4, -2, 2, 1, 3)
        assert centroid(box) == Point3d(2, 0, 2)

    def test_dimensions(self):
        box = BoundingBox2d(1, 4, -1, 1)
        assert box.dimensions() == (3, 2)

    def test_translate_by(self):
        box = BoundingBox2d(0, 1, 0, 1).translate_by(Vector2d(2, -1))
        assert box == BoundingBox2d(2, 3, -1, 0)

    def test_scale_about_negative_factor_normalizes(self):
        """Negative scale swaps extrema, which the constructor reorders."""
        box = BoundingBox3d(1, 2, 1, 2, 1, 2).scale_about(Point3d.origin(), -2)
        assert box == BoundingBox3d(-4, -2, -4, -2, -4, -2)

    def test_expand_by(self):
        box = BoundingBox2d(0, 1, 0, 1).expand_by(-0.5)
        assert box == BoundingBox2d(-0.5, 1.5, -0.5, 1.5)

    def test_translate_3d(self):
        box = BoundingBox3d(0, 1, 0, 1, 0, 1).translate_by(Vector3d(1, 1, 1))
        assert box.centroid() == Point3d(1.5, 1.5, 1.5)

    def test_to_array(self):
        arr = BoundingBox2d(0, 1, 2, 3).to_array()
        np.testing.assert_array_equal(arr, np.array([[0, 2], [1, 3]]))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
