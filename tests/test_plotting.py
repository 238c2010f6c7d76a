"""
Smoke tests for the plotting helpers.
"""

import math

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pytest

from geometrix.bounds import BoundingBox2d
from geometrix.core import Direction3d, Frame3d, Point2d, Point3d
from geometrix.shapes import (
    Arc2d,
    Arc3d,
    Circle2d,
    Circle3d,
    LineSegment2d,
    LineSegment3d,
    Polygon2d,
    Polyline2d,
    Triangle2d,
    Triangle3d,
)
from geometrix.visualization import (
    plot_bounding_box,
    plot_shape,
    plot_shapes,
    plot_shapes_3d,
    sample_points,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestSamplePoints:
    """Tests for sample_points()."""

    def test_circle_samples_lie_on_circle(self):
        circle = Circle2d(Point2d(1, 2), 3.0)
        coords = sample_points(circle, n_samples=32)
        assert coords.shape == (33, 2)
        radii = np.hypot(coords[:, 0] - 1, coords[:, 1] - 2)
        np.testing.assert_allclose(radii, 3.0)

    def test_circle3d_samples_lie_in_plane(self):
        circle = Circle3d(Point3d(0, 0, 1), Direction3d.from_components(1, 1, 0), 2.0)
        coords = sample_points(circle, n_samples=16)
        assert coords.shape == (17, 3)
        normal = circle.axial_direction.to_array()
        np.testing.assert_allclose((coords - [0, 0, 1]) @ normal, 0.0, atol=1e-12)

    def test_closed_outlines(self):
        """Closed shapes repeat their first point."""
        coords = sample_points(Triangle2d(Point2d(0, 0), Point2d(1, 0), Point2d(0, 1)))
        assert coords.shape == (4, 2)
        np.testing.assert_array_equal(coords[0], coords[-1])

    def test_arc_endpoints(self):
        arc = Arc2d(Point2d(0, 0), Point2d(1, 0), math.pi / 2)
        coords = sample_points(arc, n_samples=8)
        np.testing.assert_allclose(coords[0], [1, 0])
        np.testing.assert_allclose(coords[-1], [0, 1], atol=1e-12)

    def test_unsupported_shape(self):
        with pytest.raises(TypeError):
            sample_points("square")


class TestPlotting:
    """Tests that the plotting functions draw without errors."""

    def test_plot_shape_creates_axes(self):
        ax = plot_shape(Circle2d(Point2d(0, 0), 1.0))
        assert len(ax.lines) == 1

    def test_plot_polygon_with_hole(self):
        polygon = Polygon2d(
            [Point2d(0, 0), Point2d(4, 0), Point2d(4, 4), Point2d(0, 4)],
            [[Point2d(1, 1), Point2d(2, 1), Point2d(2, 2)]],
        )
        ax = plot_shape(polygon)
        assert len(ax.lines) == 2

    def test_plot_shapes(self):
        shapes = [
            Point2d(0, 0),
            LineSegment2d(Point2d(0, 0), Point2d(1, 1)),
            Triangle2d(Point2d(0, 0), Point2d(1, 0), Point2d(0, 1)),
            Polyline2d([Point2d(0, 0), Point2d(2, 1), Point2d(3, 0)]),
            Circle2d(Point2d(2, 2), 1.0),
            Arc2d(Point2d(0, 0), Point2d(2, 0), math.pi),
            BoundingBox2d(-1, 0, -1, 0),
        ]
        fig, ax = plt.subplots()
        result = plot_shapes(shapes, ax=ax, title="Test")
        assert result is ax
        assert ax.get_title() == "Test"
        assert "Shapes: 7" in ax.texts[0].get_text()

    def test_plot_bounding_box(self):
        ax = plot_bounding_box(BoundingBox2d(0, 1, 0, 1))
        coords = ax.lines[0].get_xydata()
        assert coords.shape == (5, 2)

    def test_plot_shapes_3d(self):
        frame = Frame3d.at_origin()
        shapes = [
            Point3d(0, 0, 0),
            LineSegment3d(Point3d(0, 0, 0), Point3d(1, 1, 1)),
            Triangle3d(Point3d(0, 0, 0), Point3d(1, 0, 0), Point3d(0, 1, 1)),
            Circle3d(Point3d(0, 0, 1), Direction3d.positive_z(), 1.0),
            Arc3d.on(frame, Arc2d(Point2d(0, 0), Point2d(1, 0), math.pi)),
        ]
        ax = plot_shapes_3d(shapes, show_bounding_box=True, title="3D")
        assert ax.get_title() == "3D"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
