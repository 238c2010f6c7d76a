"""
Triangles in 2D and 3D.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..bounds.bounding_box import BoundingBox2d, BoundingBox3d
from ..core import (
    Axis2d,
    Axis3d,
    Direction3d,
    Frame2d,
    Frame3d,
    Plane3d,
    Point2d,
    Point3d,
    Vector2d,
    Vector3d,
)
from .circle import Circle2d, Circle3d
from .line_segment import LineSegment2d, LineSegment3d


def _on_segment(segment: LineSegment2d, point: Point2d) -> bool:
    start, end = segment.endpoints()
    if start.vector_to(end).cross(start.vector_to(point)) != 0.0:
        return False
    return segment.bounding_box().contains(point)


@dataclass(frozen=True)
class Triangle2d:
    """A triangle given by its three vertices."""
    p1: Point2d
    p2: Point2d
    p3: Point2d

    def vertices(self) -> Tuple[Point2d, Point2d, Point2d]:
        return (self.p1, self.p2, self.p3)

    def edges(self) -> Tuple[LineSegment2d, LineSegment2d, LineSegment2d]:
        return (
            LineSegment2d(self.p1, self.p2),
            LineSegment2d(self.p2, self.p3),
            LineSegment2d(self.p3, self.p1),
        )

    @property
    def counterclockwise_area(self) -> float:
        """Signed area; positive when the vertices run counterclockwise."""
        return 0.5 * self.p1.vector_to(self.p2).cross(self.p1.vector_to(self.p3))

    @property
    def clockwise_area(self) -> float:
        return -self.counterclockwise_area

    @property
    def area(self) -> float:
        return abs(self.counterclockwise_area)

    @property
    def perimeter(self) -> float:
        return sum(edge.length for edge in self.edges())

    def centroid(self) -> Point2d:
        return Point2d(
            (self.p1.x + self.p2.x + self.p3.x) / 3.0,
            (self.p1.y + self.p2.y + self.p3.y) / 3.0,
        )

    def contains(self, point: Point2d) -> bool:
        """
        True if ``point`` is inside or on the boundary.

        The point is inside when it lies on the same side of all three
        edges, regardless of the triangle's orientation.

        A zero-area triangle contains only the points on its edges.
        """
        if self.counterclockwise_area == 0.0:
            return any(_on_segment(edge, point) for edge in self.edges())
        d1 = self.p1.vector_to(self.p2).cross(self.p1.vector_to(point))
        d2 = self.p2.vector_to(self.p3).cross(self.p2.vector_to(point))
        d3 = self.p3.vector_to(self.p1).cross(self.p3.vector_to(point))
        has_negative = d1 < 0 or d2 < 0 or d3 < 0
        has_positive = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_negative and has_positive)

    def circumcircle(self) -> Optional[Circle2d]:
        """Circle through all three vertices, or None if they are collinear."""
        return Circle2d.through_points(self.p1, self.p2, self.p3)

    def bounding_box(self) -> BoundingBox2d:
        return BoundingBox2d(
            min(self.p1.x, self.p2.x, self.p3.x),
            max(self.p1.x, self.p2.x, self.p3.x),
            min(self.p1.y, self.p2.y, self.p3.y),
            max(self.p1.y, self.p2.y, self.p3.y),
        )

    def map_vertices(self, fn) -> Triangle2d:
        return Triangle2d(fn(self.p1), fn(self.p2), fn(self.p3))

    def translate_by(self, vector: Vector2d) -> Triangle2d:
        return self.map_vertices(lambda p: p.translate_by(vector))

    def rotate_around(self, center: Point2d, angle: float) -> Triangle2d:
        return self.map_vertices(lambda p: p.rotate_around(center, angle))

    def mirror_across(self, axis: Axis2d) -> Triangle2d:
        return self.map_vertices(lambda p: p.mirror_across(axis))

    def scale_about(self, center: Point2d, k: float) -> Triangle2d:
        return self.map_vertices(lambda p: p.scale_about(center, k))

    def relative_to(self, frame: Frame2d) -> Triangle2d:
        return self.map_vertices(lambda p: p.relative_to(frame))

    def place_in(self, frame: Frame2d) -> Triangle2d:
        return self.map_vertices(lambda p: p.place_in(frame))


@dataclass(frozen=True)
class Triangle3d:
    """A triangle in 3D space."""
    p1: Point3d
    p2: Point3d
    p3: Point3d

    def vertices(self) -> Tuple[Point3d, Point3d, Point3d]:
        return (self.p1, self.p2, self.p3)

    def edges(self) -> Tuple[LineSegment3d, LineSegment3d, LineSegment3d]:
        return (
            LineSegment3d(self.p1, self.p2),
            LineSegment3d(self.p2, self.p3),
            LineSegment3d(self.p3, self.p1),
        )

    def _normal_vector(self) -> Vector3d:
        return self.p1.vector_to(self.p2).cross(self.p1.vector_to(self.p3))

    @property
    def area(self) -> float:
        return 0.5 * self._normal_vector().length

    @property
    def perimeter(self) -> float:
        return sum(edge.length for edge in self.edges())

    def centroid(self) -> Point3d:
        return Point3d(
            (self.p1.x + self.p2.x + self.p3.x) / 3.0,
            (self.p1.y + self.p2.y + self.p3.y) / 3.0,
            (self.p1.z + self.p2.z + self.p3.z) / 3.0,
        )

    def normal_direction(self) -> Optional[Direction3d]:
        """Right-hand-rule normal, or None if the vertices are collinear."""
        return self._normal_vector().direction()

    def plane(self) -> Optional[Plane3d]:
        return Plane3d.through_points(self.p1, self.p2, self.p3)

    def circumcircle(self) -> Optional[Circle3d]:
        return Circle3d.through_points(self.p1, self.p2, self.p3)

    def bounding_box(self) -> BoundingBox3d:
        xs = (self.p1.x, self.p2.x, self.p3.x)
        ys = (self.p1.y, self.p2.y, self.p3.y)
        zs = (self.p1.z, self.p2.z, self.p3.z)
        return BoundingBox3d(min(xs), max(xs), min(ys), max(ys), min(zs), max(zs))

    def map_vertices(self, fn) -> Triangle3d:
        return Triangle3d(fn(self.p1), fn(self.p2), fn(self.p3))

    def translate_by(self, vector: Vector3d) -> Triangle3d:
        return self.map_vertices(lambda p: p.translate_by(vector))

    def rotate_around(self, axis: Axis3d, angle: float) -> Triangle3d:
        return self.map_vertices(lambda p: p.rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> Triangle3d:
        return self.map_vertices(lambda p: p.mirror_across(plane))

    def scale_about(self, center: Point3d, k: float) -> Triangle3d:
        return self.map_vertices(lambda p: p.scale_about(center, k))

    def relative_to(self, frame: Frame3d) -> Triangle3d:
        return self.map_vertices(lambda p: p.relative_to(frame))

    def place_in(self, frame: Frame3d) -> Triangle3d:
        return self.map_vertices(lambda p: p.place_in(frame))
