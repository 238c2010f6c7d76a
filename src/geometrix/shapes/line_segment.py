"""
Line segments between two endpoints, in 2D and 3D.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..bounds.bounding_box import BoundingBox2d, BoundingBox3d
from ..core import (
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


@dataclass(frozen=True)
class LineSegment2d:
    """A straight segment from ``start_point`` to ``end_point``."""
    start_point: Point2d
    end_point: Point2d

    @classmethod
    def from_point_and_vector(cls, point: Point2d, vector: Vector2d) -> LineSegment2d:
        return cls(point, point.translate_by(vector))

    def endpoints(self) -> Tuple[Point2d, Point2d]:
        return (self.start_point, self.end_point)

    @property
    def length(self) -> float:
        return self.start_point.distance_from(self.end_point)

    @property
    def squared_length(self) -> float:
        return self.start_point.squared_distance_from(self.end_point)

    def midpoint(self) -> Point2d:
        return Point2d.midpoint(self.start_point, self.end_point)

    def vector(self) -> Vector2d:
        return self.start_point.vector_to(self.end_point)

    def direction(self) -> Optional[Direction2d]:
        """Direction from start to end, or None for a zero-length segment."""
        return self.vector().direction()

    def perpendicular_direction(self) -> Optional[Direction2d]:
        d = self.direction()
        return d.perpendicular() if d is not None else None

    def interpolate(self, t: float) -> Point2d:
        return Point2d.interpolate_from(self.start_point, self.end_point, t)

    def reverse(self) -> LineSegment2d:
        return LineSegment2d(self.end_point, self.start_point)

    def bounding_box(self) -> BoundingBox2d:
        return BoundingBox2d.from_corners(self.start_point, self.end_point)

    def map_points(self, fn) -> LineSegment2d:
        return LineSegment2d(fn(self.start_point), fn(self.end_point))

    def translate_by(self, vector: Vector2d) -> LineSegment2d:
        return self.map_points(lambda p: p.translate_by(vector))

    def rotate_around(self, center: Point2d, angle: float) -> LineSegment2d:
        return self.map_points(lambda p: p.rotate_around(center, angle))

    def mirror_across(self, axis: Axis2d) -> LineSegment2d:
        return self.map_points(lambda p: p.mirror_across(axis))

    def scale_about(self, center: Point2d, k: float) -> LineSegment2d:
        return self.map_points(lambda p: p.scale_about(center, k))

    def relative_to(self, frame: Frame2d) -> LineSegment2d:
        return self.map_points(lambda p: p.relative_to(frame))

    def place_in(self, frame: Frame2d) -> LineSegment2d:
        return self.map_points(lambda p: p.place_in(frame))


@dataclass(frozen=True)
class LineSegment3d:
    """A straight segment in 3D space."""
    start_point: Point3d
    end_point: Point3d

    @classmethod
    def from_point_and_vector(cls, point: Point3d, vector: Vector3d) -> LineSegment3d:
        return cls(point, point.translate_by(vector))

    def endpoints(self) -> Tuple[Point3d, Point3d]:
        return (self.start_point, self.end_point)

    @property
    def length(self) -> float:
        return self.start_point.distance_from(self.end_point)

    @property
    def squared_length(self) -> float:
        return self.start_point.squared_distance_from(self.end_point)

    def midpoint(self) -> Point3d:
        return Point3d.midpoint(self.start_point, self.end_point)

    def vector(self) -> Vector3d:
        return self.start_point.vector_to(self.end_point)

    def direction(self) -> Optional[Direction3d]:
        return self.vector().direction()

    def interpolate(self, t: float) -> Point3d:
        return Point3d.interpolate_from(self.start_point, self.end_point, t)

    def reverse(self) -> LineSegment3d:
        return LineSegment3d(self.end_point, self.start_point)

    def bounding_box(self) -> BoundingBox3d:
        return BoundingBox3d.from_corners(self.start_point, self.end_point)

    def project_onto(self, plane: Plane3d) -> LineSegment3d:
        return self.map_points(lambda p: p.project_onto(plane))

    def map_points(self, fn) -> LineSegment3d:
        return LineSegment3d(fn(self.start_point), fn(self.end_point))

    def translate_by(self, vector: Vector3d) -> LineSegment3d:
        return self.map_points(lambda p: p.translate_by(vector))

    def rotate_around(self, axis: Axis3d, angle: float) -> LineSegment3d:
        return self.map_points(lambda p: p.rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> LineSegment3d:
        return self.map_points(lambda p: p.mirror_across(plane))

    def scale_about(self, center: Point3d, k: float) -> LineSegment3d:
        return self.map_points(lambda p: p.scale_about(center, k))

    def relative_to(self, frame: Frame3d) -> LineSegment3d:
        return self.map_points(lambda p: p.relative_to(frame))

    def place_in(self, frame: Frame3d) -> LineSegment3d:
        return self.map_points(lambda p: p.place_in(frame))
