"""
Open polylines: ordered vertex chains in 2D and 3D.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..bounds.bounding_box import BoundingBox2d, BoundingBox3d
from ..core import (
    Axis2d,
    Axis3d,
    Frame2d,
    Frame3d,
    Plane3d,
    Point2d,
    Point3d,
    Vector2d,
    Vector3d,
)
from .line_segment import LineSegment2d, LineSegment3d


@dataclass(frozen=True)
class Polyline2d:
    """A chain of line segments through ``vertices``."""
    vertices: Tuple[Point2d, ...]

    def __post_init__(self):
        object.__setattr__(self, 'vertices', tuple(self.vertices))

    def segments(self) -> List[LineSegment2d]:
        return [LineSegment2d(a, b) for a, b in zip(self.vertices[:-1], self.vertices[1:])]

    @property
    def length(self) -> float:
        return sum(segment.length for segment in self.segments())

    def centroid(self) -> Optional[Point2d]:
        """
        Length-weighted centroid of the segments.

        None for an empty polyline; the first vertex when the total length
        is zero.
        """
        if not self.vertices:
            return None
        total = self.length
        if total == 0.0:
            return self.vertices[0]
        x = y = 0.0
        for segment in self.segments():
            mid = segment.midpoint()
            x += segment.length * mid.x
            y += segment.length * mid.y
        return Point2d(x / total, y / total)

    def bounding_box(self) -> Optional[BoundingBox2d]:
        return BoundingBox2d.hull_of_points(self.vertices)

    def reverse(self) -> Polyline2d:
        return Polyline2d(self.vertices[::-1])

    def map_vertices(self, fn) -> Polyline2d:
        return Polyline2d(tuple(fn(p) for p in self.vertices))

    def translate_by(self, vector: Vector2d) -> Polyline2d:
        return self.map_vertices(lambda p: p.translate_by(vector))

    def rotate_around(self, center: Point2d, angle: float) -> Polyline2d:
        return self.map_vertices(lambda p: p.rotate_around(center, angle))

    def mirror_across(self, axis: Axis2d) -> Polyline2d:
        return self.map_vertices(lambda p: p.mirror_across(axis))

    def scale_about(self, center: Point2d, k: float) -> Polyline2d:
        return self.map_vertices(lambda p: p.scale_about(center, k))

    def relative_to(self, frame: Frame2d) -> Polyline2d:
        return self.map_vertices(lambda p: p.relative_to(frame))

    def place_in(self, frame: Frame2d) -> Polyline2d:
        return self.map_vertices(lambda p: p.place_in(frame))


@dataclass(frozen=True)
class Polyline3d:
    """A chain of line segments in 3D space."""
    vertices: Tuple[Point3d, ...]

    def __post_init__(self):
        object.__setattr__(self, 'vertices', tuple(self.vertices))

    def segments(self) -> List[LineSegment3d]:
        return [LineSegment3d(a, b) for a, b in zip(self.vertices[:-1], self.vertices[1:])]

    @property
    def length(self) -> float:
        return sum(segment.length for segment in self.segments())

    def centroid(self) -> Optional[Point3d]:
        if not self.vertices:
            return None
        total = self.length
        if total == 0.0:
            return self.vertices[0]
        x = y = z = 0.0
        for segment in self.segments():
            mid = segment.midpoint()
            x += segment.length * mid.x
            y += segment.length * mid.y
            z += segment.length * mid.z
        return Point3d(x / total, y / total, z / total)

    def bounding_box(self) -> Optional[BoundingBox3d]:
        return BoundingBox3d.hull_of_points(self.vertices)

    def reverse(self) -> Polyline3d:
        return Polyline3d(self.vertices[::-1])

    def map_vertices(self, fn) -> Polyline3d:
        return Polyline3d(tuple(fn(p) for p in self.vertices))

    def translate_by(self, vector: Vector3d) -> Polyline3d:
        return self.map_vertices(lambda p: p.translate_by(vector))

    def rotate_around(self, axis: Axis3d, angle: float) -> Polyline3d:
        return self.map_vertices(lambda p: p.rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> Polyline3d:
        return self.map_vertices(lambda p: p.mirror_across(plane))

    def scale_about(self, center: Point3d, k: float) -> Polyline3d:
        return self.map_vertices(lambda p: p.scale_about(center, k))

    def relative_to(self, frame: Frame3d) -> Polyline3d:
        return self.map_vertices(lambda p: p.relative_to(frame))

    def place_in(self, frame: Frame3d) -> Polyline3d:
        return self.map_vertices(lambda p: p.place_in(frame))
