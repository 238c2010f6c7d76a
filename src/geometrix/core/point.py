"""
Point types for 2D and 3D space.

Point - Point gives a Vector; Point + Vector gives a Point.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Tuple, Union

import numpy as np

from .vector import Vector2d, Vector3d, rotate_components

if TYPE_CHECKING:
    from .axis import Axis2d, Axis3d
    from .frame import Frame2d, Frame3d
    from .plane import Plane3d


@dataclass(frozen=True)
class Point2d:
    """A point in 2D space."""
    x: float
    y: float

    @classmethod
    def origin(cls) -> Point2d:
        return cls(0.0, 0.0)

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> Point2d:
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    @staticmethod
    def midpoint(p1: Point2d, p2: Point2d) -> Point2d:
        return Point2d(0.5 * (p1.x + p2.x), 0.5 * (p1.y + p2.y))

    @staticmethod
    def interpolate_from(p1: Point2d, p2: Point2d, t: float) -> Point2d:
        """Linear interpolation; t=0 gives p1, t=1 gives p2."""
        return Point2d(p1.x + t * (p2.x - p1.x), p1.y + t * (p2.y - p1.y))

    @staticmethod
    def centroid(points: Iterable[Point2d]) -> Optional[Point2d]:
        """Average of the given points, or None if there are none."""
        coords = points_to_array(points, 2)
        if len(coords) == 0:
            return None
        cx, cy = np.mean(coords, axis=0)
        return Point2d(float(cx), float(cy))

    def coordinates(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def __add__(self, other: Vector2d) -> Point2d:
        if isinstance(other, Vector2d):
            return Point2d(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: Union[Point2d, Vector2d]) -> Union[Vector2d, Point2d]:
        if isinstance(other, Point2d):
            return Vector2d(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2d):
            return Point2d(self.x - other.x, self.y - other.y)
        return NotImplemented

    def vector_to(self, other: Point2d) -> Vector2d:
        return Vector2d(other.x - self.x, other.y - self.y)

    def vector_from(self, other: Point2d) -> Vector2d:
        return Vector2d(self.x - other.x, self.y - other.y)

    def distance_from(self, other: Point2d) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def squared_distance_from(self, other: Point2d) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def signed_distance_along(self, axis: Axis2d) -> float:
        """Distance along ``axis`` from its origin to this point's projection."""
        o = axis.origin_point
        d = axis.direction
        return (self.x - o.x) * d.x + (self.y - o.y) * d.y

    def signed_distance_from(self, axis: Axis2d) -> float:
        """Perpendicular distance from ``axis``; positive to its left."""
        o = axis.origin_point
        d = axis.direction
        return d.x * (self.y - o.y) - d.y * (self.x - o.x)

    def project_onto(self, axis: Axis2d) -> Point2d:
        t = self.signed_distance_along(axis)
        o = axis.origin_point
        d = axis.direction
        return Point2d(o.x + t * d.x, o.y + t * d.y)

    def translate_by(self, vector: Vector2d) -> Point2d:
        return Point2d(self.x + vector.x, self.y + vector.y)

    def translate_in(self, direction, distance: float) -> Point2d:
        return Point2d(self.x + distance * direction.x, self.y + distance * direction.y)

    def rotate_around(self, center: Point2d, angle: float) -> Point2d:
        v = self.vector_from(center).rotate_by(angle)
        return Point2d(center.x + v.x, center.y + v.y)

    def mirror_across(self, axis: Axis2d) -> Point2d:
        p = self.project_onto(axis)
        return Point2d(2.0 * p.x - self.x, 2.0 * p.y - self.y)

    def scale_about(self, center: Point2d, k: float) -> Point2d:
        return Point2d(center.x + k * (self.x - center.x), center.y + k * (self.y - center.y))

    def relative_to(self, frame: Frame2d) -> Point2d:
        v = self.vector_from(frame.origin_point).relative_to(frame)
        return Point2d(v.x, v.y)

    def place_in(self, frame: Frame2d) -> Point2d:
        v = Vector2d(self.x, self.y).place_in(frame)
        o = frame.origin_point
        return Point2d(o.x + v.x, o.y + v.y)

    def equal_within(self, other: Point2d, tolerance: float) -> bool:
        return self.distance_from(other) <= tolerance


@dataclass(frozen=True)
class Point3d:
    """A point in 3D space."""
    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> Point3d:
        return cls(0.0, 0.0, 0.0)

    @staticmethod
    def midpoint(p1: Point3d, p2: Point3d) -> Point3d:
        return Point3d(0.5 * (p1.x + p2.x), 0.5 * (p1.y + p2.y), 0.5 * (p1.z + p2.z))

    @staticmethod
    def interpolate_from(p1: Point3d, p2: Point3d, t: float) -> Point3d:
        return Point3d(
            p1.x + t * (p2.x - p1.x),
            p1.y + t * (p2.y - p1.y),
            p1.z + t * (p2.z - p1.z),
        )

    @staticmethod
    def centroid(points: Iterable[Point3d]) -> Optional[Point3d]:
        coords = points_to_array(points, 3)
        if len(coords) == 0:
            return None
        cx, cy, cz = np.mean(coords, axis=0)
        return Point3d(float(cx), float(cy), float(cz))

    def coordinates(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __add__(self, other: Vector3d) -> Point3d:
        if isinstance(other, Vector3d):
            return Point3d(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: Union[Point3d, Vector3d]) -> Union[Vector3d, Point3d]:
        if isinstance(other, Point3d):
            return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3d):
            return Point3d(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def vector_to(self, other: Point3d) -> Vector3d:
        return Vector3d(other.x - self.x, other.y - self.y, other.z - self.z)

    def vector_from(self, other: Point3d) -> Vector3d:
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def distance_from(self, other: Point3d) -> float:
        return self.vector_from(other).length

    def squared_distance_from(self, other: Point3d) -> float:
        return self.vector_from(other).squared_length

    def signed_distance_along(self, axis: Axis3d) -> float:
        return self.vector_from(axis.origin_point).component_in(axis.direction)

    def signed_distance_from(self, plane: Plane3d) -> float:
        """Distance from ``plane``; positive on the side its normal points to."""
        return self.vector_from(plane.origin_point).component_in(plane.normal_direction)

    def distance_from_axis(self, axis: Axis3d) -> float:
        v = self.vector_from(axis.origin_point)
        return (v - v.projection_in(axis.direction)).length

    def project_onto_axis(self, axis: Axis3d) -> Point3d:
        t = self.signed_distance_along(axis)
        o = axis.origin_point
        d = axis.direction
        return Point3d(o.x + t * d.x, o.y + t * d.y, o.z + t * d.z)

    def project_onto(self, plane: Plane3d) -> Point3d:
        t = self.signed_distance_from(plane)
        n = plane.normal_direction
        return Point3d(self.x - t * n.x, self.y - t * n.y, self.z - t * n.z)

    def translate_by(self, vector: Vector3d) -> Point3d:
        return Point3d(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def translate_in(self, direction, distance: float) -> Point3d:
        return Point3d(
            self.x + distance * direction.x,
            self.y + distance * direction.y,
            self.z + distance * direction.z,
        )

    def rotate_around(self, axis: Axis3d, angle: float) -> Point3d:
        o = axis.origin_point
        d = axis.direction
        x, y, z = rotate_components(self.x - o.x, self.y - o.y, self.z - o.z, d.x, d.y, d.z, angle)
        return Point3d(o.x + x, o.y + y, o.z + z)

    def mirror_across(self, plane: Plane3d) -> Point3d:
        t = 2.0 * self.signed_distance_from(plane)
        n = plane.normal_direction
        return Point3d(self.x - t * n.x, self.y - t * n.y, self.z - t * n.z)

    def scale_about(self, center: Point3d, k: float) -> Point3d:
        return Point3d(
            center.x + k * (self.x - center.x),
            center.y + k * (self.y - center.y),
            center.z + k * (self.z - center.z),
        )

    def relative_to(self, frame: Frame3d) -> Point3d:
        v = self.vector_from(frame.origin_point).relative_to(frame)
        return Point3d(v.x, v.y, v.z)

    def place_in(self, frame: Frame3d) -> Point3d:
        v = Vector3d(self.x, self.y, self.z).place_in(frame)
        o = frame.origin_point
        return Point3d(o.x + v.x, o.y + v.y, o.z + v.z)

    def equal_within(self, other: Point3d, tolerance: float) -> bool:
        return self.distance_from(other) <= tolerance


def points_to_array(points: Iterable, dim: int) -> np.ndarray:
    """
    Stack point coordinates into an array.

    Parameters
    ----------
    points : iterable of Point2d or Point3d
        Points to convert.
    dim : int
        Expected dimension (2 or 3), used for the empty-input shape.

    Returns
    -------
    np.ndarray
        Array of shape (N, dim).
    """
    coords = [p.coordinates() for p in points]
    if not coords:
        return np.empty((0, dim), dtype=np.float64)
    return np.asarray(coords, dtype=np.float64)
