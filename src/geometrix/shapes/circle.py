"""
Circles in 2D and 3D.

A 3D circle lies in the plane through its center perpendicular to its
axial direction.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

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


@dataclass(frozen=True)
class Circle2d:
    """
    A circle in 2D space.

    Attributes
    ----------
    center_point : Point2d
        Center of the circle.
    radius : float
        Radius; negative values are stored as their absolute value.
    """
    center_point: Point2d
    radius: float

    def __post_init__(self):
        if self.radius < 0:
            object.__setattr__(self, 'radius', -self.radius)

    @classmethod
    def with_radius(cls, radius: float, center_point: Point2d) -> Circle2d:
        return cls(center_point, radius)

    @classmethod
    def through_points(cls, p1: Point2d, p2: Point2d, p3: Point2d) -> Optional[Circle2d]:
        """
        Circle passing through three points, or None if they are collinear.

        Parameters
        ----------
        p1, p2, p3 : Point2d
            Points on the circle.

        Returns
        -------
        Circle2d or None
            The circumscribed circle.
        """
        # Work relative to p1 for better conditioning
        bx, by = p2.x - p1.x, p2.y - p1.y
        cx, cy = p3.x - p1.x, p3.y - p1.y
        d = 2.0 * (bx * cy - by * cx)
        if d == 0.0:
            return None
        b2 = bx * bx + by * by
        c2 = cx * cx + cy * cy
        ux = (cy * b2 - by * c2) / d
        uy = (bx * c2 - cx * b2) / d
        center = Point2d(p1.x + ux, p1.y + uy)
        return cls(center, math.hypot(ux, uy))

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius

    @property
    def area(self) -> float:
        return math.pi * self.radius ** 2

    @property
    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius

    def contains(self, point: Point2d) -> bool:
        """True if ``point`` is inside or on the circle."""
        return point.squared_distance_from(self.center_point) <= self.radius ** 2

    def point_at(self, angle: float) -> Point2d:
        c = self.center_point
        return Point2d(c.x + self.radius * math.cos(angle), c.y + self.radius * math.sin(angle))

    def bounding_box(self) -> BoundingBox2d:
        c = self.center_point
        r = self.radius
        return BoundingBox2d(c.x - r, c.x + r, c.y - r, c.y + r)

    def translate_by(self, vector: Vector2d) -> Circle2d:
        return Circle2d(self.center_point.translate_by(vector), self.radius)

    def rotate_around(self, center: Point2d, angle: float) -> Circle2d:
        return Circle2d(self.center_point.rotate_around(center, angle), self.radius)

    def mirror_across(self, axis: Axis2d) -> Circle2d:
        return Circle2d(self.center_point.mirror_across(axis), self.radius)

    def scale_about(self, center: Point2d, k: float) -> Circle2d:
        return Circle2d(self.center_point.scale_about(center, k), abs(k) * self.radius)

    def relative_to(self, frame: Frame2d) -> Circle2d:
        return Circle2d(self.center_point.relative_to(frame), self.radius)

    def place_in(self, frame: Frame2d) -> Circle2d:
        return Circle2d(self.center_point.place_in(frame), self.radius)


@dataclass(frozen=True)
class Circle3d:
    """A circle in 3D space."""
    center_point: Point3d
    axial_direction: Direction3d
    radius: float

    def __post_init__(self):
        if self.radius < 0:
            object.__setattr__(self, 'radius', -self.radius)

    @classmethod
    def through_points(cls, p1: Point3d, p2: Point3d, p3: Point3d) -> Optional[Circle3d]:
        """
        Circle through three points, or None if they are collinear.

        The axial direction follows the right-hand rule for p1 -> p2 -> p3.
        """
        a = p1.vector_to(p2)
        b = p1.vector_to(p3)
        n = a.cross(b)
        n2 = n.squared_length
        if n2 == 0.0:
            return None
        # Circumcenter offset from p1: (|a|^2 b - |b|^2 a) x n / (2 |n|^2)
        w = (b * a.squared_length - a * b.squared_length).cross(n) / (2.0 * n2)
        return cls(p1.translate_by(w), n.direction(), w.length)

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius

    @property
    def area(self) -> float:
        return math.pi * self.radius ** 2

    @property
    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius

    def axis(self) -> Axis3d:
        return Axis3d(self.center_point, self.axial_direction)

    def plane(self) -> Plane3d:
        return Plane3d(self.center_point, self.axial_direction)

    def bounding_box(self) -> BoundingBox3d:
        """
        Exact bounding box.

        The half extent along a global axis with unit vector e is
        r * sqrt(1 - (n . e)^2), where n is the axial direction.
        """
        c = self.center_point
        n = self.axial_direction
        r = self.radius
        hx = r * math.sqrt(max(0.0, 1.0 - n.x * n.x))
        hy = r * math.sqrt(max(0.0, 1.0 - n.y * n.y))
        hz = r * math.sqrt(max(0.0, 1.0 - n.z * n.z))
        return BoundingBox3d(c.x - hx, c.x + hx, c.y - hy, c.y + hy, c.z - hz, c.z + hz)

    def translate_by(self, vector: Vector3d) -> Circle3d:
        return Circle3d(self.center_point.translate_by(vector), self.axial_direction, self.radius)

    def rotate_around(self, axis: Axis3d, angle: float) -> Circle3d:
        return Circle3d(
            self.center_point.rotate_around(axis, angle),
            self.axial_direction.rotate_around(axis, angle),
            self.radius,
        )

    def mirror_across(self, plane: Plane3d) -> Circle3d:
        return Circle3d(
            self.center_point.mirror_across(plane),
            self.axial_direction.mirror_across(plane),
            self.radius,
        )

    def scale_about(self, center: Point3d, k: float) -> Circle3d:
        return Circle3d(self.center_point.scale_about(center, k), self.axial_direction, abs(k) * self.radius)

    def relative_to(self, frame: Frame3d) -> Circle3d:
        return Circle3d(
            self.center_point.relative_to(frame),
            self.axial_direction.relative_to(frame),
            self.radius,
        )

    def place_in(self, frame: Frame3d) -> Circle3d:
        return Circle3d(
            self.center_point.place_in(frame),
            self.axial_direction.place_in(frame),
            self.radius,
        )
