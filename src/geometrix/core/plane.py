"""
Planes in 3D space, defined by an origin point and a normal direction.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .axis import Axis3d
from .direction import Direction3d
from .point import Point3d
from .vector import Vector3d

if TYPE_CHECKING:
    from .frame import Frame3d


@dataclass(frozen=True)
class Plane3d:
    """An infinite plane in 3D space."""
    origin_point: Point3d
    normal_direction: Direction3d

    @classmethod
    def xy(cls) -> Plane3d:
        return cls(Point3d.origin(), Direction3d.positive_z())

    @classmethod
    def yz(cls) -> Plane3d:
        return cls(Point3d.origin(), Direction3d.positive_x())

    @classmethod
    def zx(cls) -> Plane3d:
        return cls(Point3d.origin(), Direction3d.positive_y())

    @classmethod
    def through(cls, point: Point3d, normal: Direction3d) -> Plane3d:
        return cls(point, normal)

    @classmethod
    def through_points(cls, p1: Point3d, p2: Point3d, p3: Point3d) -> Optional[Plane3d]:
        """
        Plane through three points, or None if they are collinear.

        The normal follows the right-hand rule for p1 -> p2 -> p3.
        """
        normal = p1.vector_to(p2).cross(p1.vector_to(p3)).direction()
        if normal is None:
            return None
        return cls(p1, normal)

    def normal_axis(self) -> Axis3d:
        return Axis3d(self.origin_point, self.normal_direction)

    def reverse_normal(self) -> Plane3d:
        return Plane3d(self.origin_point, self.normal_direction.reverse())

    def offset_by(self, distance: float) -> Plane3d:
        return Plane3d(self.origin_point.translate_in(self.normal_direction, distance), self.normal_direction)

    def move_to(self, point: Point3d) -> Plane3d:
        return Plane3d(point, self.normal_direction)

    def translate_by(self, vector: Vector3d) -> Plane3d:
        return Plane3d(self.origin_point.translate_by(vector), self.normal_direction)

    def scale_about(self, center: Point3d, k: float) -> Plane3d:
        normal = self.normal_direction if k >= 0 else self.normal_direction.reverse()
        return Plane3d(self.origin_point.scale_about(center, k), normal)

    def rotate_around(self, axis: Axis3d, angle: float) -> Plane3d:
        return Plane3d(
            self.origin_point.rotate_around(axis, angle),
            self.normal_direction.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: Plane3d) -> Plane3d:
        return Plane3d(self.origin_point.mirror_across(plane), self.normal_direction.mirror_across(plane))

    def relative_to(self, frame: Frame3d) -> Plane3d:
        return Plane3d(self.origin_point.relative_to(frame), self.normal_direction.relative_to(frame))

    def place_in(self, frame: Frame3d) -> Plane3d:
        return Plane3d(self.origin_point.place_in(frame), self.normal_direction.place_in(frame))
