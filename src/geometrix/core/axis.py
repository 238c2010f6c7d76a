"""
Axes: an origin point plus a direction, in 2D and 3D.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .direction import Direction2d, Direction3d
from .point import Point2d, Point3d
from .vector import Vector2d, Vector3d

if TYPE_CHECKING:
    from .frame import Frame2d, Frame3d
    from .plane import Plane3d


@dataclass(frozen=True)
class Axis2d:
    """An infinite directed line in 2D space."""
    origin_point: Point2d
    direction: Direction2d

    @classmethod
    def x(cls) -> Axis2d:
        return cls(Point2d.origin(), Direction2d.positive_x())

    @classmethod
    def y(cls) -> Axis2d:
        return cls(Point2d.origin(), Direction2d.positive_y())

    @classmethod
    def through(cls, point: Point2d, direction: Direction2d) -> Axis2d:
        return cls(point, direction)

    def reverse(self) -> Axis2d:
        return Axis2d(self.origin_point, self.direction.reverse())

    def move_to(self, point: Point2d) -> Axis2d:
        return Axis2d(point, self.direction)

    def translate_by(self, vector: Vector2d) -> Axis2d:
        return Axis2d(self.origin_point.translate_by(vector), self.direction)

    def scale_about(self, center: Point2d, k: float) -> Axis2d:
        direction = self.direction if k >= 0 else self.direction.reverse()
        return Axis2d(self.origin_point.scale_about(center, k), direction)

    def rotate_around(self, center: Point2d, angle: float) -> Axis2d:
        return Axis2d(self.origin_point.rotate_around(center, angle), self.direction.rotate_by(angle))

    def mirror_across(self, axis: Axis2d) -> Axis2d:
        return Axis2d(self.origin_point.mirror_across(axis), self.direction.mirror_across(axis))

    def relative_to(self, frame: Frame2d) -> Axis2d:
        return Axis2d(self.origin_point.relative_to(frame), self.direction.relative_to(frame))

    def place_in(self, frame: Frame2d) -> Axis2d:
        return Axis2d(self.origin_point.place_in(frame), self.direction.place_in(frame))


@dataclass(frozen=True)
class Axis3d:
    """An infinite directed line in 3D space."""
    origin_point: Point3d
    direction: Direction3d

    @classmethod
    def x(cls) -> Axis3d:
        return cls(Point3d.origin(), Direction3d.positive_x())

    @classmethod
    def y(cls) -> Axis3d:
        return cls(Point3d.origin(), Direction3d.positive_y())

    @classmethod
    def z(cls) -> Axis3d:
        return cls(Point3d.origin(), Direction3d.positive_z())

    @classmethod
    def through(cls, point: Point3d, direction: Direction3d) -> Axis3d:
        return cls(point, direction)

    def reverse(self) -> Axis3d:
        return Axis3d(self.origin_point, self.direction.reverse())

    def move_to(self, point: Point3d) -> Axis3d:
        return Axis3d(point, self.direction)

    def translate_by(self, vector: Vector3d) -> Axis3d:
        return Axis3d(self.origin_point.translate_by(vector), self.direction)

    def scale_about(self, center: Point3d, k: float) -> Axis3d:
        direction = self.direction if k >= 0 else self.direction.reverse()
        return Axis3d(self.origin_point.scale_about(center, k), direction)

    def rotate_around(self, axis: Axis3d, angle: float) -> Axis3d:
        return Axis3d(self.origin_point.rotate_around(axis, angle), self.direction.rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> Axis3d:
        return Axis3d(self.origin_point.mirror_across(plane), self.direction.mirror_across(plane))

    def relative_to(self, frame: Frame3d) -> Axis3d:
        return Axis3d(self.origin_point.relative_to(frame), self.direction.relative_to(frame))

    def place_in(self, frame: Frame3d) -> Axis3d:
        return Axis3d(self.origin_point.place_in(frame), self.direction.place_in(frame))
