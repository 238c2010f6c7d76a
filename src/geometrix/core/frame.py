"""
Coordinate frames in 2D and 3D.

A frame is an origin point plus orthonormal basis directions. Any value
can be expressed relative to a frame (``relative_to``) and mapped back to
global coordinates (``place_in``); the two operations are inverses.

Frames may be left-handed (for example after mirroring). Orientation
dependent values such as an arc's swept angle check ``is_right_handed``
when they are converted.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .axis import Axis2d, Axis3d
from .direction import Direction2d, Direction3d
from .plane import Plane3d
from .point import Point2d, Point3d
from .vector import Vector2d, Vector3d


@dataclass(frozen=True)
class Frame2d:
    """A 2D coordinate system."""
    origin_point: Point2d
    x_direction: Direction2d
    y_direction: Direction2d

    @classmethod
    def at_origin(cls) -> Frame2d:
        return cls(Point2d.origin(), Direction2d.positive_x(), Direction2d.positive_y())

    @classmethod
    def at_point(cls, point: Point2d) -> Frame2d:
        return cls(point, Direction2d.positive_x(), Direction2d.positive_y())

    @classmethod
    def with_x_direction(cls, point: Point2d, x_direction: Direction2d) -> Frame2d:
        """Right-handed frame whose X axis points along ``x_direction``."""
        return cls(point, x_direction, x_direction.perpendicular())

    @classmethod
    def with_y_direction(cls, point: Point2d, y_direction: Direction2d) -> Frame2d:
        """Right-handed frame whose Y axis points along ``y_direction``."""
        return cls(point, Direction2d(y_direction.y, -y_direction.x), y_direction)

    @classmethod
    def with_angle(cls, point: Point2d, angle: float) -> Frame2d:
        return cls.with_x_direction(point, Direction2d.from_angle(angle))

    def is_right_handed(self) -> bool:
        return self.x_direction.x * self.y_direction.y - self.x_direction.y * self.y_direction.x > 0

    def x_axis(self) -> Axis2d:
        return Axis2d(self.origin_point, self.x_direction)

    def y_axis(self) -> Axis2d:
        return Axis2d(self.origin_point, self.y_direction)

    def reverse_x(self) -> Frame2d:
        return Frame2d(self.origin_point, self.x_direction.reverse(), self.y_direction)

    def reverse_y(self) -> Frame2d:
        return Frame2d(self.origin_point, self.x_direction, self.y_direction.reverse())

    def move_to(self, point: Point2d) -> Frame2d:
        return Frame2d(point, self.x_direction, self.y_direction)

    def translate_by(self, vector: Vector2d) -> Frame2d:
        return Frame2d(self.origin_point.translate_by(vector), self.x_direction, self.y_direction)

    def scale_about(self, center: Point2d, k: float) -> Frame2d:
        """Scale the origin; a negative factor reverses both basis directions."""
        origin = self.origin_point.scale_about(center, k)
        if k >= 0:
            return self.move_to(origin)
        return Frame2d(origin, self.x_direction.reverse(), self.y_direction.reverse())

    def rotate_by(self, angle: float) -> Frame2d:
        """Rotate the basis directions around the frame's own origin."""
        return Frame2d(self.origin_point, self.x_direction.rotate_by(angle), self.y_direction.rotate_by(angle))

    def rotate_around(self, center: Point2d, angle: float) -> Frame2d:
        return Frame2d(
            self.origin_point.rotate_around(center, angle),
            self.x_direction.rotate_by(angle),
            self.y_direction.rotate_by(angle),
        )

    def mirror_across(self, axis: Axis2d) -> Frame2d:
        """Mirror the frame; the result has the opposite handedness."""
        return Frame2d(
            self.origin_point.mirror_across(axis),
            self.x_direction.mirror_across(axis),
            self.y_direction.mirror_across(axis),
        )

    def relative_to(self, frame: Frame2d) -> Frame2d:
        return Frame2d(
            self.origin_point.relative_to(frame),
            self.x_direction.relative_to(frame),
            self.y_direction.relative_to(frame),
        )

    def place_in(self, frame: Frame2d) -> Frame2d:
        return Frame2d(
            self.origin_point.place_in(frame),
            self.x_direction.place_in(frame),
            self.y_direction.place_in(frame),
        )

    def to_matrix(self) -> np.ndarray:
        """
        Homogeneous matrix mapping local coordinates to global ones.

        Returns
        -------
        np.ndarray
            Array of shape (3, 3); columns are x_direction, y_direction
            and the origin point.
        """
        return np.array([
            [self.x_direction.x, self.y_direction.x, self.origin_point.x],
            [self.x_direction.y, self.y_direction.y, self.origin_point.y],
            [0.0, 0.0, 1.0],
        ])


@dataclass(frozen=True)
class Frame3d:
    """A 3D coordinate system."""
    origin_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    z_direction: Direction3d

    @classmethod
    def at_origin(cls) -> Frame3d:
        return cls(
            Point3d.origin(),
            Direction3d.positive_x(),
            Direction3d.positive_y(),
            Direction3d.positive_z(),
        )

    @classmethod
    def at_point(cls, point: Point3d) -> Frame3d:
        return cls(point, Direction3d.positive_x(), Direction3d.positive_y(), Direction3d.positive_z())

    @classmethod
    def with_z_direction(cls, point: Point3d, z_direction: Direction3d) -> Frame3d:
        """Right-handed frame with the given Z direction and arbitrary X/Y."""
        x_direction, y_direction = z_direction.perpendicular_basis()
        return cls(point, x_direction, y_direction, z_direction)

    def is_right_handed(self) -> bool:
        x = self.x_direction.to_vector()
        y = self.y_direction.to_vector()
        return x.cross(y).dot(self.z_direction.to_vector()) > 0

    def x_axis(self) -> Axis3d:
        return Axis3d(self.origin_point, self.x_direction)

    def y_axis(self) -> Axis3d:
        return Axis3d(self.origin_point, self.y_direction)

    def z_axis(self) -> Axis3d:
        return Axis3d(self.origin_point, self.z_direction)

    def xy_plane(self) -> Plane3d:
        return Plane3d(self.origin_point, self.z_direction)

    def yz_plane(self) -> Plane3d:
        return Plane3d(self.origin_point, self.x_direction)

    def zx_plane(self) -> Plane3d:
        return Plane3d(self.origin_point, self.y_direction)

    def reverse_x(self) -> Frame3d:
        return Frame3d(self.origin_point, self.x_direction.reverse(), self.y_direction, self.z_direction)

    def reverse_y(self) -> Frame3d:
        return Frame3d(self.origin_point, self.x_direction, self.y_direction.reverse(), self.z_direction)

    def reverse_z(self) -> Frame3d:
        return Frame3d(self.origin_point, self.x_direction, self.y_direction, self.z_direction.reverse())

    def move_to(self, point: Point3d) -> Frame3d:
        return Frame3d(point, self.x_direction, self.y_direction, self.z_direction)

    def translate_by(self, vector: Vector3d) -> Frame3d:
        return self.move_to(self.origin_point.translate_by(vector))

    def scale_about(self, center: Point3d, k: float) -> Frame3d:
        """
        Scale the origin about ``center``.

        A negative factor is a point reflection, which reverses all three
        basis directions and so flips the handedness.
        """
        origin = self.origin_point.scale_about(center, k)
        if k >= 0:
            return self.move_to(origin)
        return Frame3d(
            origin,
            self.x_direction.reverse(),
            self.y_direction.reverse(),
            self.z_direction.reverse(),
        )

    def rotate_around(self, axis: Axis3d, angle: float) -> Frame3d:
        return Frame3d(
            self.origin_point.rotate_around(axis, angle),
            self.x_direction.rotate_around(axis, angle),
            self.y_direction.rotate_around(axis, angle),
            self.z_direction.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: Plane3d) -> Frame3d:
        """Mirror the frame; the result has the opposite handedness."""
        return Frame3d(
            self.origin_point.mirror_across(plane),
            self.x_direction.mirror_across(plane),
            self.y_direction.mirror_across(plane),
            self.z_direction.mirror_across(plane),
        )

    def relative_to(self, frame: Frame3d) -> Frame3d:
        return Frame3d(
            self.origin_point.relative_to(frame),
            self.x_direction.relative_to(frame),
            self.y_direction.relative_to(frame),
            self.z_direction.relative_to(frame),
        )

    def place_in(self, frame: Frame3d) -> Frame3d:
        return Frame3d(
            self.origin_point.place_in(frame),
            self.x_direction.place_in(frame),
            self.y_direction.place_in(frame),
            self.z_direction.place_in(frame),
        )

    def to_matrix(self) -> np.ndarray:
        """Homogeneous (4, 4) matrix mapping local coordinates to global ones."""
        o = self.origin_point
        x, y, z = self.x_direction, self.y_direction, self.z_direction
        return np.array([
            [x.x, y.x, z.x, o.x],
            [x.y, y.y, z.y, o.y],
            [x.z, y.z, z.z, o.z],
            [0.0, 0.0, 0.0, 1.0],
        ])
