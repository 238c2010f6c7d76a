"""
Direction types: unit vectors in 2D and 3D space.

The constructors trust the caller to pass unit-length components, so that
decoded or stored values are reconstructed bit-for-bit. Use ``from_vector``
(or ``Vector2d.direction()``) to build a direction from arbitrary data.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

from .vector import Vector2d, Vector3d, rotate_components

if TYPE_CHECKING:
    from .axis import Axis2d, Axis3d
    from .frame import Frame2d, Frame3d
    from .plane import Plane3d
    from .point import Point2d


@dataclass(frozen=True)
class Direction2d:
    """A unit-length direction in 2D space."""
    x: float
    y: float

    @classmethod
    def positive_x(cls) -> Direction2d:
        return cls(1.0, 0.0)

    @classmethod
    def positive_y(cls) -> Direction2d:
        return cls(0.0, 1.0)

    @classmethod
    def negative_x(cls) -> Direction2d:
        return cls(-1.0, 0.0)

    @classmethod
    def negative_y(cls) -> Direction2d:
        return cls(0.0, -1.0)

    @classmethod
    def from_angle(cls, angle: float) -> Direction2d:
        """Direction at ``angle`` radians counterclockwise from positive X."""
        return cls(math.cos(angle), math.sin(angle))

    @classmethod
    def from_vector(cls, vector: Vector2d) -> Optional[Direction2d]:
        """Normalize ``vector``; None if it has zero length."""
        length = vector.length
        if length == 0.0:
            return None
        return cls(vector.x / length, vector.y / length)

    @classmethod
    def from_components(cls, x: float, y: float) -> Optional[Direction2d]:
        return cls.from_vector(Vector2d(x, y))

    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_vector(self) -> Vector2d:
        return Vector2d(self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def to_angle(self) -> float:
        """Angle from positive X, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def angle_from(self, other: Direction2d) -> float:
        """Signed angle to rotate ``other`` onto this direction, in (-pi, pi]."""
        cross = other.x * self.y - other.y * self.x
        dot = other.x * self.x + other.y * self.y
        return math.atan2(cross, dot)

    def component_in(self, other: Direction2d) -> float:
        return self.x * other.x + self.y * other.y

    def reverse(self) -> Direction2d:
        return Direction2d(-self.x, -self.y)

    def perpendicular(self) -> Direction2d:
        """Rotate 90 degrees counterclockwise."""
        return Direction2d(-self.y, self.x)

    def rotate_by(self, angle: float) -> Direction2d:
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Direction2d(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def rotate_around(self, center: Point2d, angle: float) -> Direction2d:
        return self.rotate_by(angle)

    def translate_by(self, vector: Vector2d) -> Direction2d:
        """Directions are unchanged by translation."""
        return self

    def mirror_across(self, axis: Axis2d) -> Direction2d:
        d = axis.direction
        c = 2.0 * (self.x * d.x + self.y * d.y)
        return Direction2d(c * d.x - self.x, c * d.y - self.y)

    def relative_to(self, frame: Frame2d) -> Direction2d:
        return Direction2d(self.component_in(frame.x_direction), self.component_in(frame.y_direction))

    def place_in(self, frame: Frame2d) -> Direction2d:
        xd = frame.x_direction
        yd = frame.y_direction
        return Direction2d(self.x * xd.x + self.y * yd.x, self.x * xd.y + self.y * yd.y)

    def equal_within(self, other: Direction2d, angle: float) -> bool:
        return abs(self.angle_from(other)) <= angle


@dataclass(frozen=True)
class Direction3d:
    """A unit-length direction in 3D space."""
    x: float
    y: float
    z: float

    @classmethod
    def positive_x(cls) -> Direction3d:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def positive_y(cls) -> Direction3d:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def positive_z(cls) -> Direction3d:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def negative_x(cls) -> Direction3d:
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def negative_y(cls) -> Direction3d:
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def negative_z(cls) -> Direction3d:
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def from_vector(cls, vector: Vector3d) -> Optional[Direction3d]:
        length = vector.length
        if length == 0.0:
            return None
        return cls(vector.x / length, vector.y / length, vector.z / length)

    @classmethod
    def from_components(cls, x: float, y: float, z: float) -> Optional[Direction3d]:
        return cls.from_vector(Vector3d(x, y, z))

    @classmethod
    def from_azimuth_and_elevation(cls, azimuth: float, elevation: float) -> Direction3d:
        """
        Direction from spherical angles.

        Azimuth is measured counterclockwise from positive X in the XY plane;
        elevation is measured up from the XY plane towards positive Z.
        """
        cos_e = math.cos(elevation)
        return cls(cos_e * math.cos(azimuth), cos_e * math.sin(azimuth), math.sin(elevation))

    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_vector(self) -> Vector3d:
        return Vector3d(self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def component_in(self, other: Direction3d) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def angle_from(self, other: Direction3d) -> float:
        """Unsigned angle between the two directions, in [0, pi]."""
        cross = self.to_vector().cross(other.to_vector()).length
        return math.atan2(cross, self.component_in(other))

    def reverse(self) -> Direction3d:
        return Direction3d(-self.x, -self.y, -self.z)

    def perpendicular_to(self) -> Direction3d:
        """
        An arbitrary direction perpendicular to this one.

        Crosses with the coordinate axis least aligned with this direction,
        which keeps the result well conditioned.
        """
        ax, ay, az = abs(self.x), abs(self.y), abs(self.z)
        if ax <= ay and ax <= az:
            perp = Vector3d(0.0, -self.z, self.y)
        elif ay <= az:
            perp = Vector3d(self.z, 0.0, -self.x)
        else:
            perp = Vector3d(-self.y, self.x, 0.0)
        return Direction3d.from_vector(perp)

    def perpendicular_basis(self) -> Tuple[Direction3d, Direction3d]:
        """
        Two directions (x, y) such that (x, y, self) is a right-handed basis.
        """
        x_dir = self.perpendicular_to()
        y = self.to_vector().cross(x_dir.to_vector())
        return x_dir, Direction3d(y.x, y.y, y.z)

    def translate_by(self, vector: Vector3d) -> Direction3d:
        return self

    def rotate_around(self, axis: Axis3d, angle: float) -> Direction3d:
        d = axis.direction
        return Direction3d(*rotate_components(self.x, self.y, self.z, d.x, d.y, d.z, angle))

    def mirror_across(self, plane: Plane3d) -> Direction3d:
        n = plane.normal_direction
        c = 2.0 * self.component_in(n)
        return Direction3d(self.x - c * n.x, self.y - c * n.y, self.z - c * n.z)

    def relative_to(self, frame: Frame3d) -> Direction3d:
        return Direction3d(
            self.component_in(frame.x_direction),
            self.component_in(frame.y_direction),
            self.component_in(frame.z_direction),
        )

    def place_in(self, frame: Frame3d) -> Direction3d:
        v = self.to_vector().place_in(frame)
        return Direction3d(v.x, v.y, v.z)

    def equal_within(self, other: Direction3d, angle: float) -> bool:
        return self.angle_from(other) <= angle
