"""
Vector types for 2D and 3D space.

Vectors carry magnitude and direction but no position, so they are
unaffected by translation. Frame conversions only change their components.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

if TYPE_CHECKING:
    from .axis import Axis2d, Axis3d
    from .direction import Direction2d, Direction3d
    from .frame import Frame2d, Frame3d
    from .plane import Plane3d
    from .point import Point2d


def rotate_components(
    x: float, y: float, z: float,
    ux: float, uy: float, uz: float,
    angle: float
) -> Tuple[float, float, float]:
    """
    Rotate (x, y, z) around the unit vector (ux, uy, uz) by ``angle`` radians.

    Uses Rodrigues' rotation formula:
    v' = v cos(a) + (u x v) sin(a) + u (u . v) (1 - cos(a))
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dot = ux * x + uy * y + uz * z
    k = dot * (1.0 - cos_a)
    return (
        x * cos_a + (uy * z - uz * y) * sin_a + ux * k,
        y * cos_a + (uz * x - ux * z) * sin_a + uy * k,
        z * cos_a + (ux * y - uy * x) * sin_a + uz * k,
    )


@dataclass(frozen=True)
class Vector2d:
    """A vector in 2D space."""
    x: float
    y: float

    @classmethod
    def zero(cls) -> Vector2d:
        return cls(0.0, 0.0)

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> Vector2d:
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    @staticmethod
    def interpolate_from(v1: Vector2d, v2: Vector2d, t: float) -> Vector2d:
        """Linear interpolation; t=0 gives v1, t=1 gives v2."""
        return Vector2d(v1.x + t * (v2.x - v1.x), v1.y + t * (v2.y - v1.y))

    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def __add__(self, other: Vector2d) -> Vector2d:
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2d) -> Vector2d:
        return Vector2d(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2d:
        return Vector2d(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2d:
        if scalar == 0.0:
            raise ZeroDivisionError("Cannot divide a vector by zero")
        return Vector2d(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2d:
        return Vector2d(-self.x, -self.y)

    def scale_by(self, k: float) -> Vector2d:
        return self * k

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other: Vector2d) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2d) -> float:
        """Scalar 2D cross product (z component of the 3D cross product)."""
        return self.x * other.y - self.y * other.x

    def direction(self) -> Optional[Direction2d]:
        """Direction of this vector, or None for the zero vector."""
        from .direction import Direction2d
        return Direction2d.from_vector(self)

    def normalize(self) -> Vector2d:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length
        if length == 0.0:
            return Vector2d.zero()
        return self / length

    def component_in(self, direction: Direction2d) -> float:
        return self.x * direction.x + self.y * direction.y

    def projection_in(self, direction: Direction2d) -> Vector2d:
        c = self.component_in(direction)
        return Vector2d(c * direction.x, c * direction.y)

    def project_onto(self, axis: Axis2d) -> Vector2d:
        return self.projection_in(axis.direction)

    def perpendicular(self) -> Vector2d:
        """Rotate 90 degrees counterclockwise."""
        return Vector2d(-self.y, self.x)

    def rotate_by(self, angle: float) -> Vector2d:
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2d(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def rotate_around(self, center: Point2d, angle: float) -> Vector2d:
        """Vectors have no position, so only the angle matters."""
        return self.rotate_by(angle)

    def translate_by(self, vector: Vector2d) -> Vector2d:
        return self

    def mirror_across(self, axis: Axis2d) -> Vector2d:
        d = axis.direction
        c = 2.0 * (self.x * d.x + self.y * d.y)
        return Vector2d(c * d.x - self.x, c * d.y - self.y)

    def relative_to(self, frame: Frame2d) -> Vector2d:
        xd = frame.x_direction
        yd = frame.y_direction
        return Vector2d(self.x * xd.x + self.y * xd.y, self.x * yd.x + self.y * yd.y)

    def place_in(self, frame: Frame2d) -> Vector2d:
        xd = frame.x_direction
        yd = frame.y_direction
        return Vector2d(self.x * xd.x + self.y * yd.x, self.x * xd.y + self.y * yd.y)

    def equal_within(self, other: Vector2d, tolerance: float) -> bool:
        return (self - other).length <= tolerance


@dataclass(frozen=True)
class Vector3d:
    """A vector in 3D space."""
    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3d:
        return cls(0.0, 0.0, 0.0)

    @staticmethod
    def interpolate_from(v1: Vector3d, v2: Vector3d, t: float) -> Vector3d:
        return Vector3d(
            v1.x + t * (v2.x - v1.x),
            v1.y + t * (v2.y - v1.y),
            v1.z + t * (v2.z - v1.z),
        )

    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __add__(self, other: Vector3d) -> Vector3d:
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3d) -> Vector3d:
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3d:
        return Vector3d(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3d:
        if scalar == 0.0:
            raise ZeroDivisionError("Cannot divide a vector by zero")
        return Vector3d(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3d:
        return Vector3d(-self.x, -self.y, -self.z)

    def scale_by(self, k: float) -> Vector3d:
        return self * k

    @property
    def length(self) -> float:
        return math.sqrt(self.squared_length)

    @property
    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: Vector3d) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3d) -> Vector3d:
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def direction(self) -> Optional[Direction3d]:
        """Direction of this vector, or None for the zero vector."""
        from .direction import Direction3d
        return Direction3d.from_vector(self)

    def normalize(self) -> Vector3d:
        length = self.length
        if length == 0.0:
            return Vector3d.zero()
        return self / length

    def component_in(self, direction: Direction3d) -> float:
        return self.x * direction.x + self.y * direction.y + self.z * direction.z

    def projection_in(self, direction: Direction3d) -> Vector3d:
        c = self.component_in(direction)
        return Vector3d(c * direction.x, c * direction.y, c * direction.z)

    def project_onto(self, plane: Plane3d) -> Vector3d:
        """Remove the component normal to ``plane``."""
        return self - self.projection_in(plane.normal_direction)

    def translate_by(self, vector: Vector3d) -> Vector3d:
        return self

    def rotate_around(self, axis: Axis3d, angle: float) -> Vector3d:
        d = axis.direction
        return Vector3d(*rotate_components(self.x, self.y, self.z, d.x, d.y, d.z, angle))

    def mirror_across(self, plane: Plane3d) -> Vector3d:
        n = plane.normal_direction
        c = 2.0 * self.component_in(n)
        return Vector3d(self.x - c * n.x, self.y - c * n.y, self.z - c * n.z)

    def relative_to(self, frame: Frame3d) -> Vector3d:
        return Vector3d(
            self.component_in(frame.x_direction),
            self.component_in(frame.y_direction),
            self.component_in(frame.z_direction),
        )

    def place_in(self, frame: Frame3d) -> Vector3d:
        xd = frame.x_direction
        yd = frame.y_direction
        zd = frame.z_direction
        return Vector3d(
            self.x * xd.x + self.y * yd.x + self.z * zd.x,
            self.x * xd.y + self.y * yd.y + self.z * zd.y,
            self.x * xd.z + self.y * yd.z + self.z * zd.z,
        )

    def equal_within(self, other: Vector3d, tolerance: float) -> bool:
        return (self - other).length <= tolerance
