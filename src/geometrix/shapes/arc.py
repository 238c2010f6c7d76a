"""
Circular arcs in 2D and 3D.

An arc is defined by a center (or, in 3D, an axis), a start point and a
signed swept angle. Positive swept angles run counterclockwise in 2D and
follow the right-hand rule around the axis direction in 3D.

Mirroring, and conversion relative to or into a left-handed frame, reverse
orientation, so those operations negate the swept angle.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from ..bounds.bounding_box import BoundingBox2d, BoundingBox3d
from ..config import EPS
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

TWO_PI = 2.0 * math.pi


def _angle_in_sweep(angle: float, start_angle: float, swept_angle: float) -> bool:
    """True if ``angle`` is reached when sweeping from ``start_angle``."""
    if abs(swept_angle) >= TWO_PI:
        return True
    if swept_angle >= 0:
        return (angle - start_angle) % TWO_PI <= swept_angle
    return (start_angle - angle) % TWO_PI <= -swept_angle


def _sweep_extremum_parameters(u_component: float, v_component: float, swept_angle: float) -> List[float]:
    """
    Sweep parameters at which one coordinate of an arc is extremal.

    A coordinate along the arc varies as ``u*cos(phi) + v*sin(phi)`` for
    phi in [0, swept_angle]; it is extremal at atan2(v, u) and that angle
    plus pi. Only those falling inside the sweep are returned.
    """
    if u_component == 0.0 and v_component == 0.0:
        return []
    phi = math.atan2(v_component, u_component)
    return [
        candidate for candidate in (phi, phi + math.pi)
        if _angle_in_sweep(candidate, 0.0, swept_angle)
    ]


@dataclass(frozen=True)
class Arc2d:
    """
    A circular arc in 2D space.

    Attributes
    ----------
    center_point : Point2d
        Center of the arc's circle.
    start_point : Point2d
        Point where the arc begins.
    swept_angle : float
        Signed angle in radians; positive is counterclockwise.
    """
    center_point: Point2d
    start_point: Point2d
    swept_angle: float

    @classmethod
    def from_endpoints(cls, start_point: Point2d, end_point: Point2d, swept_angle: float) -> Optional[Arc2d]:
        """
        Arc from ``start_point`` to ``end_point`` sweeping ``swept_angle``.

        Returns None when the endpoints coincide or the swept angle is
        zero or a whole number of turns, since the center is then undefined.
        """
        chord = start_point.vector_to(end_point)
        half_length = 0.5 * chord.length
        half_angle = 0.5 * swept_angle
        sin_half = math.sin(half_angle)
        if half_length == 0.0 or abs(sin_half) < EPS:
            return None
        chord_direction = chord.direction()
        offset = half_length * math.cos(half_angle) / sin_half
        midpoint = Point2d.midpoint(start_point, end_point)
        center = midpoint.translate_in(chord_direction.perpendicular(), offset)
        return cls(center, start_point, swept_angle)

    @classmethod
    def sweeping_from(cls, center_point: Point2d, radius: float, start_angle: float, swept_angle: float) -> Arc2d:
        start = Point2d(
            center_point.x + radius * math.cos(start_angle),
            center_point.y + radius * math.sin(start_angle),
        )
        return cls(center_point, start, swept_angle)

    @property
    def radius(self) -> float:
        return self.start_point.distance_from(self.center_point)

    @property
    def start_angle(self) -> float:
        v = self.center_point.vector_to(self.start_point)
        return math.atan2(v.y, v.x)

    @property
    def length(self) -> float:
        return self.radius * abs(self.swept_angle)

    def point_on(self, t: float) -> Point2d:
        """Point at fraction ``t`` of the sweep (0 = start, 1 = end)."""
        return self.start_point.rotate_around(self.center_point, t * self.swept_angle)

    def end_point(self) -> Point2d:
        return self.point_on(1.0)

    def midpoint(self) -> Point2d:
        return self.point_on(0.5)

    def reverse(self) -> Arc2d:
        return Arc2d(self.center_point, self.end_point(), -self.swept_angle)

    def bounding_box(self) -> BoundingBox2d:
        """
        Exact bounding box of the arc.

        Considers both endpoints plus every point where the X or Y
        coordinate is extremal and that lies within the sweep.
        """
        c = self.center_point
        u = c.vector_to(self.start_point)
        v = u.perpendicular()
        points = [self.start_point, self.end_point()]
        for u_component, v_component in ((u.x, v.x), (u.y, v.y)):
            for phi in _sweep_extremum_parameters(u_component, v_component, self.swept_angle):
                points.append(self.start_point.rotate_around(c, phi))
        return BoundingBox2d.hull_of_points(points)

    def translate_by(self, vector: Vector2d) -> Arc2d:
        return Arc2d(
            self.center_point.translate_by(vector),
            self.start_point.translate_by(vector),
            self.swept_angle,
        )

    def rotate_around(self, center: Point2d, angle: float) -> Arc2d:
        return Arc2d(
            self.center_point.rotate_around(center, angle),
            self.start_point.rotate_around(center, angle),
            self.swept_angle,
        )

    def mirror_across(self, axis: Axis2d) -> Arc2d:
        return Arc2d(
            self.center_point.mirror_across(axis),
            self.start_point.mirror_across(axis),
            -self.swept_angle,
        )

    def scale_about(self, center: Point2d, k: float) -> Arc2d:
        return Arc2d(
            self.center_point.scale_about(center, k),
            self.start_point.scale_about(center, k),
            self.swept_angle,
        )

    def relative_to(self, frame: Frame2d) -> Arc2d:
        swept = self.swept_angle if frame.is_right_handed() else -self.swept_angle
        return Arc2d(self.center_point.relative_to(frame), self.start_point.relative_to(frame), swept)

    def place_in(self, frame: Frame2d) -> Arc2d:
        swept = self.swept_angle if frame.is_right_handed() else -self.swept_angle
        return Arc2d(self.center_point.place_in(frame), self.start_point.place_in(frame), swept)


@dataclass(frozen=True)
class Arc3d:
    """
    A circular arc in 3D space, swept around ``axis``.

    The arc's center is the projection of ``start_point`` onto the axis.
    """
    axis: Axis3d
    start_point: Point3d
    swept_angle: float

    @classmethod
    def on(cls, frame: Frame3d, arc: Arc2d) -> Arc3d:
        """Embed a 2D arc in the XY plane of ``frame``."""
        center = Point3d(arc.center_point.x, arc.center_point.y, 0.0).place_in(frame)
        start = Point3d(arc.start_point.x, arc.start_point.y, 0.0).place_in(frame)
        swept = arc.swept_angle if frame.is_right_handed() else -arc.swept_angle
        return cls(Axis3d(center, frame.z_direction), start, swept)

    def center_point(self) -> Point3d:
        return self.start_point.project_onto_axis(self.axis)

    @property
    def radius(self) -> float:
        return self.start_point.distance_from_axis(self.axis)

    @property
    def length(self) -> float:
        return self.radius * abs(self.swept_angle)

    def point_on(self, t: float) -> Point3d:
        return self.start_point.rotate_around(self.axis, t * self.swept_angle)

    def end_point(self) -> Point3d:
        return self.point_on(1.0)

    def midpoint(self) -> Point3d:
        return self.point_on(0.5)

    def reverse(self) -> Arc3d:
        return Arc3d(self.axis, self.end_point(), -self.swept_angle)

    def bounding_box(self) -> BoundingBox3d:
        c = self.center_point()
        u = c.vector_to(self.start_point)
        v = self.axis.direction.to_vector().cross(u)
        points = [self.start_point, self.end_point()]
        for u_component, v_component in ((u.x, v.x), (u.y, v.y), (u.z, v.z)):
            for phi in _sweep_extremum_parameters(u_component, v_component, self.swept_angle):
                points.append(self.start_point.rotate_around(self.axis, phi))
        return BoundingBox3d.hull_of_points(points)

    def translate_by(self, vector: Vector3d) -> Arc3d:
        return Arc3d(self.axis.translate_by(vector), self.start_point.translate_by(vector), self.swept_angle)

    def rotate_around(self, axis: Axis3d, angle: float) -> Arc3d:
        return Arc3d(
            self.axis.rotate_around(axis, angle),
            self.start_point.rotate_around(axis, angle),
            self.swept_angle,
        )

    def mirror_across(self, plane: Plane3d) -> Arc3d:
        return Arc3d(self.axis.mirror_across(plane), self.start_point.mirror_across(plane), -self.swept_angle)

    def scale_about(self, center: Point3d, k: float) -> Arc3d:
        axis = self.axis.move_to(self.axis.origin_point.scale_about(center, k))
        return Arc3d(axis, self.start_point.scale_about(center, k), self.swept_angle)

    def relative_to(self, frame: Frame3d) -> Arc3d:
        swept = self.swept_angle if frame.is_right_handed() else -self.swept_angle
        return Arc3d(self.axis.relative_to(frame), self.start_point.relative_to(frame), swept)

    def place_in(self, frame: Frame3d) -> Arc3d:
        swept = self.swept_angle if frame.is_right_handed() else -self.swept_angle
        return Arc3d(self.axis.place_in(frame), self.start_point.place_in(frame), swept)
