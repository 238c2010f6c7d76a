"""
Core value types: vectors, directions, points, axes, planes and frames.
"""

from .vector import Vector2d, Vector3d
from .direction import Direction2d, Direction3d
from .point import Point2d, Point3d, points_to_array
from .axis import Axis2d, Axis3d
from .plane import Plane3d
from .frame import Frame2d, Frame3d

__all__ = [
    'Vector2d',
    'Vector3d',
    'Direction2d',
    'Direction3d',
    'Point2d',
    'Point3d',
    'points_to_array',
    'Axis2d',
    'Axis3d',
    'Plane3d',
    'Frame2d',
    'Frame3d',
]
