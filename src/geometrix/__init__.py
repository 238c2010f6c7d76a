"""
Geometrix - 2D and 3D computational geometry with immutable value types.

This package provides:
- Vectors, points, directions, axes, planes and coordinate frames
- Axis-aligned bounding boxes with hull/intersection/containment algebra
- Line segments, triangles, circles, arcs, polylines and polygons
- Translation, rotation, mirroring, scaling and frame conversions
- JSON encode/decode round-trips for every value type

Main Types
----------
Point2d, Point3d : positions
Frame2d, Frame3d : coordinate systems for relative_to/place_in
BoundingBox2d, BoundingBox3d : axis-aligned boxes
Polygon2d : polygon with optional holes

Example
-------
>>> from geometrix import BoundingBox3d, Point3d

>>> a = BoundingBox3d(0, 3, 0, 2, 0, 1)
>>> b = BoundingBox3d(0, 3, 1, 4, -1, 2)
>>> a.overlaps(b)
True
>>> a.hull(b).contains(Point3d(1.0, 3.0, -0.5))
True
"""

from .core import (
    Vector2d,
    Vector3d,
    Direction2d,
    Direction3d,
    Point2d,
    Point3d,
    Axis2d,
    Axis3d,
    Plane3d,
    Frame2d,
    Frame3d,
)
from .bounds import BoundingBox2d, BoundingBox3d, hull, hull_of, intersection, overlaps, is_contained_in
from .shapes import (
    LineSegment2d,
    LineSegment3d,
    Triangle2d,
    Triangle3d,
    Circle2d,
    Circle3d,
    Arc2d,
    Arc3d,
    Polyline2d,
    Polyline3d,
    Polygon2d,
)
from .codec import encode, decode, encode_tagged, decode_tagged, dumps, loads
from .errors import GeometryError, DecodeError

__all__ = [
    # Core values
    'Vector2d',
    'Vector3d',
    'Direction2d',
    'Direction3d',
    'Point2d',
    'Point3d',
    'Axis2d',
    'Axis3d',
    'Plane3d',
    'Frame2d',
    'Frame3d',
    # Bounding boxes
    'BoundingBox2d',
    'BoundingBox3d',
    'hull',
    'hull_of',
    'intersection',
    'overlaps',
    'is_contained_in',
    # Shapes
    'LineSegment2d',
    'LineSegment3d',
    'Triangle2d',
    'Triangle3d',
    'Circle2d',
    'Circle3d',
    'Arc2d',
    'Arc3d',
    'Polyline2d',
    'Polyline3d',
    'Polygon2d',
    # JSON
    'encode',
    'decode',
    'encode_tagged',
    'decode_tagged',
    'dumps',
    'loads',
    # Errors
    'GeometryError',
    'DecodeError',
]
