"""
Shapes built from core values: segments, triangles, circles, arcs,
polylines and polygons.
"""

from .line_segment import LineSegment2d, LineSegment3d
from .circle import Circle2d, Circle3d
from .triangle import Triangle2d, Triangle3d
from .arc import Arc2d, Arc3d
from .polyline import Polyline2d, Polyline3d
from .polygon import Polygon2d, signed_loop_area

__all__ = [
    'LineSegment2d',
    'LineSegment3d',
    'Circle2d',
    'Circle3d',
    'Triangle2d',
    'Triangle3d',
    'Arc2d',
    'Arc3d',
    'Polyline2d',
    'Polyline3d',
    'Polygon2d',
    'signed_loop_area',
]
