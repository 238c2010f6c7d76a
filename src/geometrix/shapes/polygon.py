"""
Polygons with optional holes.

The outer loop is an ordered vertex list, implicitly closed (the last
vertex connects back to the first). Vertex order is preserved exactly as
given, so the signed area reports orientation:

- counterclockwise_area > 0 for a counterclockwise outer loop
- clockwise_area == -counterclockwise_area
- area == abs(counterclockwise_area)

Holes always reduce the magnitude of the area, whatever their orientation.
Polygons with fewer than three vertices have zero area and contain no
points.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import ConvexHull, QhullError
from shapely.geometry import Point, Polygon

from ..bounds.bounding_box import BoundingBox2d
from ..config import EPS
from ..core import Axis2d, Frame2d, Point2d, Vector2d, points_to_array
from .line_segment import LineSegment2d


Loop = Tuple[Point2d, ...]


def signed_loop_area(loop: Sequence[Point2d]) -> float:
    """
    Signed area of a closed loop using the shoelace formula.

    Parameters
    ----------
    loop : sequence of Point2d
        Loop vertices; the closing edge is implicit.

    Returns
    -------
    float
        Positive for counterclockwise loops, negative for clockwise ones,
        zero for loops with fewer than 3 vertices.
    """
    if len(loop) < 3:
        return 0.0
    coords = points_to_array(loop, 2)
    x = coords[:, 0]
    y = coords[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def _loop_moments(loop: Sequence[Point2d]) -> Tuple[float, float, float]:
    """Signed area and first moments (area * centroid x, y) of a loop."""
    if len(loop) < 3:
        return 0.0, 0.0, 0.0
    coords = points_to_array(loop, 2)
    x = coords[:, 0]
    y = coords[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    cross = x * y_next - x_next * y
    area = 0.5 * np.sum(cross)
    mx = np.sum((x + x_next) * cross) / 6.0
    my = np.sum((y + y_next) * cross) / 6.0
    return float(area), float(mx), float(my)


def _loop_edges(loop: Sequence[Point2d]) -> List[LineSegment2d]:
    if len(loop) < 2:
        return []
    return [LineSegment2d(loop[i], loop[(i + 1) % len(loop)]) for i in range(len(loop))]


@dataclass(frozen=True)
class Polygon2d:
    """
    A polygon given by its outer loop and optional inner loops (holes).

    Attributes
    ----------
    vertices : tuple of Point2d
        Outer loop vertices, implicitly closed.
    inner_loops : tuple of tuple of Point2d
        Hole loops, each implicitly closed.
    """
    vertices: Loop
    inner_loops: Tuple[Loop, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'vertices', tuple(self.vertices))
        object.__setattr__(self, 'inner_loops', tuple(tuple(loop) for loop in self.inner_loops))

    @classmethod
    def convex_hull(cls, points: Iterable[Point2d]) -> Polygon2d:
        """
        Convex hull of a set of points, in counterclockwise order.

        Uses scipy's Qhull wrapper. Inputs that are too small or degenerate
        for Qhull (fewer than 3 points, or all collinear) give a polygon of
        the extreme points instead, which has zero area.

        Parameters
        ----------
        points : iterable of Point2d
            Points to enclose.

        Returns
        -------
        Polygon2d
            Hull polygon without holes.
        """
        points = list(points)
        if len(points) < 3:
            return cls(tuple(points))
        coords = points_to_array(points, 2)
        try:
            hull = ConvexHull(coords)
        except QhullError:
            # Collinear or coincident input: keep the lexicographic extremes
            order = np.lexsort((coords[:, 1], coords[:, 0]))
            first, last = points[order[0]], points[order[-1]]
            if first == last:
                return cls((first,))
            return cls((first, last))
        return cls(tuple(points[i] for i in hull.vertices))

    def outer_loop(self) -> Loop:
        return self.vertices

    def all_vertices(self) -> List[Point2d]:
        result = list(self.vertices)
        for loop in self.inner_loops:
            result.extend(loop)
        return result

    def edges(self) -> List[LineSegment2d]:
        result = _loop_edges(self.vertices)
        for loop in self.inner_loops:
            result.extend(_loop_edges(loop))
        return result

    @property
    def counterclockwise_area(self) -> float:
        """
        Signed area of the outer loop, reduced in magnitude by the holes.

        Holes never flip the sign, and a zero-area outer loop gives zero
        whatever the holes are.
        """
        outer = signed_loop_area(self.vertices)
        if outer == 0.0:
            return 0.0
        holes = sum(abs(signed_loop_area(loop)) for loop in self.inner_loops)
        if outer > 0:
            return max(outer - holes, 0.0)
        return min(outer + holes, 0.0)

    @property
    def clockwise_area(self) -> float:
        return -self.counterclockwise_area

    @property
    def area(self) -> float:
        return abs(self.counterclockwise_area)

    @property
    def perimeter(self) -> float:
        return sum(edge.length for edge in self.edges())

    def centroid(self) -> Optional[Point2d]:
        """
        Area centroid, or None if the polygon has zero area.

        Each loop's moments are oriented so the outer loop counts
        positively and the holes negatively.
        """
        area, mx, my = _loop_moments(self.vertices)
        if area == 0.0:
            return None
        sign = 1.0 if area >= 0 else -1.0
        total_area, total_mx, total_my = sign * area, sign * mx, sign * my
        for loop in self.inner_loops:
            a, x, y = _loop_moments(loop)
            s = -1.0 if a >= 0 else 1.0
            total_area += s * a
            total_mx += s * x
            total_my += s * y
        if total_area < EPS:
            return None
        return Point2d(total_mx / total_area, total_my / total_area)

    def bounding_box(self) -> Optional[BoundingBox2d]:
        """Box around the outer loop, or None for an empty polygon."""
        return BoundingBox2d.hull_of_points(self.vertices)

    def to_array(self) -> np.ndarray:
        """Outer loop vertices as an array of shape (M, 2)."""
        return points_to_array(self.vertices, 2)

    def to_shapely(self) -> Polygon:
        return Polygon(
            [p.coordinates() for p in self.vertices],
            [[p.coordinates() for p in loop] for loop in self.inner_loops if len(loop) >= 3],
        )

    def contains(self, point: Point2d) -> bool:
        """
        True if ``point`` is inside or on the boundary of the polygon.

        Uses Shapely for robust containment with holes; points inside a
        hole are outside the polygon.
        """
        if len(self.vertices) < 3:
            return False
        shapely_poly = self.to_shapely()
        if not shapely_poly.is_valid:
            # Self-intersecting loops: repair before testing
            shapely_poly = shapely_poly.buffer(0)
        shapely_point = Point(point.x, point.y)
        return shapely_poly.contains(shapely_point) or shapely_poly.touches(shapely_point)

    def with_ccw_orientation(self) -> Polygon2d:
        """Same polygon with a counterclockwise outer loop and clockwise holes."""
        outer = self.vertices
        if signed_loop_area(outer) < 0:
            outer = outer[::-1]
        holes = tuple(
            loop[::-1] if signed_loop_area(loop) > 0 else loop
            for loop in self.inner_loops
        )
        return Polygon2d(outer, holes)

    def map_vertices(self, fn) -> Polygon2d:
        return Polygon2d(
            tuple(fn(p) for p in self.vertices),
            tuple(tuple(fn(p) for p in loop) for loop in self.inner_loops),
        )

    def translate_by(self, vector: Vector2d) -> Polygon2d:
        return self.map_vertices(lambda p: p.translate_by(vector))

    def rotate_around(self, center: Point2d, angle: float) -> Polygon2d:
        return self.map_vertices(lambda p: p.rotate_around(center, angle))

    def mirror_across(self, axis: Axis2d) -> Polygon2d:
        return self.map_vertices(lambda p: p.mirror_across(axis))

    def scale_about(self, center: Point2d, k: float) -> Polygon2d:
        return self.map_vertices(lambda p: p.scale_about(center, k))

    def relative_to(self, frame: Frame2d) -> Polygon2d:
        return self.map_vertices(lambda p: p.relative_to(frame))

    def place_in(self, frame: Frame2d) -> Polygon2d:
        return self.map_vertices(lambda p: p.place_in(frame))
