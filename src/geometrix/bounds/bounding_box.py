"""
Axis-aligned bounding boxes in 2D and 3D.

Boxes are normalized on construction: if a minimum is given larger than
its maximum the two are swapped, so ``min <= max`` always holds on every
axis. All comparisons are inclusive, so boxes that merely touch along an
edge or face overlap, and their intersection is a degenerate box of zero
width on that axis.

Partial operations (``hull_of`` on an empty list, ``intersection`` of
disjoint boxes) return None rather than raising.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Optional, Tuple, Union

import numpy as np

from ..core.point import Point2d, Point3d, points_to_array
from ..core.vector import Vector2d, Vector3d

logger = logging.getLogger(__name__)


def _ranges_overlap(a_min: float, a_max: float, b_min: float, b_max: float) -> bool:
    return a_min <= b_max and b_min <= a_max


@dataclass(frozen=True)
class BoundingBox2d:
    """
    Axis-aligned 2D box.

    Attributes
    ----------
    min_x, max_x, min_y, max_y : float
        Extrema along each axis. Swapped values are reordered.
    """
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self):
        if self.min_x > self.max_x:
            lo, hi = self.max_x, self.min_x
            object.__setattr__(self, 'min_x', lo)
            object.__setattr__(self, 'max_x', hi)
        if self.min_y > self.max_y:
            lo, hi = self.max_y, self.min_y
            object.__setattr__(self, 'min_y', lo)
            object.__setattr__(self, 'max_y', hi)

    @classmethod
    def singleton(cls, point: Point2d) -> BoundingBox2d:
        return cls(point.x, point.x, point.y, point.y)

    @classmethod
    def from_corners(cls, p1: Point2d, p2: Point2d) -> BoundingBox2d:
        return cls(p1.x, p2.x, p1.y, p2.y)

    @classmethod
    def hull_of_points(cls, points: Iterable[Point2d]) -> Optional[BoundingBox2d]:
        """
        Smallest box containing every point.

        Parameters
        ----------
        points : iterable of Point2d
            Points to enclose.

        Returns
        -------
        BoundingBox2d or None
            None if no points were given.
        """
        coords = points_to_array(points, 2)
        if len(coords) == 0:
            return None
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        return cls(float(lo[0]), float(hi[0]), float(lo[1]), float(hi[1]))

    @classmethod
    def hull_of(cls, boxes: Iterable[BoundingBox2d]) -> Optional[BoundingBox2d]:
        """Fold ``hull`` over ``boxes``; None for an empty input."""
        return hull_of(boxes)

    def extrema(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.max_x, self.min_y, self.max_y)

    def dimensions(self) -> Tuple[float, float]:
        return (self.max_x - self.min_x, self.max_y - self.min_y)

    @property
    def mid_x(self) -> float:
        return self.min_x + 0.5 * (self.max_x - self.min_x)

    @property
    def mid_y(self) -> float:
        return self.min_y + 0.5 * (self.max_y - self.min_y)

    def centroid(self) -> Point2d:
        return Point2d(self.mid_x, self.mid_y)

    def contains(self, point: Point2d) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def overlaps(self, other: BoundingBox2d) -> bool:
        return (
            _ranges_overlap(self.min_x, self.max_x, other.min_x, other.max_x)
            and _ranges_overlap(self.min_y, self.max_y, other.min_y, other.max_y)
        )

    def is_contained_in(self, other: BoundingBox2d) -> bool:
        """True if this box lies entirely within ``other``."""
        return (
            other.min_x <= self.min_x and self.max_x <= other.max_x
            and other.min_y <= self.min_y and self.max_y <= other.max_y
        )

    def hull(self, other: BoundingBox2d) -> BoundingBox2d:
        return BoundingBox2d(
            min(self.min_x, other.min_x),
            max(self.max_x, other.max_x),
            min(self.min_y, other.min_y),
            max(self.max_y, other.max_y),
        )

    def intersection(self, other: BoundingBox2d) -> Optional[BoundingBox2d]:
        if not self.overlaps(other):
            return None
        return BoundingBox2d(
            max(self.min_x, other.min_x),
            min(self.max_x, other.max_x),
            max(self.min_y, other.min_y),
            min(self.max_y, other.max_y),
        )

    def translate_by(self, vector: Vector2d) -> BoundingBox2d:
        return BoundingBox2d(
            self.min_x + vector.x, self.max_x + vector.x,
            self.min_y + vector.y, self.max_y + vector.y,
        )

    def scale_about(self, center: Point2d, k: float) -> BoundingBox2d:
        # Negative k swaps the extrema; the constructor reorders them.
        return BoundingBox2d(
            center.x + k * (self.min_x - center.x),
            center.x + k * (self.max_x - center.x),
            center.y + k * (self.min_y - center.y),
            center.y + k * (self.max_y - center.y),
        )

    def expand_by(self, margin: float) -> BoundingBox2d:
        m = abs(margin)
        return BoundingBox2d(self.min_x - m, self.max_x + m, self.min_y - m, self.max_y + m)

    def to_array(self) -> np.ndarray:
        """Array of shape (2, 2): row 0 holds the minima, row 1 the maxima."""
        return np.array([[self.min_x, self.min_y], [self.max_x, self.max_y]], dtype=np.float64)


@dataclass(frozen=True)
class BoundingBox3d:
    """
    Axis-aligned 3D box.

    Attributes
    ----------
    min_x, max_x, min_y, max_y, min_z, max_z : float
        Extrema along each axis. Swapped values are reordered.
    """
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float

    def __post_init__(self):
        for axis in ('x', 'y', 'z'):
            lo = getattr(self, 'min_' + axis)
            hi = getattr(self, 'max_' + axis)
            if lo > hi:
                object.__setattr__(self, 'min_' + axis, hi)
                object.__setattr__(self, 'max_' + axis, lo)

    @classmethod
    def singleton(cls, point: Point3d) -> BoundingBox3d:
        return cls(point.x, point.x, point.y, point.y, point.z, point.z)

    @classmethod
    def from_corners(cls, p1: Point3d, p2: Point3d) -> BoundingBox3d:
        return cls(p1.x, p2.x, p1.y, p2.y, p1.z, p2.z)

    @classmethod
    def hull_of_points(cls, points: Iterable[Point3d]) -> Optional[BoundingBox3d]:
        coords = points_to_array(points, 3)
        if len(coords) == 0:
            return None
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        return cls(
            float(lo[0]), float(hi[0]),
            float(lo[1]), float(hi[1]),
            float(lo[2]), float(hi[2]),
        )

    @classmethod
    def hull_of(cls, boxes: Iterable[BoundingBox3d]) -> Optional[BoundingBox3d]:
        return hull_of(boxes)

    def extrema(self) -> Tuple[float, float, float, float, float, float]:
        return (self.min_x, self.max_x, self.min_y, self.max_y, self.min_z, self.max_z)

    def dimensions(self) -> Tuple[float, float, float]:
        return (self.max_x - self.min_x, self.max_y - self.min_y, self.max_z - self.min_z)

    @property
    def mid_x(self) -> float:
        return self.min_x + 0.5 * (self.max_x - self.min_x)

    @property
    def mid_y(self) -> float:
        return self.min_y + 0.5 * (self.max_y - self.min_y)

    @property
    def mid_z(self) -> float:
        return self.min_z + 0.5 * (self.max_z - self.min_z)

    def centroid(self) -> Point3d:
        return Point3d(self.mid_x, self.mid_y, self.mid_z)

    def contains(self, point: Point3d) -> bool:
        return (
            self.min_x <= point.x <= self.max_x
            and self.min_y <= point.y <= self.max_y
            and self.min_z <= point.z <= self.max_z
        )

    def overlaps(self, other: BoundingBox3d) -> bool:
        return (
            _ranges_overlap(self.min_x, self.max_x, other.min_x, other.max_x)
            and _ranges_overlap(self.min_y, self.max_y, other.min_y, other.max_y)
            and _ranges_overlap(self.min_z, self.max_z, other.min_z, other.max_z)
        )

    def is_contained_in(self, other: BoundingBox3d) -> bool:
        return (
            other.min_x <= self.min_x and self.max_x <= other.max_x
            and other.min_y <= self.min_y and self.max_y <= other.max_y
            and other.min_z <= self.min_z and self.max_z <= other.max_z
        )

    def hull(self, other: BoundingBox3d) -> BoundingBox3d:
        return BoundingBox3d(
            min(self.min_x, other.min_x),
            max(self.max_x, other.max_x),
            min(self.min_y, other.min_y),
            max(self.max_y, other.max_y),
            min(self.min_z, other.min_z),
            max(self.max_z, other.max_z),
        )

    def intersection(self, other: BoundingBox3d) -> Optional[BoundingBox3d]:
        if not self.overlaps(other):
            return None
        return BoundingBox3d(
            max(self.min_x, other.min_x),
            min(self.max_x, other.max_x),
            max(self.min_y, other.min_y),
            min(self.max_y, other.max_y),
            max(self.min_z, other.min_z),
            min(self.max_z, other.max_z),
        )

    def translate_by(self, vector: Vector3d) -> BoundingBox3d:
        return BoundingBox3d(
            self.min_x + vector.x, self.max_x + vector.x,
            self.min_y + vector.y, self.max_y + vector.y,
            self.min_z + vector.z, self.max_z + vector.z,
        )

    def scale_about(self, center: Point3d, k: float) -> BoundingBox3d:
        return BoundingBox3d(
            center.x + k * (self.min_x - center.x),
            center.x + k * (self.max_x - center.x),
            center.y + k * (self.min_y - center.y),
            center.y + k * (self.max_y - center.y),
            center.z + k * (self.min_z - center.z),
            center.z + k * (self.max_z - center.z),
        )

    def expand_by(self, margin: float) -> BoundingBox3d:
        m = abs(margin)
        return BoundingBox3d(
            self.min_x - m, self.max_x + m,
            self.min_y - m, self.max_y + m,
            self.min_z - m, self.max_z + m,
        )

    def to_array(self) -> np.ndarray:
        """Array of shape (2, 3): row 0 holds the minima, row 1 the maxima."""
        return np.array([
            [self.min_x, self.min_y, self.min_z],
            [self.max_x, self.max_y, self.max_z],
        ], dtype=np.float64)


BoundingBox = Union[BoundingBox2d, BoundingBox3d]


# Free-function forms of the box algebra. Argument order follows the
# mathematical reading: contains(point, box), is_contained_in(outer, inner).

def hull(a: BoundingBox, b: BoundingBox) -> BoundingBox:
    """Smallest box containing both ``a`` and ``b``."""
    return a.hull(b)


def hull_of(boxes: Iterable[BoundingBox]) -> Optional[BoundingBox]:
    """
    Smallest box containing every box in ``boxes``.

    Parameters
    ----------
    boxes : iterable of BoundingBox2d or BoundingBox3d
        Boxes of a single dimension.

    Returns
    -------
    BoundingBox2d, BoundingBox3d or None
        None if ``boxes`` is empty.
    """
    boxes = list(boxes)
    if not boxes:
        logger.debug("hull_of called with no boxes")
        return None
    return reduce(hull, boxes)


def intersection(a: BoundingBox, b: BoundingBox) -> Optional[BoundingBox]:
    """Overlapping region of ``a`` and ``b``, or None if they are disjoint."""
    return a.intersection(b)


def contains(point: Union[Point2d, Point3d], box: BoundingBox) -> bool:
    return box.contains(point)


def overlaps(a: BoundingBox, b: BoundingBox) -> bool:
    return a.overlaps(b)


def is_contained_in(outer: BoundingBox, inner: BoundingBox) -> bool:
    """True if ``inner`` lies entirely within ``outer``."""
    return inner.is_contained_in(outer)


def centroid(box: BoundingBox) -> Union[Point2d, Point3d]:
    return box.centroid()
