"""
Axis-aligned bounding box algebra.
"""

from .bounding_box import (
    BoundingBox,
    BoundingBox2d,
    BoundingBox3d,
    hull,
    hull_of,
    intersection,
    contains,
    overlaps,
    is_contained_in,
    centroid,
)

__all__ = [
    'BoundingBox',
    'BoundingBox2d',
    'BoundingBox3d',
    'hull',
    'hull_of',
    'intersection',
    'contains',
    'overlaps',
    'is_contained_in',
    'centroid',
]
