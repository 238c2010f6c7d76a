"""
Visualization utilities for geometric shapes.

Contains plotting functions for:
- 2D shapes (points, segments, triangles, polylines, polygons, circles, arcs)
- 3D shapes drawn on a 3D axes
- Bounding box outlines
"""

from typing import Iterable, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D

from ..bounds.bounding_box import BoundingBox2d, BoundingBox3d, hull_of
from ..core import Point2d, Point3d, points_to_array
from ..shapes import (
    Arc2d,
    Arc3d,
    Circle2d,
    Circle3d,
    LineSegment2d,
    LineSegment3d,
    Polygon2d,
    Polyline2d,
    Polyline3d,
    Triangle2d,
    Triangle3d,
)


def _closed(coords: np.ndarray) -> np.ndarray:
    if len(coords) == 0:
        return coords
    return np.vstack([coords, coords[0]])


def sample_points(shape, n_samples: int = 64) -> np.ndarray:
    """
    Sample the outline of a shape as an array of coordinates.

    Parameters
    ----------
    shape : 2D or 3D shape
        Shape to sample.
    n_samples : int
        Number of samples for curved shapes (circles and arcs).

    Returns
    -------
    np.ndarray
        Array of shape (N, 2) or (N, 3). Closed outlines repeat their
        first point at the end.
    """
    if isinstance(shape, (Point2d, Point3d)):
        return np.atleast_2d(shape.to_array())
    if isinstance(shape, (LineSegment2d, LineSegment3d)):
        return np.array([shape.start_point.to_array(), shape.end_point.to_array()])
    if isinstance(shape, Triangle2d):
        return _closed(points_to_array(shape.vertices(), 2))
    if isinstance(shape, Triangle3d):
        return _closed(points_to_array(shape.vertices(), 3))
    if isinstance(shape, Polyline2d):
        return points_to_array(shape.vertices, 2)
    if isinstance(shape, Polyline3d):
        return points_to_array(shape.vertices, 3)
    if isinstance(shape, Polygon2d):
        return _closed(shape.to_array())
    if isinstance(shape, Circle2d):
        angles = np.linspace(0.0, 2 * np.pi, n_samples + 1)
        c = shape.center_point
        return np.column_stack([
            c.x + shape.radius * np.cos(angles),
            c.y + shape.radius * np.sin(angles),
        ])
    if isinstance(shape, Circle3d):
        u, v = shape.axial_direction.perpendicular_basis()
        angles = np.linspace(0.0, 2 * np.pi, n_samples + 1)
        return (
            shape.center_point.to_array()
            + shape.radius * np.outer(np.cos(angles), u.to_array())
            + shape.radius * np.outer(np.sin(angles), v.to_array())
        )
    if isinstance(shape, (Arc2d, Arc3d)):
        ts = np.linspace(0.0, 1.0, n_samples + 1)
        return np.array([shape.point_on(float(t)).to_array() for t in ts])
    if isinstance(shape, BoundingBox2d):
        return np.array([
            [shape.min_x, shape.min_y],
            [shape.max_x, shape.min_y],
            [shape.max_x, shape.max_y],
            [shape.min_x, shape.max_y],
            [shape.min_x, shape.min_y],
        ])
    raise TypeError(f"Cannot sample {type(shape).__name__}")


def plot_shape(
    shape,
    ax: Optional[plt.Axes] = None,
    color: str = 'steelblue',
    fill: bool = True,
    n_samples: int = 64,
    label: Optional[str] = None
) -> plt.Axes:
    """
    Draw a single 2D shape.

    Parameters
    ----------
    shape : 2D shape
        Point, segment, triangle, polyline, polygon, circle, arc or box.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    color : str
        Line and fill color.
    fill : bool
        Whether to fill closed shapes.
    n_samples : int
        Samples used for curved outlines.
    label : str, optional
        Legend label.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    if isinstance(shape, Point2d):
        ax.scatter([shape.x], [shape.y], c=color, s=30, zorder=4, label=label)
        return ax

    coords = sample_points(shape, n_samples)
    ax.plot(coords[:, 0], coords[:, 1], '-', color=color, linewidth=2, zorder=3, label=label)

    if fill and isinstance(shape, (Triangle2d, Polygon2d, Circle2d)):
        ax.fill(coords[:, 0], coords[:, 1], alpha=0.15, color=color, zorder=1)
    if isinstance(shape, Polygon2d):
        for loop in shape.inner_loops:
            hole = _closed(points_to_array(loop, 2))
            ax.plot(hole[:, 0], hole[:, 1], '--', color=color, linewidth=1.5, zorder=3)
            if fill and len(hole) > 0:
                ax.fill(hole[:, 0], hole[:, 1], color='white', zorder=2)
    return ax


def plot_bounding_box(
    box: BoundingBox2d,
    ax: Optional[plt.Axes] = None,
    color: str = 'gray'
) -> plt.Axes:
    """Draw the dashed outline of a 2D bounding box."""
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))
    coords = sample_points(box)
    ax.plot(coords[:, 0], coords[:, 1], '--', color=color, linewidth=1, zorder=2)
    return ax


def plot_shapes(
    shapes: Iterable,
    ax: Optional[plt.Axes] = None,
    title: str = "Shapes",
    show_bounding_box: bool = True,
    show_stats: bool = True,
    n_samples: int = 64
) -> plt.Axes:
    """
    Draw several 2D shapes on one axes.

    Parameters
    ----------
    shapes : iterable of 2D shapes
        Shapes to draw; each gets the next color of the default cycle.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    title : str
        Plot title.
    show_bounding_box : bool
        Whether to outline the hull of all shapes' bounding boxes.
    show_stats : bool
        Whether to show the shape count and total enclosed area.
    n_samples : int
        Samples used for curved outlines.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    shapes = list(shapes)
    colors = plt.rcParams['axes.prop_cycle'].by_key().get('color', ['steelblue'])
    boxes = []
    total_area = 0.0
    for i, shape in enumerate(shapes):
        plot_shape(shape, ax=ax, color=colors[i % len(colors)], n_samples=n_samples)
        if isinstance(shape, Point2d):
            boxes.append(BoundingBox2d.singleton(shape))
        elif isinstance(shape, BoundingBox2d):
            boxes.append(shape)
        else:
            box = shape.bounding_box()
            if box is not None:
                boxes.append(box)
        total_area += getattr(shape, 'area', 0.0)

    overall = hull_of(boxes)
    if show_bounding_box and overall is not None:
        plot_bounding_box(overall, ax=ax)

    if show_stats:
        stats_text = (
            f"Shapes: {len(shapes)}\n"
            f"Total area: {total_area:.2f}"
        )
        ax.text(
            0.02, 0.98, stats_text,
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    return ax


def plot_shapes_3d(
    shapes: Iterable,
    ax: Optional[Axes3D] = None,
    title: str = "Shapes",
    show_bounding_box: bool = False,
    figsize: Tuple[int, int] = (8, 8),
    n_samples: int = 64
) -> Axes3D:
    """
    Draw 3D shapes as wireframes.

    Parameters
    ----------
    shapes : iterable of 3D shapes
        Points, segments, triangles, polylines, circles or arcs.
    ax : Axes3D, optional
        Matplotlib 3D axes. Creates new figure if None.
    title : str
        Plot title.
    show_bounding_box : bool
        Whether to draw the edges of the overall bounding box.
    figsize : tuple
        Figure size used when creating a new figure.
    n_samples : int
        Samples used for curved outlines.

    Returns
    -------
    Axes3D
        The matplotlib 3D axes object.
    """
    if ax is None:
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(1, 1, 1, projection='3d')

    boxes = []
    for shape in shapes:
        coords = sample_points(shape, n_samples)
        if isinstance(shape, Point3d):
            ax.scatter(coords[:, 0], coords[:, 1], coords[:, 2], c='black', s=30)
            boxes.append(BoundingBox3d.singleton(shape))
            continue
        ax.plot(coords[:, 0], coords[:, 1], coords[:, 2], '-', linewidth=2)
        box = shape.bounding_box()
        if box is not None:
            boxes.append(box)

    overall = hull_of(boxes)
    if show_bounding_box and overall is not None:
        _plot_box_edges_3d(overall, ax)

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_zlabel('Z')
    ax.set_title(title)
    return ax


def _plot_box_edges_3d(box: BoundingBox3d, ax: Axes3D) -> None:
    """Draw the 12 edges of a 3D box."""
    xs = (box.min_x, box.max_x)
    ys = (box.min_y, box.max_y)
    zs = (box.min_z, box.max_z)
    for y in ys:
        for z in zs:
            ax.plot(xs, (y, y), (z, z), '--', color='gray', linewidth=1)
    for x in xs:
        for z in zs:
            ax.plot((x, x), ys, (z, z), '--', color='gray', linewidth=1)
    for x in xs:
        for y in ys:
            ax.plot((x, x), (y, y), zs, '--', color='gray', linewidth=1)
