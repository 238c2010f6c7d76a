"""
Visualization utilities.
"""

from .plotting import plot_shape, plot_shapes, plot_shapes_3d, plot_bounding_box, sample_points

__all__ = ['plot_shape', 'plot_shapes', 'plot_shapes_3d', 'plot_bounding_box', 'sample_points']
