"""
Visualization module for posetime.

Provides matplotlib plots of recorded trajectories and interpolated poses.
"""

from .plot_styling import (
    PLOT_DPI,
    FIGURE_SIZE,
    setup_matplotlib_backend,
)
from .trajectory_plotter import create_trajectory_plot

__all__ = [
    'PLOT_DPI',
    'FIGURE_SIZE',
    'setup_matplotlib_backend',
    'create_trajectory_plot',
]
