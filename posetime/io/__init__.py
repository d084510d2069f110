"""
Input/output for posetime: trajectory loading, CSV export and console formatting.
"""

from .trajectory_loader import (
    CSV_COLUMNS,
    load_trajectory_csv,
    load_trajectory_keyframes,
    load_trajectory,
)
from .data_writer import poses_to_array, save_interpolated_poses
from .pose_formatter import format_timed_pose, print_interpolation_results

__all__ = [
    'CSV_COLUMNS',
    'load_trajectory_csv',
    'load_trajectory_keyframes',
    'load_trajectory',
    'poses_to_array',
    'save_interpolated_poses',
    'format_timed_pose',
    'print_interpolation_results',
]
