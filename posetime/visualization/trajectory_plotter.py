"""
Trajectory Plotting Module
==========================

Plots recorded trajectory samples together with interpolated query results:
position components, quaternion components and the rotation angle relative
to the first sample, all against time.

Functions:
    create_trajectory_plot: Generate and optionally save a trajectory plot
"""

import time
import logging
from pathlib import Path
from datetime import datetime
from typing import Any, List, Optional

import numpy as np
import matplotlib.pyplot as plt

from posetime.geometry.pose_types import TimedPose
from posetime.interpolation.trajectory_view import as_trajectory
from posetime.io.data_writer import poses_to_array
from posetime.utils.geometry_utils import rotation_angle_between
from .plot_styling import (
    AXIS_COLORS,
    FIGURE_SIZE,
    INTERPOLATED_STYLE,
    PLOT_DPI,
    SAMPLE_STYLE,
)

logger = logging.getLogger(__name__)


def _rotation_angles(poses: List[TimedPose], reference: TimedPose) -> np.ndarray:
    return np.degrees([
        rotation_angle_between(reference.orientation, p.orientation) for p in poses
    ])


def create_trajectory_plot(
    trajectory: Any,
    results: List[Any],
    title: str = "Pose Trajectory",
    output_dir: Optional[Path] = None,
    show: bool = False,
    timestamp: Optional[str] = None
) -> Optional[Path]:
    """
    Plot recorded samples and interpolated poses.

    Args:
        trajectory: Source trajectory (TrajectoryView or container of TimedPose)
        results: Results from interpolate_at / interpolate_many; failures are ignored
        title: Figure title
        output_dir: If given, save the PNG into this directory
        show: If True, display the figure
        timestamp: Optional HHMM filename prefix. If not provided, generates current time.

    Returns:
        Path to the saved PNG, or None when not saving

    Raises:
        ValueError: If the trajectory is empty
        RuntimeError: If plot generation fails
    """
    logger.info("Creating trajectory plot...")
    plot_start = time.time()

    view = as_trajectory(trajectory)
    samples = [view.sample(i) for i in range(len(view))]
    if not samples:
        raise ValueError("Cannot plot an empty trajectory")
    queried = [result for result in results if isinstance(result, TimedPose)]

    png_path = None
    fig = None
    try:
        sample_data = poses_to_array(samples)
        query_data = poses_to_array(queried)

        fig, (ax_pos, ax_quat, ax_angle) = plt.subplots(3, 1, figsize=FIGURE_SIZE, sharex=True)
        fig.suptitle(title, fontsize=16, fontweight='bold')

        for axis, label in enumerate(('x', 'y', 'z')):
            color = AXIS_COLORS[axis]
            ax_pos.plot(sample_data[:, 0], sample_data[:, 1 + axis], color=color, alpha=0.4)
            ax_pos.scatter(sample_data[:, 0], sample_data[:, 1 + axis], c=color, label=label, **SAMPLE_STYLE)
            ax_pos.scatter(query_data[:, 0], query_data[:, 1 + axis], c=color, **INTERPOLATED_STYLE)
        ax_pos.set_ylabel('Position', fontsize=12)
        ax_pos.legend(loc='upper right')
        ax_pos.grid(True, alpha=0.3)

        for axis, label in enumerate(('qw', 'qx', 'qy', 'qz')):
            color = AXIS_COLORS[(axis - 1) % len(AXIS_COLORS)]
            ax_quat.scatter(sample_data[:, 0], sample_data[:, 4 + axis], c=color, label=label, **SAMPLE_STYLE)
            ax_quat.scatter(query_data[:, 0], query_data[:, 4 + axis], c=color, **INTERPOLATED_STYLE)
        ax_quat.set_ylabel('Quaternion', fontsize=12)
        ax_quat.set_ylim(-1.1, 1.1)
        ax_quat.legend(loc='upper right', ncol=4)
        ax_quat.grid(True, alpha=0.3)

        ax_angle.scatter(sample_data[:, 0], _rotation_angles(samples, samples[0]),
                         c='k', label='recorded', **SAMPLE_STYLE)
        if queried:
            ax_angle.scatter(query_data[:, 0], _rotation_angles(queried, samples[0]),
                             c='tab:green', label='interpolated', **INTERPOLATED_STYLE)
        ax_angle.set_ylabel('Rotation from start (deg)', fontsize=12)
        ax_angle.set_xlabel('Time (s)', fontsize=12)
        ax_angle.legend(loc='upper left')
        ax_angle.grid(True, alpha=0.3)

        if output_dir is not None:
            if timestamp is None:
                timestamp = datetime.now().strftime("%H%M")
            output_dir = Path(output_dir)
            output_dir.mkdir(parents=True, exist_ok=True)
            png_path = output_dir / f"{timestamp}_trajectory_{len(queried)}pts.png"
            plt.savefig(png_path, dpi=PLOT_DPI, bbox_inches='tight')
            logger.info(f"Plot saved: {png_path}")

        logger.info(f"Trajectory plot generated ({time.time() - plot_start:.2f}s)")

        if show:
            plt.show()

        return png_path

    except Exception as e:
        logger.error(f"Plot generation failed: {e}")
        raise RuntimeError(f"Trajectory plot failed: {e}") from e

    finally:
        # Always close the figure to release memory
        if fig is not None:
            plt.close(fig)
