"""
Data export utilities for interpolated poses.

Provides CSV export of query results, marking which rows were interpolated
and which reproduce recorded samples.
"""

import logging
from pathlib import Path
from datetime import datetime
from typing import Any, List, Optional, Sequence

import numpy as np

from posetime.geometry.pose_types import TimedPose
from posetime.interpolation.neighbor_locator import is_original_timestamp

logger = logging.getLogger(__name__)

OUTPUT_HEADER = "Time,X,Y,Z,QW,QX,QY,QZ,Interpolated"


def poses_to_array(poses: Sequence[TimedPose]) -> np.ndarray:
    """
    Stack TimedPose values into an (N, 8) array of [t, x, y, z, qw, qx, qy, qz].
    """
    if not poses:
        return np.zeros((0, 8))
    return np.array([
        [p.timestamp, *p.position.as_array(), *p.orientation.as_array()]
        for p in poses
    ])


def save_interpolated_poses(
    output_dir: Path,
    results: List[Any],
    trajectory: Optional[Any] = None,
    tolerance: float = 1e-9,
    timestamp: Optional[str] = None
) -> Path:
    """
    Save query results to CSV.

    Failed queries in results are skipped with a warning.

    Args:
        output_dir: Directory to save CSV file
        results: Results from interpolate_at / interpolate_many
        trajectory: Source trajectory, used to flag interpolated rows. If None,
            every row is flagged as interpolated.
        tolerance: Timestamp tolerance for matching recorded samples
        timestamp: Optional HHMM timestamp string. If not provided, generates current time.

    Returns:
        Path to the saved CSV file

    Raises:
        ValueError: If results contain no successful query
        RuntimeError: If CSV saving fails
    """
    poses = [result for result in results if isinstance(result, TimedPose)]
    skipped = len(results) - len(poses)
    if skipped:
        logger.warning(f"Skipping {skipped} failed queries")
    if not poses:
        raise ValueError("No interpolated poses to save")

    logger.info("Saving interpolated poses to CSV...")

    try:
        if timestamp is None:
            timestamp = datetime.now().strftime("%H%M")
        data_path = Path(output_dir) / f"{timestamp}_interpolated_{len(poses)}pts.csv"

        if trajectory is None:
            interpolated = np.ones(len(poses))
        else:
            interpolated = np.array([
                0 if is_original_timestamp(trajectory, p.timestamp, tolerance) else 1
                for p in poses
            ])

        data_array = np.column_stack([poses_to_array(poses), interpolated])
        fmt = ['%.9f'] * 8 + ['%d']
        np.savetxt(data_path, data_array, delimiter=',', header=OUTPUT_HEADER, fmt=fmt, comments='')

        logger.info(f"Data saved: {data_path}")
        return data_path

    except Exception as e:
        logger.error(f"Failed to save interpolated poses: {e}")
        raise RuntimeError(f"CSV export failed: {e}") from e
