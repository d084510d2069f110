"""
Trajectory loading from CSV logs and YAML keyframe documents.

CSV files carry one sample per row with a header naming the columns
time, x, y, z, qw, qx, qy, qz (any order, case-insensitive). Keyframe
documents follow the attitude keyframe layout:

    times: [0.0, 1.0, 2.0]
    positions: [[0, 0, 0], [1, 0, 0], [1, 1, 0]]
    attitudes: [[1, 0, 0, 0], [0.7071, 0, 0.7071, 0], [0, 0, 1, 0]]
    format: quaternion    # or 'matrix' for 3x3 rotation matrices
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np
import yaml

from posetime.geometry.pose_types import Quaternion, TimedPose
from posetime.interpolation.trajectory_view import (
    TrajectoryView,
    build_trajectory_view,
    validate_trajectory,
)

logger = logging.getLogger(__name__)

CSV_COLUMNS = ('time', 'x', 'y', 'z', 'qw', 'qx', 'qy', 'qz')


def load_trajectory_csv(csv_path: Union[str, Path]) -> List[TimedPose]:
    """
    Load timestamped poses from a CSV file.

    Args:
        csv_path: Path to the CSV file

    Returns:
        TimedPose samples in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If required columns are missing or timestamps decrease
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Trajectory file not found: {csv_path}")

    logger.info(f"Loading trajectory from: {csv_path}")

    with open(csv_path, 'r') as f:
        header = [name.strip().lower() for name in f.readline().split(',')]
        rows = [line for line in f if line.strip()]

    missing = [name for name in CSV_COLUMNS if name not in header]
    if missing:
        raise ValueError(f"Trajectory CSV {csv_path.name} is missing columns: {', '.join(missing)}")

    if not rows:
        logger.warning(f"Trajectory CSV {csv_path.name} has no samples")
        return []

    data = np.loadtxt(rows, delimiter=',', ndmin=2)
    columns = {name: header.index(name) for name in CSV_COLUMNS}

    poses = [
        TimedPose.from_components(
            row[columns['time']],
            [row[columns['x']], row[columns['y']], row[columns['z']]],
            [row[columns['qw']], row[columns['qx']], row[columns['qy']], row[columns['qz']]]
        )
        for row in data
    ]

    validate_trajectory(poses)
    logger.info(f"Loaded {len(poses)} poses spanning [{poses[0].timestamp}, {poses[-1].timestamp}] s")
    return poses


def load_trajectory_keyframes(source: Union[str, Path, Dict[str, Any]]) -> List[TimedPose]:
    """
    Load timestamped poses from a keyframe dictionary or YAML file.

    Parameters:
    -----------
    source : dict or path
        Dictionary (or YAML file holding one) containing:
        - 'times': List of keyframe times in seconds
        - 'positions': List of [x, y, z] positions (optional, defaults to origin)
        - 'attitudes': List of attitudes (quaternions or rotation matrices)
        - 'format': 'quaternion' or 'matrix' (optional, default 'quaternion')

    Returns:
    --------
    List[TimedPose]
        Keyframes in document order
    """
    if isinstance(source, dict):
        keyframes = source
    else:
        keyframe_path = Path(source)
        if not keyframe_path.exists():
            raise FileNotFoundError(f"Keyframe file not found: {keyframe_path}")
        logger.info(f"Loading keyframes from: {keyframe_path}")
        with open(keyframe_path, 'r') as f:
            keyframes = yaml.safe_load(f) or {}

    times = np.array(keyframes.get('times', []), dtype=np.float64)
    attitudes = keyframes.get('attitudes', [])
    positions = keyframes.get('positions', [[0.0, 0.0, 0.0]] * len(times))
    att_format = keyframes.get('format', 'quaternion')

    # Validate inputs
    if len(attitudes) != len(times):
        raise ValueError(f"Number of attitudes ({len(attitudes)}) must match number of times ({len(times)})")
    if len(positions) != len(times):
        raise ValueError(f"Number of positions ({len(positions)}) must match number of times ({len(times)})")

    if att_format == 'matrix':
        orientations = [Quaternion.from_rotation_matrix(R) for R in attitudes]
    elif att_format == 'quaternion':
        orientations = [Quaternion.from_array(q) for q in attitudes]
    else:
        raise ValueError(f"Unknown attitude format: {att_format}")

    poses = [
        TimedPose.from_components(t, position, orientation)
        for t, position, orientation in zip(times, positions, orientations)
    ]

    validate_trajectory(poses)
    logger.debug(f"Loaded {len(poses)} keyframes ({att_format} attitudes)")
    return poses


def load_trajectory(path: Union[str, Path], file_format: str = 'csv',
                    container: str = 'sequence') -> TrajectoryView:
    """
    Load a trajectory file into a view of the requested container kind.

    Args:
        path: Trajectory file
        file_format: 'csv' or 'keyframes'
        container: 'sequence', 'mapping' or 'sequential'

    Returns:
        TrajectoryView over the loaded samples
    """
    if file_format == 'csv':
        poses = load_trajectory_csv(path)
    elif file_format == 'keyframes':
        poses = load_trajectory_keyframes(path)
    else:
        raise ValueError(f"Unknown trajectory format: {file_format}")

    return build_trajectory_view(poses, container)
