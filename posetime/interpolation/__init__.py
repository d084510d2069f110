"""
Interpolation module for posetime.

Provides:
- Trajectory views over lists, timestamp-keyed mappings and sequential containers
- Neighbor lookup (exact sample or bracketing pair) for a query time
- Pose interpolation (linear position, SLERP orientation)
- Batch queries over a thread pool
"""

from .errors import TrajectoryError, EmptyTrajectory, OutOfRange

from .trajectory_view import (
    TrajectoryView,
    SequentialTrajectory,
    IndexedTrajectory,
    MappingTrajectory,
    project_timed_pose,
    project_keyed_item,
    as_trajectory,
    build_trajectory_view,
    validate_trajectory,
)

from .neighbor_locator import Exact, Bracket, locate, is_original_timestamp

from .quaternion_interpolator import NEAR_PARALLEL_DOT, lerp, slerp

from .pose_interpolator import (
    interpolate,
    interpolate_at,
    unwrap,
    create_pose_interpolator,
)

from .batch import interpolate_many

__all__ = [
    # Failures
    'TrajectoryError',
    'EmptyTrajectory',
    'OutOfRange',
    # Trajectory views
    'TrajectoryView',
    'SequentialTrajectory',
    'IndexedTrajectory',
    'MappingTrajectory',
    'project_timed_pose',
    'project_keyed_item',
    'as_trajectory',
    'build_trajectory_view',
    'validate_trajectory',
    # Neighbor lookup
    'Exact',
    'Bracket',
    'locate',
    'is_original_timestamp',
    # Interpolation
    'NEAR_PARALLEL_DOT',
    'lerp',
    'slerp',
    'interpolate',
    'interpolate_at',
    'unwrap',
    'create_pose_interpolator',
    'interpolate_many',
]
