"""
posetime: time-indexed 6-DoF pose interpolation.

Given time-ordered poses (position + orientation quaternion), answers "what
was the pose at time T?" for any T inside the recorded range, using linear
interpolation for position and SLERP for orientation.

Plotting lives in posetime.visualization and is not imported here.
"""

from posetime.geometry import Vector3, Quaternion, Pose, TimedPose
from posetime.interpolation import (
    TrajectoryError,
    EmptyTrajectory,
    OutOfRange,
    TrajectoryView,
    SequentialTrajectory,
    IndexedTrajectory,
    MappingTrajectory,
    as_trajectory,
    build_trajectory_view,
    Exact,
    Bracket,
    locate,
    slerp,
    interpolate,
    interpolate_at,
    unwrap,
    create_pose_interpolator,
    interpolate_many,
)

__version__ = "0.1.0"

__all__ = [
    'Vector3',
    'Quaternion',
    'Pose',
    'TimedPose',
    'TrajectoryError',
    'EmptyTrajectory',
    'OutOfRange',
    'TrajectoryView',
    'SequentialTrajectory',
    'IndexedTrajectory',
    'MappingTrajectory',
    'as_trajectory',
    'build_trajectory_view',
    'Exact',
    'Bracket',
    'locate',
    'slerp',
    'interpolate',
    'interpolate_at',
    'unwrap',
    'create_pose_interpolator',
    'interpolate_many',
]
