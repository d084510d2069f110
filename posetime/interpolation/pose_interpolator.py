"""
Pose interpolation over time-indexed trajectories.

Position is blended linearly and orientation with SLERP. interpolate_at()
is the top-level query: it locates the samples around a query time and
interpolates between them, or returns the recorded sample unchanged on an
exact hit. Query failures (empty trajectory, time out of range) come back
as values; use unwrap() or create_pose_interpolator() to have them raised.
"""

import logging
from typing import Any, List, Optional, Union

import numpy as np

from posetime.config.posetime_config_schemas import InterpolationSettings
from posetime.geometry.pose_types import Pose, TimedPose
from .errors import EmptyTrajectory, OutOfRange, TrajectoryError
from .neighbor_locator import Exact, locate
from .quaternion_interpolator import NEAR_PARALLEL_DOT, lerp, slerp
from .trajectory_view import as_trajectory

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = InterpolationSettings()

QueryResult = Union[TimedPose, EmptyTrajectory, OutOfRange]


def clamp_factor(factor: float) -> float:
    """Clamp an interpolation factor to [0, 1]."""
    return float(np.clip(factor, 0.0, 1.0))


def interpolate(pose_a: Pose, pose_b: Pose, factor: float,
                parallel_threshold: float = NEAR_PARALLEL_DOT) -> Pose:
    """
    Interpolate between two poses.

    Factors outside [0, 1] are clamped rather than rejected.

    Args:
        pose_a: Pose at factor 0
        pose_b: Pose at factor 1
        factor: Interpolation factor
        parallel_threshold: SLERP near-parallel cutoff (see slerp)

    Returns:
        Pose with position on the segment from pose_a to pose_b and
        orientation on the shortest arc between the two orientations
    """
    t = clamp_factor(factor)
    position = lerp(pose_a.position, pose_b.position, t)
    orientation = slerp(pose_a.orientation, pose_b.orientation, t, parallel_threshold)
    return Pose(position, orientation)


def interpolate_at(trajectory: Any, target_time: float,
                   settings: Optional[InterpolationSettings] = None) -> QueryResult:
    """
    Get the pose at a given time.

    Args:
        trajectory: TrajectoryView or container of TimedPose ordered by time
        target_time: Query time in seconds
        settings: Interpolation tolerances (defaults if None)

    Returns:
        The recorded TimedPose on an exact timestamp match, an interpolated
        TimedPose stamped with target_time otherwise, or the EmptyTrajectory /
        OutOfRange failure reported by the locator
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    view = as_trajectory(trajectory)
    neighbors = locate(view, target_time)

    if isinstance(neighbors, TrajectoryError):
        logger.debug(f"Query at {target_time} failed: {neighbors}")
        return neighbors

    if isinstance(neighbors, Exact):
        return view.sample(neighbors.index)

    time_a, pose_a = view.entry(neighbors.before)
    time_b, pose_b = view.entry(neighbors.after)

    span = time_b - time_a
    if abs(span) < settings.timestamp_epsilon:
        logger.debug(f"Samples at {time_a} and {time_b} are indistinguishable, returning the earlier one")
        return TimedPose(time_a, pose_a)

    factor = (target_time - time_a) / span
    pose = interpolate(pose_a, pose_b, factor, settings.parallel_threshold)
    return TimedPose(target_time, pose)


def unwrap(result: Any) -> Any:
    """
    Return a successful query result, raising it if it is a failure.

    Raises:
        EmptyTrajectory, OutOfRange: If result is one of these failures
    """
    if isinstance(result, TrajectoryError):
        raise result
    return result


def create_pose_interpolator(trajectory: Any,
                             settings: Optional[InterpolationSettings] = None):
    """
    Create an interpolation function bound to one trajectory.

    Parameters:
    -----------
    trajectory : TrajectoryView or container of TimedPose
        Samples ordered by time
    settings : InterpolationSettings, optional
        Interpolation tolerances

    Returns:
    --------
    function
        Takes a time or array of times and returns the TimedPose (or list of
        TimedPose) at those times. Failures are raised.
    """
    view = as_trajectory(trajectory)

    def interpolator(t: Union[float, np.ndarray]) -> Union[TimedPose, List[TimedPose]]:
        if np.ndim(t) == 0:
            return unwrap(interpolate_at(view, float(t), settings))
        return [interpolator(ti) for ti in t]

    return interpolator
