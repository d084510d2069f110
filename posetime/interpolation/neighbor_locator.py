"""
Neighbor lookup for time-indexed trajectories.

locate() finds, for a query time, either the sample recorded exactly at
that time or the two consecutive samples that bracket it. The search runs
through a TrajectoryView, so the same code serves lists, timestamp-keyed
mappings and sequential containers: binary search where the view allows
random access, a linear scan otherwise.
"""

import logging
from dataclasses import dataclass
from typing import Any, Union

from .errors import EmptyTrajectory, OutOfRange
from .trajectory_view import as_trajectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Exact:
    """The sample at `index` has exactly the query timestamp."""
    index: int


@dataclass(frozen=True)
class Bracket:
    """Samples `before` and `after` are consecutive and strictly enclose the query time."""
    before: int
    after: int


NeighborResult = Union[Exact, Bracket, EmptyTrajectory, OutOfRange]


def locate(trajectory: Any, target_time: float) -> NeighborResult:
    """
    Find the samples neighboring a query time.

    Parameters:
    -----------
    trajectory : TrajectoryView or container of TimedPose
        Samples with non-decreasing timestamps
    target_time : float
        Query time in seconds

    Returns:
    --------
    Exact, Bracket, EmptyTrajectory or OutOfRange
        Exact(i) when sample i has timestamp == target_time (the first such
        sample on ties), Bracket(i, i + 1) when target_time lies strictly
        between them. Failures are returned, not raised.
    """
    view = as_trajectory(trajectory)
    count = len(view)
    if count == 0:
        return EmptyTrajectory()

    start_time = view.timestamp(0)
    end_time = view.timestamp(count - 1)
    # Written so that a NaN query is also rejected
    if not start_time <= target_time <= end_time:
        return OutOfRange(target_time, start_time, end_time)

    index = view.lower_bound(target_time)
    if view.timestamp(index) == target_time:
        return Exact(index)

    # index > 0 here: target_time > start_time since it was not an exact hit at 0
    return Bracket(index - 1, index)


def is_original_timestamp(trajectory: Any, time: float, tolerance: float = 1e-9) -> bool:
    """
    Check whether a query time coincides with a recorded sample.

    Args:
        trajectory: TrajectoryView or container of TimedPose
        time: Query time in seconds
        tolerance: Maximum absolute difference counted as a match

    Returns:
        True if some sample timestamp is within tolerance of time
    """
    view = as_trajectory(trajectory)
    if not view.random_access:
        return any(abs(timestamp - time) < tolerance for timestamp, _ in view)

    # The closest sample is the last one before time or the first one at or after it
    index = view.lower_bound(time)
    candidates = (i for i in (index - 1, index) if 0 <= i < len(view))
    return any(abs(view.timestamp(i) - time) < tolerance for i in candidates)
