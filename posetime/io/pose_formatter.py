"""
Console formatting of query results.

Interpolated poses are highlighted in green so they stand out from poses
that reproduce a recorded sample.
"""

import sys
import logging
from typing import Any, List, Optional, Sequence, TextIO

from posetime.geometry.pose_types import TimedPose
from posetime.interpolation.errors import TrajectoryError
from posetime.interpolation.neighbor_locator import is_original_timestamp

logger = logging.getLogger(__name__)

GREEN = "\033[32m"
RESET = "\033[0m"
SEPARATOR = "-" * 40


def _fmt(value: float) -> str:
    return f"{value:g}"


def format_timed_pose(timed_pose: TimedPose, highlight: bool = False) -> str:
    """
    Format a TimedPose as three lines of text.

    Args:
        timed_pose: Pose to format
        highlight: If True, wrap the text in ANSI green

    Returns:
        "Time: ...", "Position: [x, y, z]" and "Orientation: [w, x, y, z]" lines
    """
    p = timed_pose.position
    q = timed_pose.orientation
    text = "\n".join([
        f"Time: {_fmt(timed_pose.timestamp)}",
        f"Position: [{_fmt(p.x)}, {_fmt(p.y)}, {_fmt(p.z)}]",
        f"Orientation: [{_fmt(q.w)}, {_fmt(q.x)}, {_fmt(q.y)}, {_fmt(q.z)}]",
    ])
    if highlight:
        text = f"{GREEN}{text}{RESET}"
    return text


def print_interpolation_results(
    trajectory: Any,
    times: Sequence[float],
    results: List[Any],
    tolerance: float = 1e-9,
    stream: Optional[TextIO] = None
) -> None:
    """
    Print query results, highlighting poses that were interpolated.

    Args:
        trajectory: Source trajectory
        times: Query times, parallel to results
        results: Results from interpolate_at / interpolate_many
        tolerance: Timestamp tolerance for matching recorded samples
        stream: Output stream (default stdout)
    """
    if stream is None:
        stream = sys.stdout

    for time, result in zip(times, results):
        if isinstance(result, TrajectoryError):
            logger.error(f"Query at {time} failed: {result}")
            continue
        highlight = not is_original_timestamp(trajectory, time, tolerance)
        print(format_timed_pose(result, highlight=highlight), file=stream)
        print(SEPARATOR, file=stream)
