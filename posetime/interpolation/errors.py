"""
Failure outcomes of trajectory queries.

The neighbor locator and interpolate_at return these as values rather than
raising them, so every caller sees the failure path explicitly. They are
still exception types: unwrap() raises them for callers that prefer
unwinding.
"""


class TrajectoryError(ValueError):
    """Base class for trajectory query failures."""


class EmptyTrajectory(TrajectoryError):
    """The trajectory has no samples to interpolate between."""

    def __init__(self, message: str = "Pose sequence is empty"):
        super().__init__(message)


class OutOfRange(TrajectoryError):
    """The query time lies outside [first timestamp, last timestamp]."""

    def __init__(self, target_time: float, start_time: float, end_time: float):
        self.target_time = target_time
        self.start_time = start_time
        self.end_time = end_time
        super().__init__(
            f"Target time {target_time} is outside the range of pose timestamps "
            f"[{start_time}, {end_time}]"
        )
