"""
Trajectory views: uniform access to timestamped poses held in any container.

A view presents a container as an ordered, positionally addressable
sequence of (timestamp, pose) entries. The element-to-entry projection is
chosen by whoever builds the view, one projection per collection kind:

- SequentialTrajectory: any sized, re-iterable collection. Searches by
  linear scan.
- IndexedTrajectory: random-access sequences. Searches by binary search.
- MappingTrajectory: mappings keyed by timestamp. Keys are sorted once and
  then searched like an indexed sequence.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Collection, Mapping, Sequence
from itertools import islice
from operator import itemgetter
from typing import Any, Callable, Iterable, Iterator, List, Tuple

import numpy as np

from posetime.geometry.pose_types import Pose, TimedPose

logger = logging.getLogger(__name__)

# Maps one container element to its (timestamp, pose) entry
Projection = Callable[[Any], Tuple[float, Pose]]


# =============================================================================
# PROJECTIONS
# =============================================================================

def project_timed_pose(element: TimedPose) -> Tuple[float, Pose]:
    """Projection for containers holding TimedPose values."""
    return element.timestamp, element.pose


def project_keyed_item(item: Tuple[float, TimedPose]) -> Tuple[float, Pose]:
    """Projection for (timestamp, TimedPose) mapping items. The key is the timestamp."""
    key, timed_pose = item
    return key, timed_pose.pose


# =============================================================================
# VIEW CLASSES
# =============================================================================

class TrajectoryView(ABC):
    """
    Ordered view of timestamped poses with non-decreasing timestamps.

    Subclasses supply size and iteration over raw elements; the base class
    provides positional access and a linear-scan lower bound search on top
    of them.
    """

    random_access = False

    def __init__(self, projection: Projection = project_timed_pose):
        self.projection = projection

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def elements(self) -> Iterator[Any]:
        """Iterate over the raw container elements in order."""
        pass

    def __iter__(self) -> Iterator[Tuple[float, Pose]]:
        return (self.projection(element) for element in self.elements())

    def entry(self, index: int) -> Tuple[float, Pose]:
        """
        Get the (timestamp, pose) entry at a position.

        Args:
            index: Position in the trajectory, 0 <= index < len(self)

        Returns:
            (timestamp, pose) tuple
        """
        if not 0 <= index < len(self):
            raise IndexError(f"Trajectory index {index} out of range for {len(self)} samples")
        return next(islice(iter(self), index, None))

    def timestamp(self, index: int) -> float:
        return self.entry(index)[0]

    def sample(self, index: int) -> TimedPose:
        """Get the sample at a position as a TimedPose."""
        timestamp, pose = self.entry(index)
        return TimedPose(timestamp, pose)

    def timestamps(self) -> np.ndarray:
        return np.array([timestamp for timestamp, _ in self], dtype=np.float64)

    def lower_bound(self, target_time: float) -> int:
        """
        Find the first position whose timestamp is not less than target_time.

        Returns len(self) if every timestamp is less than target_time.
        """
        for index, (timestamp, _) in enumerate(self):
            if not timestamp < target_time:
                return index
        return len(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} samples)"


class SequentialTrajectory(TrajectoryView):
    """View over a sized, re-iterable collection without random access."""

    def __init__(self, collection: Collection, projection: Projection = project_timed_pose):
        super().__init__(projection)
        self._collection = collection

    def __len__(self) -> int:
        return len(self._collection)

    def elements(self) -> Iterator[Any]:
        return iter(self._collection)


class IndexedTrajectory(TrajectoryView):
    """
    View over a random-access sequence.

    The sequence is snapshotted and its timestamps projected once at
    construction, so each lower bound search is a binary search over a
    contiguous array. Later changes to the source container are not seen.
    """

    random_access = True

    def __init__(self, sequence: Sequence, projection: Projection = project_timed_pose):
        super().__init__(projection)
        self._sequence = tuple(sequence)
        self._timestamps = np.array(
            [projection(element)[0] for element in self._sequence], dtype=np.float64
        )

    def __len__(self) -> int:
        return len(self._sequence)

    def elements(self) -> Iterator[Any]:
        return iter(self._sequence)

    def entry(self, index: int) -> Tuple[float, Pose]:
        if not 0 <= index < len(self):
            raise IndexError(f"Trajectory index {index} out of range for {len(self)} samples")
        return self.projection(self._sequence[index])

    def timestamps(self) -> np.ndarray:
        return self._timestamps.copy()

    def lower_bound(self, target_time: float) -> int:
        return int(np.searchsorted(self._timestamps, target_time, side='left'))


class MappingTrajectory(IndexedTrajectory):
    """View over a mapping of timestamp -> TimedPose."""

    def __init__(self, mapping: Mapping, projection: Projection = project_keyed_item):
        items = sorted(mapping.items(), key=itemgetter(0))
        super().__init__(items, projection)


# =============================================================================
# CONSTRUCTION HELPERS
# =============================================================================

def as_trajectory(poses: Any) -> TrajectoryView:
    """
    Wrap a container in the view matching its container kind.

    Views are returned unchanged. Mappings are treated as timestamp-keyed,
    sequences as random access, other sized collections as sequential.
    One-shot iterables are materialized into a tuple.

    Args:
        poses: TrajectoryView, mapping, sequence or iterable of TimedPose

    Returns:
        TrajectoryView over the container
    """
    if isinstance(poses, TrajectoryView):
        return poses
    if isinstance(poses, Mapping):
        return MappingTrajectory(poses)
    if isinstance(poses, Sequence):
        return IndexedTrajectory(poses)
    if isinstance(poses, Collection):
        return SequentialTrajectory(poses)
    return IndexedTrajectory(tuple(poses))


def build_trajectory_view(poses: Iterable[TimedPose], container: str = 'sequence') -> TrajectoryView:
    """
    Store TimedPose samples in the requested container kind and wrap them in a view.

    Args:
        poses: TimedPose samples in time order
        container: 'sequence' (list), 'mapping' (dict keyed by timestamp)
            or 'sequential' (deque, searched linearly)

    Returns:
        TrajectoryView over the new container
    """
    poses = list(poses)
    if container == 'sequence':
        return IndexedTrajectory(poses)
    if container == 'mapping':
        mapping = {}
        for timed_pose in poses:
            if timed_pose.timestamp in mapping:
                logger.warning(f"Duplicate timestamp {timed_pose.timestamp} collapsed in mapping trajectory")
            mapping.setdefault(timed_pose.timestamp, timed_pose)
        return MappingTrajectory(mapping)
    if container == 'sequential':
        return SequentialTrajectory(deque(poses))
    raise ValueError(f"Unknown trajectory container: {container}")


def validate_trajectory(trajectory: Any) -> List[int]:
    """
    Check that timestamps are non-decreasing.

    Args:
        trajectory: Any container accepted by as_trajectory

    Returns:
        Positions of repeated timestamps (ties are allowed but ambiguous)

    Raises:
        ValueError: If any timestamp is smaller than its predecessor
    """
    timestamps = as_trajectory(trajectory).timestamps()
    steps = np.diff(timestamps)

    decreasing = np.flatnonzero(steps < 0)
    if decreasing.size:
        index = int(decreasing[0]) + 1
        raise ValueError(
            f"Timestamps must be non-decreasing: sample {index} at {timestamps[index]} "
            f"follows {timestamps[index - 1]}"
        )

    ties = [int(i) + 1 for i in np.flatnonzero(steps == 0)]
    if ties:
        logger.warning(f"Trajectory has {len(ties)} repeated timestamps; first exact match wins")
    return ties
