"""Unit tests for posetime.interpolation.neighbor_locator.

Tests exact matches, bracketing pairs, range rejection and empty input for
every container kind.
"""

from collections import deque

import numpy as np
import pytest

from posetime.geometry import TimedPose
from posetime.interpolation import (
    Bracket,
    EmptyTrajectory,
    Exact,
    IndexedTrajectory,
    MappingTrajectory,
    OutOfRange,
    SequentialTrajectory,
    is_original_timestamp,
    locate,
)


@pytest.fixture(params=['list', 'deque', 'dict'])
def trajectory(request, square_poses):
    if request.param == 'list':
        return list(square_poses)
    if request.param == 'deque':
        return SequentialTrajectory(deque(square_poses))
    return MappingTrajectory({p.timestamp: p for p in square_poses})


class TestLocateFailures:
    """Test suite for failure outcomes."""

    def test_empty_trajectory(self):
        result = locate([], 0.0)
        assert isinstance(result, EmptyTrajectory)

    def test_empty_mapping(self):
        assert isinstance(locate({}, 1.0), EmptyTrajectory)

    @pytest.mark.parametrize("target", [-0.001, -10.0, 4.001, 100.0])
    def test_out_of_range(self, trajectory, target):
        result = locate(trajectory, target)
        assert isinstance(result, OutOfRange)
        assert result.target_time == target
        assert result.start_time == 0.0
        assert result.end_time == 4.0

    def test_nan_is_out_of_range(self, trajectory):
        assert isinstance(locate(trajectory, float('nan')), OutOfRange)

    def test_failures_are_returned_not_raised(self):
        # Reaching the assertion at all means nothing was raised
        assert isinstance(locate([], 1.0), ValueError)


class TestLocateExact:
    """Test suite for exact timestamp matches."""

    def test_first_sample(self, trajectory):
        assert locate(trajectory, 0.0) == Exact(0)

    def test_last_sample(self, trajectory):
        assert locate(trajectory, 4.0) == Exact(4)

    @pytest.mark.parametrize("index", [1, 2, 3])
    def test_interior_samples(self, trajectory, index):
        assert locate(trajectory, float(index)) == Exact(index)

    def test_single_sample(self, square_poses):
        single = [square_poses[2]]
        assert locate(single, 2.0) == Exact(0)
        assert isinstance(locate(single, 2.5), OutOfRange)
        assert isinstance(locate(single, 1.5), OutOfRange)

    def test_tie_returns_first_match(self, square_poses):
        poses = square_poses[:2] + [TimedPose(1.0, square_poses[2].pose)] + square_poses[2:]
        assert locate(poses, 1.0) == Exact(1)
        assert locate(SequentialTrajectory(deque(poses)), 1.0) == Exact(1)


class TestLocateBracket:
    """Test suite for bracketing pairs."""

    @pytest.mark.parametrize("target, expected", [
        (0.5, Bracket(0, 1)),
        (1.75, Bracket(1, 2)),
        (2.5, Bracket(2, 3)),
        (3.999, Bracket(3, 4)),
        (1e-9, Bracket(0, 1)),
    ])
    def test_bracketing_pairs(self, trajectory, target, expected):
        assert locate(trajectory, target) == expected

    def test_bracket_after_tie(self, square_poses):
        poses = square_poses[:2] + [TimedPose(1.0, square_poses[2].pose)] + square_poses[2:]
        # Samples 1 and 2 share t=1.0; the bracket starts at the later one
        assert locate(poses, 1.5) == Bracket(2, 3)

    def test_bracket_is_strict(self, trajectory, square_poses):
        result = locate(trajectory, 2.25)
        assert square_poses[result.before].timestamp < 2.25 < square_poses[result.after].timestamp
        assert result.after == result.before + 1


class TestIsOriginalTimestamp:
    """Test suite for is_original_timestamp."""

    def test_recorded_times(self, trajectory):
        for t in (0.0, 1.0, 2.0, 3.0, 4.0):
            assert is_original_timestamp(trajectory, t)

    def test_within_tolerance(self, trajectory):
        assert is_original_timestamp(trajectory, 2.0 + 1e-10)

    def test_interpolated_times(self, trajectory):
        for t in (0.5, 1.75, 2.0 + 1e-6, 5.0):
            assert not is_original_timestamp(trajectory, t)

    def test_just_below_a_sample(self, trajectory):
        assert is_original_timestamp(trajectory, 3.0 - 1e-10)
        assert is_original_timestamp(trajectory, 4.0 - 1e-10)

    def test_outside_range_and_nan(self, trajectory):
        assert is_original_timestamp(trajectory, -1e-10)
        assert not is_original_timestamp(trajectory, -1.0)
        assert not is_original_timestamp(trajectory, float('nan'))

    def test_wide_tolerance(self, trajectory):
        assert is_original_timestamp(trajectory, 1.4, tolerance=0.5)
        assert not is_original_timestamp(trajectory, 1.5, tolerance=0.5)

    def test_random_access_search_matches_scan(self, square_poses):
        indexed = IndexedTrajectory(square_poses)
        sequential = SequentialTrajectory(deque(square_poses))
        assert indexed.random_access and not sequential.random_access
        for t in np.linspace(-0.5, 4.5, 101):
            for tolerance in (1e-9, 0.01, 0.3):
                assert (is_original_timestamp(indexed, t, tolerance)
                        == is_original_timestamp(sequential, t, tolerance))
