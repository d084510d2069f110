"""Unit tests for posetime.interpolation.batch."""

import logging

import numpy as np
import pytest

from posetime.interpolation import OutOfRange, interpolate_at, interpolate_many


class TestInterpolateMany:
    """Test suite for interpolate_many."""

    def test_sequential_matches_single_queries(self, square_poses):
        times = [0.0, 0.5, 1.75, 4.0]
        results = interpolate_many(square_poses, times)
        assert results == [interpolate_at(square_poses, t) for t in times]

    @pytest.mark.parametrize("max_workers", [2, 4])
    def test_thread_pool_preserves_order(self, square_poses, max_workers):
        times = np.linspace(0.0, 4.0, 100)
        results = interpolate_many(square_poses, times, max_workers=max_workers)
        assert len(results) == 100
        assert [r.timestamp for r in results] == pytest.approx(list(times))

    def test_small_batch_with_workers(self, square_poses):
        # Fewer queries than workers * MIN_QUERIES_PER_WORKER runs in the calling thread
        results = interpolate_many(square_poses, [0.5, 1.5], max_workers=8)
        assert [r.timestamp for r in results] == [0.5, 1.5]

    def test_failures_are_kept_in_place(self, square_poses, caplog):
        with caplog.at_level(logging.WARNING, logger="posetime.interpolation.batch"):
            results = interpolate_many(square_poses, [-1.0, 2.0, 9.0])
        assert isinstance(results[0], OutOfRange)
        assert results[1] == square_poses[2]
        assert isinstance(results[2], OutOfRange)
        assert "2 of 3 queries" in caplog.text

    def test_scalar_time(self, square_poses):
        results = interpolate_many(square_poses, 2.5)
        assert len(results) == 1

    def test_generator_times(self, square_poses):
        results = interpolate_many(square_poses, (t for t in [0.5, 1.5]))
        assert [r.timestamp for r in results] == [0.5, 1.5]

    def test_progress_bar(self, square_poses):
        times = np.linspace(0.0, 4.0, 20)
        plain = interpolate_many(square_poses, times)
        assert interpolate_many(square_poses, times, show_progress=True) == plain
        assert interpolate_many(square_poses, times, max_workers=2, show_progress=True) == plain

    def test_empty_times(self, square_poses):
        assert interpolate_many(square_poses, []) == []
