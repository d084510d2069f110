"""Unit tests for posetime.io.pose_formatter."""

import io
import logging

from posetime.geometry import TimedPose
from posetime.interpolation import interpolate_many
from posetime.io import format_timed_pose, print_interpolation_results
from posetime.io.pose_formatter import GREEN, RESET, SEPARATOR


class TestFormatTimedPose:
    """Test suite for format_timed_pose."""

    def test_plain(self):
        pose = TimedPose.from_components(1.5, [1.0, 0.5, 0.0], [1.0, 0.0, 0.0, 0.0])
        assert format_timed_pose(pose) == (
            "Time: 1.5\n"
            "Position: [1, 0.5, 0]\n"
            "Orientation: [1, 0, 0, 0]"
        )

    def test_highlighted(self):
        pose = TimedPose.from_components(0.0, [0.0, 0.0, 0.0], [1.0, 0.0, 0.0, 0.0])
        text = format_timed_pose(pose, highlight=True)
        assert text.startswith(GREEN)
        assert text.endswith(RESET)
        assert format_timed_pose(pose) in text


class TestPrintInterpolationResults:
    """Test suite for print_interpolation_results."""

    def test_highlights_only_interpolated(self, square_poses):
        times = [0.0, 0.5, 1.0, 1.75]
        results = interpolate_many(square_poses, times)
        stream = io.StringIO()
        print_interpolation_results(square_poses, times, results, stream=stream)

        output = stream.getvalue()
        assert output.count(GREEN) == 2
        assert output.count(SEPARATOR) == 4
        assert "Time: 1.75" in output

    def test_failures_are_logged(self, square_poses, caplog):
        times = [2.0, 7.0]
        results = interpolate_many(square_poses, times)
        stream = io.StringIO()
        with caplog.at_level(logging.ERROR, logger="posetime.io.pose_formatter"):
            print_interpolation_results(square_poses, times, results, stream=stream)

        assert stream.getvalue().count(SEPARATOR) == 1
        assert "Query at 7.0 failed" in caplog.text
