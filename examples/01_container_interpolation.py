#!/usr/bin/env python3
"""
posetime Example 1: Interpolating Over Different Containers
===========================================================

Builds a five-pose trajectory and queries it at recorded and in-between
times, holding the same samples in three container kinds:

- list (random access, binary search)
- deque (sequential, linear scan)
- dict keyed by timestamp (sorted once, binary search)

All three produce identical results. Interpolated poses print in green.

Run from project root:
    python examples/01_container_interpolation.py
"""

import sys
import logging
from collections import deque
from pathlib import Path

# Setup project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from posetime import (
    TimedPose,
    SequentialTrajectory,
    MappingTrajectory,
    IndexedTrajectory,
    interpolate_at,
)
from posetime.io import print_interpolation_results


def build_pose_data():
    """The recorded samples shared by every container."""
    return [
        TimedPose.from_components(0.0, [0.0, 0.0, 0.0], [1.0, 0.0, 0.0, 0.0]),
        TimedPose.from_components(1.0, [1.0, 0.0, 0.0], [0.7071, 0.0, 0.7071, 0.0]),
        TimedPose.from_components(2.0, [1.0, 1.0, 0.0], [0.0, 0.0, 1.0, 0.0]),
        TimedPose.from_components(3.0, [0.0, 1.0, 0.0], [0.0, 0.0, 0.7071, 0.7071]),
        TimedPose.from_components(4.0, [0.0, 0.0, 1.0], [0.0, 0.0, 0.0, 1.0]),
    ]


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    pose_data = build_pose_data()
    test_times = [0.0, 0.5, 1.0, 1.75, 2.5, 3.5, 4.0]

    trajectories = {
        'list': IndexedTrajectory(list(pose_data)),
        'deque': SequentialTrajectory(deque(pose_data)),
        'dict': MappingTrajectory({p.timestamp: p for p in pose_data}),
    }

    for name, trajectory in trajectories.items():
        print("=" * 60)
        print(f"  Testing with {name} ({type(trajectory).__name__})")
        print("=" * 60)
        results = [interpolate_at(trajectory, t) for t in test_times]
        print_interpolation_results(trajectory, test_times, results)
        print()

    # Queries outside the recorded range come back as failures
    print("Query at t=5.0:", repr(interpolate_at(trajectories['list'], 5.0)))


if __name__ == "__main__":
    main()
