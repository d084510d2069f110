"""Shared fixtures for posetime tests."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from posetime.geometry import TimedPose

PROJECT_ROOT = Path(__file__).resolve().parent.parent

SQRT_HALF = float(np.sqrt(0.5))


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def square_poses():
    """Five samples one second apart, turning about y then z."""
    return [
        TimedPose.from_components(0.0, [0.0, 0.0, 0.0], [1.0, 0.0, 0.0, 0.0]),
        TimedPose.from_components(1.0, [1.0, 0.0, 0.0], [SQRT_HALF, 0.0, SQRT_HALF, 0.0]),
        TimedPose.from_components(2.0, [1.0, 1.0, 0.0], [0.0, 0.0, 1.0, 0.0]),
        TimedPose.from_components(3.0, [0.0, 1.0, 0.0], [0.0, 0.0, SQRT_HALF, SQRT_HALF]),
        TimedPose.from_components(4.0, [0.0, 0.0, 1.0], [0.0, 0.0, 0.0, 1.0]),
    ]


@pytest.fixture
def half_turn_poses():
    """Two samples 2 s apart, 180 degree rotation about y."""
    return [
        TimedPose.from_components(0.0, [0.0, 0.0, 0.0], [1.0, 0.0, 0.0, 0.0]),
        TimedPose.from_components(2.0, [2.0, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0]),
    ]


@pytest.fixture
def random_unit_quaternions():
    rng = np.random.default_rng(42)
    q = rng.normal(size=(50, 4))
    return q / np.linalg.norm(q, axis=1, keepdims=True)
