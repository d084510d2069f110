"""
Geometry utilities for pose trajectories.

Provides:
- point_distance: Euclidean distance between two N-dimensional points
- rotation_angle_between: Angle of the relative rotation between two orientations
"""

import numpy as np
import logging

from posetime.geometry.pose_types import Quaternion

logger = logging.getLogger(__name__)


def point_distance(p1, p2) -> float:
    """
    Euclidean distance between two points of equal dimension.

    Args:
        p1: First point (array-like of any length).
        p2: Second point, same length as p1.

    Returns:
        Distance between the points; 0.0 for two empty points.

    Raises:
        ValueError: If the points have different dimensions.
    """
    a = np.asarray(p1, dtype=np.float64).ravel()
    b = np.asarray(p2, dtype=np.float64).ravel()

    if a.shape != b.shape:
        raise ValueError(f"Points must have the same dimension, got {a.size} and {b.size}")

    if a.size == 0:
        return 0.0

    return float(np.sqrt(np.sum((a - b) ** 2)))


def rotation_angle_between(q1: Quaternion, q2: Quaternion) -> float:
    """
    Angle in radians of the rotation taking orientation q1 to q2.

    q and -q give the same angle, so the result lies in [0, pi].

    Args:
        q1: Unit quaternion.
        q2: Unit quaternion.

    Returns:
        Rotation angle in radians.
    """
    dot_product = abs(q1.normalized().dot(q2.normalized()))
    return float(2.0 * np.arccos(np.clip(dot_product, 0.0, 1.0)))
