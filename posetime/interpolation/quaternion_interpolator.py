"""
Quaternion interpolation utilities.

Provides:
- lerp: componentwise linear interpolation for vectors and quaternions
- slerp: spherical linear interpolation along the shortest arc
"""

import logging
from typing import Union, TypeVar

import numpy as np
import quaternion

from posetime.geometry.pose_types import Quaternion

logger = logging.getLogger(__name__)

# Above this dot product sin(theta) is too small to divide by safely
NEAR_PARALLEL_DOT = 0.9995

QuaternionLike = Union[Quaternion, quaternion.quaternion, np.ndarray, list, tuple]
T = TypeVar('T')


def as_quaternion(q: QuaternionLike) -> Quaternion:
    """Coerce a Quaternion, numpy-quaternion object or [w, x, y, z] array to Quaternion."""
    if isinstance(q, Quaternion):
        return q
    if isinstance(q, quaternion.quaternion):
        return Quaternion.from_quaternion(q)
    return Quaternion.from_array(q)


def lerp(a: T, b: T, t: float) -> T:
    """
    Linear interpolation between two values.

    Parameters:
    -----------
    a, b : Vector3, Quaternion or float
        Values supporting addition and scalar multiplication
    t : float
        Interpolation parameter, t = 0 returns a and t = 1 returns b

    Returns:
    --------
    Same type as the inputs
    """
    return a * (1.0 - t) + b * t


def slerp(q1: QuaternionLike,
          q2: QuaternionLike,
          t: float,
          parallel_threshold: float = NEAR_PARALLEL_DOT) -> Quaternion:
    """
    Perform Spherical Linear Interpolation (SLERP) between two quaternions.

    Parameters:
    -----------
    q1, q2 : Quaternion, quaternion.quaternion or array-like
        Unit quaternions in scalar-first format [w, x, y, z]
    t : float
        Interpolation parameter between 0 and 1
        t = 0 returns q1, t = 1 returns q2 (or its negation, the same rotation)
    parallel_threshold : float
        Dot product above which the quaternions are treated as parallel and
        interpolated linearly

    Returns:
    --------
    Quaternion
        Interpolated unit quaternion
    """
    q1 = as_quaternion(q1)
    q2 = as_quaternion(q2)

    # Calculate cosine of angle between quaternions
    dot_product = q1.dot(q2)

    # q and -q are the same rotation; flip q2 to take the shorter arc
    if dot_product < 0.0:
        q2 = -q2
        dot_product = -dot_product

    # If quaternions are very close, just do linear interpolation
    if dot_product > parallel_threshold:
        return lerp(q1, q2, t).normalized()

    theta = np.arccos(np.clip(dot_product, -1.0, 1.0))
    sin_theta = np.sin(theta)

    ratio1 = float(np.sin((1.0 - t) * theta) / sin_theta)
    ratio2 = float(np.sin(t * theta) / sin_theta)

    # Unit norm up to rounding; renormalize to keep orientations exact
    return (q1 * ratio1 + q2 * ratio2).normalized()
