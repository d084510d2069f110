"""
Geometry module for posetime.

Provides the immutable value types shared by every other module:
- Vector3, Quaternion: position and orientation primitives
- Pose, TimedPose: 6-DoF poses with and without a timestamp
"""

from .pose_types import (
    NORMALIZE_EPSILON,
    Vector3,
    Quaternion,
    Pose,
    TimedPose,
)

__all__ = [
    'NORMALIZE_EPSILON',
    'Vector3',
    'Quaternion',
    'Pose',
    'TimedPose',
]
