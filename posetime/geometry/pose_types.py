"""
Core pose data structures for time-indexed pose interpolation.

This module provides:
- Vector3: 3D position or displacement
- Quaternion: rotation in scalar-first format [w, x, y, z]
- Pose: position plus orientation (6 degrees of freedom)
- TimedPose: a Pose stamped with a time in seconds

All types are immutable value types. Quaternion arithmetic is backed by the
numpy-quaternion library so results interoperate with quaternion.quaternion
objects and rotation matrices.
"""

import math
import numbers
from dataclasses import dataclass, field
from typing import Union

import numpy as np
import quaternion

# Quaternions with a norm below this are treated as degenerate
NORMALIZE_EPSILON = 1e-10


# =============================================================================
# Core Data Structures
# =============================================================================

@dataclass(frozen=True)
class Vector3:
    """
    A point or displacement in 3D space.

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_array(cls, values) -> "Vector3":
        """Build a Vector3 from any 3-element array-like."""
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Vector3 requires 3 components, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Quaternion:
    """
    Rotation quaternion in scalar-first format.

    Orientations are expected to have unit norm; intermediate results of
    addition and scaling may not, and should be passed through normalized().

    Attributes:
        w: Scalar (real) part.
        x: Imaginary i component.
        y: Imaginary j component.
        z: Imaginary k component.
    """
    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values) -> "Quaternion":
        """Build a Quaternion from a [w, x, y, z] array-like."""
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (4,):
            raise ValueError(f"Quaternion requires 4 components [w, x, y, z], got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))

    @classmethod
    def from_quaternion(cls, q: quaternion.quaternion) -> "Quaternion":
        """Build a Quaternion from a numpy-quaternion object."""
        return cls(float(q.w), float(q.x), float(q.y), float(q.z))

    @classmethod
    def from_rotation_matrix(cls, matrix) -> "Quaternion":
        """Build a unit Quaternion from a 3x3 rotation matrix."""
        rot = np.asarray(matrix, dtype=np.float64)
        if rot.shape != (3, 3):
            raise ValueError(f"Rotation matrix must be 3x3, got shape {rot.shape}")
        return cls.from_array(quaternion.as_float_array(quaternion.from_rotation_matrix(rot)))

    def to_quaternion(self) -> quaternion.quaternion:
        return quaternion.quaternion(self.w, self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.w, self.x, self.y, self.z])

    def as_rotation_matrix(self) -> np.ndarray:
        return quaternion.as_rotation_matrix(self.to_quaternion())

    def dot(self, other: "Quaternion") -> float:
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Quaternion":
        """
        Return this quaternion scaled to unit norm.

        Near-zero quaternions (norm <= 1e-10) have no meaningful direction and
        normalize to the identity rotation.
        """
        norm = self.norm()
        if norm > NORMALIZE_EPSILON:
            return Quaternion(self.w / norm, self.x / norm, self.y / norm, self.z / norm)
        return Quaternion.identity()

    def __mul__(self, other: Union["Quaternion", float]) -> "Quaternion":
        # Quaternion * Quaternion is the Hamilton product, Quaternion * number scales
        if isinstance(other, Quaternion):
            return Quaternion.from_quaternion(self.to_quaternion() * other.to_quaternion())
        if isinstance(other, numbers.Real):
            return Quaternion(self.w * other, self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Quaternion":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self * scalar

    def __add__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> "Quaternion":
        return Quaternion(-self.w, -self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Pose:
    """
    Six degree of freedom pose.

    Attributes:
        position: Position in the world frame.
        orientation: Orientation quaternion relative to the world frame.
    """
    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass(frozen=True)
class TimedPose:
    """
    A Pose recorded at a point in time.

    Attributes:
        timestamp: Sample time in seconds.
        pose: The recorded pose.
    """
    timestamp: float = 0.0
    pose: Pose = field(default_factory=Pose)

    @classmethod
    def from_components(cls, timestamp: float, position, orientation) -> "TimedPose":
        """
        Build a TimedPose from raw components.

        Args:
            timestamp: Sample time in seconds
            position: [x, y, z] array-like or Vector3
            orientation: [w, x, y, z] array-like, Quaternion or quaternion.quaternion

        Returns:
            TimedPose
        """
        if not isinstance(position, Vector3):
            position = Vector3.from_array(position)
        if isinstance(orientation, quaternion.quaternion):
            orientation = Quaternion.from_quaternion(orientation)
        elif not isinstance(orientation, Quaternion):
            orientation = Quaternion.from_array(orientation)
        return cls(float(timestamp), Pose(position, orientation))

    @property
    def position(self) -> Vector3:
        return self.pose.position

    @property
    def orientation(self) -> Quaternion:
        return self.pose.orientation
