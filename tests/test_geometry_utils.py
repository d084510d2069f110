"""Unit tests for posetime.utils.geometry_utils."""

import numpy as np
import pytest

from posetime.geometry import Quaternion, Vector3
from posetime.utils import point_distance, rotation_angle_between


class TestPointDistance:
    """Test suite for point_distance."""

    @pytest.mark.parametrize("p1, p2, expected", [
        ([0.0, 0.0], [3.0, 4.0], 5.0),
        ([1.0, 2.0, 3.0], [4.0, 5.0, 6.0], np.sqrt(27.0)),
        ([2.0], [-6.0], 8.0),
        ([1.0, 1.0, 1.0, 1.0], [1.0, 1.0, 1.0, 1.0], 0.0),
    ])
    def test_distances(self, p1, p2, expected):
        assert point_distance(p1, p2) == pytest.approx(expected)

    def test_vector3_positions(self):
        a = Vector3(0.0, 0.0, 0.0)
        b = Vector3(1.0, 2.0, 2.0)
        assert point_distance(a.as_array(), b.as_array()) == pytest.approx(3.0)

    def test_symmetric(self):
        assert point_distance([1.0, -2.0], [4.0, 2.0]) == point_distance([4.0, 2.0], [1.0, -2.0])

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError, match="same dimension"):
            point_distance([1.0, 2.0], [1.0, 2.0, 3.0])

    def test_empty_points(self):
        assert point_distance([], []) == 0.0


class TestRotationAngleBetween:
    """Test suite for rotation_angle_between."""

    def test_identical(self):
        q = Quaternion(0.5, 0.5, 0.5, 0.5)
        assert rotation_angle_between(q, q) == pytest.approx(0.0, abs=1e-7)

    def test_quarter_turn(self):
        q = Quaternion(np.sqrt(0.5), 0.0, np.sqrt(0.5), 0.0)
        assert rotation_angle_between(Quaternion.identity(), q) == pytest.approx(np.pi / 2)

    def test_half_turn(self):
        q = Quaternion(0.0, 0.0, 1.0, 0.0)
        assert rotation_angle_between(Quaternion.identity(), q) == pytest.approx(np.pi)

    def test_sign_invariant(self):
        q1 = Quaternion(np.sqrt(0.5), 0.0, 0.0, np.sqrt(0.5))
        q2 = Quaternion(0.6, 0.8, 0.0, 0.0)
        assert rotation_angle_between(q1, q2) == pytest.approx(rotation_angle_between(q1, -q2))
