"""Unit tests for quaternion algebra on numpy arrays."""

import numpy as np
import pytest
from scipy.spatial.transform import Rotation as ScipyRotation

from rigidtf.rotation.quaternion import (
    IDENTITY_QUATERNION,
    axis_angle_to_quaternion,
    matrix_to_pose,
    normalize_quaternion,
    pose_to_matrix,
    quaternion_conjugate,
    quaternion_multiply,
    quaternion_to_axis_angle,
    quaternion_to_rotation_matrix,
    rotate_vector,
    rotation_matrix_to_quaternion,
)


class TestQuaternionConversion:
    """Tests for quaternion/rotation matrix conversion."""

    def test_identity_quaternion(self):
        """Identity quaternion gives identity matrix."""
        R = quaternion_to_rotation_matrix(IDENTITY_QUATERNION)

        np.testing.assert_array_almost_equal(R, np.eye(3))

    def test_identity_matrix(self):
        """Identity matrix gives identity quaternion."""
        q = rotation_matrix_to_quaternion(np.eye(3))

        np.testing.assert_array_almost_equal(q, [0, 0, 0, 1])

    def test_quaternion_roundtrip(self, sample_quaternion: np.ndarray):
        """Quaternion -> matrix -> quaternion roundtrip."""
        R = quaternion_to_rotation_matrix(sample_quaternion)
        q_back = rotation_matrix_to_quaternion(R)

        # q and -q are the same rotation
        if np.dot(sample_quaternion, q_back) < 0:
            q_back = -q_back

        np.testing.assert_array_almost_equal(sample_quaternion, q_back)

    def test_90_degree_z_rotation(self, sample_quaternion: np.ndarray, sample_matrix: np.ndarray):
        """90-degree rotation around Z maps x to y."""
        R = quaternion_to_rotation_matrix(sample_quaternion)

        np.testing.assert_array_almost_equal(R, sample_matrix)

    @pytest.mark.parametrize("axis", [[1, 0, 0], [0, 1, 0], [0, 0, 1], [1, 1, 0]])
    def test_half_turn_matrices(self, axis):
        """180-degree rotations convert without loss."""
        axis = np.array(axis, dtype=np.float64) / np.linalg.norm(axis)
        expected = ScipyRotation.from_rotvec(axis * np.pi)

        q = rotation_matrix_to_quaternion(expected.as_matrix())

        np.testing.assert_array_almost_equal(quaternion_to_rotation_matrix(q), expected.as_matrix())
        assert q[3] >= 0

    def test_matches_scipy(self):
        """Matrix conversion agrees with scipy for random rotations."""
        rotations = ScipyRotation.from_quat(np.random.default_rng(7).normal(size=(20, 4)))

        for rotation in rotations:
            q = rotation_matrix_to_quaternion(rotation.as_matrix())
            expected = rotation.as_quat()
            if np.dot(q, expected) < 0:
                expected = -expected
            np.testing.assert_array_almost_equal(q, expected)
            np.testing.assert_array_almost_equal(
                quaternion_to_rotation_matrix(rotation.as_quat()), rotation.as_matrix()
            )

    def test_scalar_part_non_negative(self):
        """Matrix conversion always returns w >= 0."""
        for rotation in ScipyRotation.from_quat(np.random.default_rng(3).normal(size=(20, 4))):
            assert rotation_matrix_to_quaternion(rotation.as_matrix())[3] >= 0


class TestQuaternionAlgebra:
    """Tests for products, conjugates and normalization."""

    def test_multiply_identity(self, sample_quaternion: np.ndarray):
        """Multiplying by identity leaves the quaternion unchanged."""
        np.testing.assert_array_almost_equal(
            quaternion_multiply(IDENTITY_QUATERNION, sample_quaternion), sample_quaternion
        )
        np.testing.assert_array_almost_equal(
            quaternion_multiply(sample_quaternion, IDENTITY_QUATERNION), sample_quaternion
        )

    def test_multiply_matches_matrix_product(self):
        """q1 * q2 corresponds to R1 @ R2."""
        r1, r2 = ScipyRotation.from_quat(np.random.default_rng(11).normal(size=(2, 4)))

        product = quaternion_multiply(r1.as_quat(), r2.as_quat())

        np.testing.assert_array_almost_equal(
            quaternion_to_rotation_matrix(product), r1.as_matrix() @ r2.as_matrix()
        )

    def test_multiply_not_commutative(self):
        """Rotations about different axes do not commute."""
        qx = axis_angle_to_quaternion([1, 0, 0], np.pi / 2)
        qz = axis_angle_to_quaternion([0, 0, 1], np.pi / 2)

        assert not np.allclose(quaternion_multiply(qx, qz), quaternion_multiply(qz, qx))

    def test_conjugate_is_inverse(self, sample_quaternion: np.ndarray):
        """q * conj(q) is the identity."""
        product = quaternion_multiply(sample_quaternion, quaternion_conjugate(sample_quaternion))

        np.testing.assert_array_almost_equal(product, IDENTITY_QUATERNION)

    def test_normalize(self):
        """Normalization scales to unit norm."""
        q = normalize_quaternion([1, 1, 1, 1])

        np.testing.assert_array_almost_equal(q, [0.5, 0.5, 0.5, 0.5])


class TestAxisAngle:
    """Tests for axis-angle/quaternion conversion."""

    def test_quarter_turn_about_z(self, sample_quaternion: np.ndarray):
        """90 degrees about Z."""
        q = axis_angle_to_quaternion([0, 0, 1], np.pi / 2)

        np.testing.assert_array_almost_equal(q, sample_quaternion)

    def test_split_quaternion(self, sample_quaternion: np.ndarray):
        """Quaternion splits back into axis and angle."""
        axis, angle = quaternion_to_axis_angle(sample_quaternion)

        np.testing.assert_array_almost_equal(axis, [0, 0, 1])
        assert angle == pytest.approx(np.pi / 2)

    def test_identity_has_default_axis(self):
        """Zero rotation reports +Z with angle 0."""
        axis, angle = quaternion_to_axis_angle(IDENTITY_QUATERNION)

        np.testing.assert_array_equal(axis, [0, 0, 1])
        assert angle == 0.0

    def test_half_turn(self):
        """180 degrees about X is recovered exactly."""
        axis, angle = quaternion_to_axis_angle(np.array([1.0, 0.0, 0.0, 0.0]))

        np.testing.assert_array_almost_equal(axis, [1, 0, 0])
        assert angle == pytest.approx(np.pi)


class TestPoseMatrix:
    """Tests for 4x4 homogeneous matrices."""

    def test_pose_to_matrix(self, sample_quaternion: np.ndarray, sample_matrix: np.ndarray):
        """Quaternion and translation fill the homogeneous matrix."""
        T = pose_to_matrix(sample_quaternion, np.array([10, 20, 30]))

        np.testing.assert_array_almost_equal(T[:3, :3], sample_matrix)
        np.testing.assert_array_almost_equal(T[:3, 3], [10, 20, 30])
        np.testing.assert_array_almost_equal(T[3], [0, 0, 0, 1])

    def test_matrix_to_pose_roundtrip(self, sample_quaternion: np.ndarray):
        """Matrix -> pose -> matrix roundtrip."""
        T = pose_to_matrix(sample_quaternion, np.array([1.0, -2.0, 0.5]))

        quaternion, translation = matrix_to_pose(T)

        np.testing.assert_array_almost_equal(pose_to_matrix(quaternion, translation), T)

    def test_rotate_vector(self, sample_quaternion: np.ndarray):
        """90 degrees about Z maps x to y."""
        np.testing.assert_array_almost_equal(
            rotate_vector(sample_quaternion, [1, 0, 0]), [0, 1, 0]
        )
