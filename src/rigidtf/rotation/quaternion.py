"""Quaternion algebra on plain numpy arrays.

All quaternions here are ``[i, j, k, w]`` arrays (scalar-last), the same
layout as the serialized ``ijkw`` field and scipy's ``Rotation.as_quat``.
"""

from typing import Tuple

import numpy as np
from scipy.spatial.transform import Rotation

IDENTITY_QUATERNION = np.array([0.0, 0.0, 0.0, 1.0])


def normalize_quaternion(quaternion: np.ndarray) -> np.ndarray:
    """Scale a quaternion to unit norm.

    Args:
        quaternion: [i, j, k, w], non-zero.

    Returns:
        Unit quaternion [i, j, k, w].
    """
    quaternion = np.asarray(quaternion, dtype=np.float64)
    return quaternion / np.linalg.norm(quaternion)


def quaternion_multiply(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """Hamilton product q1 * q2.

    Applying the result to a vector is the same as applying q2 first and
    then q1.

    Args:
        q1: Left quaternion [i, j, k, w].
        q2: Right quaternion [i, j, k, w].

    Returns:
        Product quaternion [i, j, k, w].
    """
    x1, y1, z1, w1 = q1
    x2, y2, z2, w2 = q2
    return np.array([
        w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
        w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
        w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
    ])


def quaternion_conjugate(quaternion: np.ndarray) -> np.ndarray:
    """Conjugate (the inverse rotation for a unit quaternion)."""
    i, j, k, w = quaternion
    return np.array([-i, -j, -k, w])


def axis_angle_to_quaternion(axis: np.ndarray, angle: float) -> np.ndarray:
    """Unit quaternion for a rotation of ``angle`` radians about ``axis``.

    Args:
        axis: Unit rotation axis, shape (3,).
        angle: Rotation angle in radians.

    Returns:
        Unit quaternion [i, j, k, w].
    """
    half = 0.5 * angle
    i, j, k = np.asarray(axis, dtype=np.float64) * np.sin(half)
    return np.array([i, j, k, np.cos(half)])


def quaternion_to_axis_angle(quaternion: np.ndarray, eps: float = 1e-12) -> Tuple[np.ndarray, float]:
    """Split a unit quaternion into rotation axis and angle.

    Args:
        quaternion: Unit quaternion [i, j, k, w].
        eps: Angles at or below this are treated as no rotation.

    Returns:
        Tuple of (axis, angle) where angle is in [0, 2*pi] radians. For a
        zero rotation the axis is undefined and +Z is returned.
    """
    i, j, k, w = quaternion
    angle = 2.0 * np.arccos(np.clip(w, -1.0, 1.0))
    vector = np.array([i, j, k])
    sin_half = np.linalg.norm(vector)

    if angle <= eps or sin_half <= eps:
        return np.array([0.0, 0.0, 1.0]), 0.0

    # |ijk| = sin(angle/2) for a unit quaternion
    return vector / sin_half, float(angle)


def quaternion_to_rotation_matrix(quaternion: np.ndarray) -> np.ndarray:
    """Convert quaternion to 3x3 rotation matrix.

    Args:
        quaternion: [i, j, k, w] (scalar-last convention, same as scipy).

    Returns:
        3x3 rotation matrix.
    """
    rotation = Rotation.from_quat(np.asarray(quaternion, dtype=np.float64))
    return rotation.as_matrix()


def rotation_matrix_to_quaternion(rotation_matrix: np.ndarray) -> np.ndarray:
    """Convert 3x3 rotation matrix to quaternion.

    scipy solves for the largest of the trace and the three diagonal terms
    first, which keeps the result accurate near 180 degrees.

    Args:
        rotation_matrix: 3x3 rotation matrix.

    Returns:
        Quaternion [i, j, k, w], normalized, with w >= 0.
    """
    rotation = Rotation.from_matrix(np.asarray(rotation_matrix, dtype=np.float64))
    quaternion = normalize_quaternion(rotation.as_quat())

    # q and -q are the same rotation; keep the scalar part non-negative
    if quaternion[3] < 0:
        quaternion = -quaternion

    return quaternion


def rotate_vector(quaternion: np.ndarray, vector: np.ndarray) -> np.ndarray:
    """Rotate a 3-vector by a unit quaternion.

    Args:
        quaternion: Unit quaternion [i, j, k, w].
        vector: Vector to rotate, shape (3,).

    Returns:
        Rotated vector, shape (3,).
    """
    return quaternion_to_rotation_matrix(quaternion) @ np.asarray(vector, dtype=np.float64)


def pose_to_matrix(quaternion: np.ndarray, translation: np.ndarray) -> np.ndarray:
    """Create a 4x4 homogeneous matrix from a quaternion and translation.

    Args:
        quaternion: Unit quaternion [i, j, k, w].
        translation: [x, y, z] translation.

    Returns:
        4x4 homogeneous transformation matrix.
    """
    transform = np.eye(4)
    transform[:3, :3] = quaternion_to_rotation_matrix(quaternion)
    transform[:3, 3] = translation
    return transform


def matrix_to_pose(transform: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Extract quaternion and translation from a 4x4 homogeneous matrix.

    Args:
        transform: 4x4 homogeneous transformation matrix.

    Returns:
        Tuple of (quaternion, translation) where quaternion is [i, j, k, w]
        and translation is [x, y, z].
    """
    transform = np.asarray(transform, dtype=np.float64)
    translation = transform[:3, 3].copy()
    quaternion = rotation_matrix_to_quaternion(transform[:3, :3])
    return quaternion, translation
