"""Conversions between rotation variants.

Every conversion goes through the quaternion: each variant has one function
into a unit quaternion and one out of it, so converting between any two
variants is at most two steps.
"""

import logging
import math
from typing import Tuple, Union

import numpy as np

from rigidtf.errors import ValidationError
from rigidtf.rotation.model import (
    DEFAULT_EULER_ORDER,
    EULER_AXES,
    AxisAngle,
    Euler,
    Quaternion,
    Rodrigues,
    Rotation,
    RotationFormat,
    RotationMatrix,
    rotation_format,
    validate_euler_order,
)
from rigidtf.rotation.quaternion import (
    IDENTITY_QUATERNION,
    axis_angle_to_quaternion,
    normalize_quaternion,
    quaternion_conjugate,
    quaternion_multiply,
    quaternion_to_axis_angle,
    quaternion_to_rotation_matrix,
    rotation_matrix_to_quaternion,
)
from rigidtf.units.angle import AngleValue

logger = logging.getLogger(__name__)

# |sin(middle angle)| at or above this is treated as gimbal lock
GIMBAL_LOCK_THRESHOLD = 1.0 - 1e-9

# Rotation vectors shorter than this are the identity
RODRIGUES_ZERO_ANGLE = 1e-12

_AXIS_INDEX = {"r": 0, "p": 1, "y": 2}

_VARIANT_TYPES = {
    RotationFormat.EULER: Euler,
    RotationFormat.QUATERNION: Quaternion,
    RotationFormat.AXIS_ANGLE: AxisAngle,
    RotationFormat.RODRIGUES: Rodrigues,
    RotationFormat.ROTATION_MATRIX: RotationMatrix,
}


# --- Into the quaternion pivot ---

def euler_to_quaternion(euler: Euler) -> np.ndarray:
    """Compose per-axis quaternions left to right as intrinsic rotations.

    Args:
        euler: Euler rotation.

    Returns:
        Unit quaternion [i, j, k, w] equal to +/-(q_first * q_second * q_third),
        with w >= 0.
    """
    result = IDENTITY_QUATERNION.copy()
    for axis, angle in zip(euler.order, euler.angles):
        step = axis_angle_to_quaternion(EULER_AXES[axis], angle.as_radians)
        result = quaternion_multiply(result, step)
    result = normalize_quaternion(result)

    # Same sign convention as rotation_matrix_to_quaternion
    if result[3] < 0:
        result = -result

    return result


def axis_angle_to_quaternion_array(axis_angle: AxisAngle) -> np.ndarray:
    """Unit quaternion [i, j, k, w] for an axis-angle rotation."""
    if axis_angle.angle.value == 0.0:
        return IDENTITY_QUATERNION.copy()
    return axis_angle_to_quaternion(axis_angle.unit_axis, axis_angle.angle.as_radians)


def rodrigues_to_quaternion(rodrigues: Rodrigues) -> np.ndarray:
    """Unit quaternion [i, j, k, w] for a rotation vector.

    The zero vector (and anything shorter than RODRIGUES_ZERO_ANGLE) maps
    to the identity, since its axis is undefined.
    """
    params = rodrigues.array
    angle = float(np.linalg.norm(params))
    if angle <= RODRIGUES_ZERO_ANGLE:
        return IDENTITY_QUATERNION.copy()
    return axis_angle_to_quaternion(params / angle, angle)


def to_quaternion(rotation: Rotation) -> Quaternion:
    """Convert any rotation variant to a unit quaternion.

    Args:
        rotation: Rotation in any format.

    Returns:
        Quaternion with exactly unit norm.
    """
    if isinstance(rotation, Quaternion):
        ijkw = normalize_quaternion(rotation.array)
    elif isinstance(rotation, Euler):
        ijkw = euler_to_quaternion(rotation)
    elif isinstance(rotation, AxisAngle):
        ijkw = axis_angle_to_quaternion_array(rotation)
    elif isinstance(rotation, Rodrigues):
        ijkw = rodrigues_to_quaternion(rotation)
    elif isinstance(rotation, RotationMatrix):
        ijkw = rotation_matrix_to_quaternion(rotation.array)
    else:
        raise TypeError(f"Expected a rotation, got {type(rotation).__name__}")

    return Quaternion.from_array(ijkw)


# --- Out of the quaternion pivot ---

def quaternion_to_euler_angles(quaternion: np.ndarray, order: str) -> Tuple[float, float, float]:
    """Extract intrinsic Euler angles for the given axis order.

    For order (a, b, c) the angles satisfy R = R_a(alpha) R_b(beta) R_c(gamma).
    beta comes from asin of one matrix element; alpha and gamma from atan2.
    At gimbal lock alpha and gamma rotate about the same axis and only their
    combination is defined: gamma is fixed to 0 and alpha carries the whole
    rotation.

    Args:
        quaternion: Unit quaternion [i, j, k, w].
        order: Permutation of "rpy".

    Returns:
        Tuple of (alpha, beta, gamma) in radians.
    """
    a, b, c = (_AXIS_INDEX[axis] for axis in order)
    # +1 for cyclic orders (rpy, pyr, yrp), -1 for the others
    sign = 1.0 if (b - a) % 3 == 1 else -1.0

    m = quaternion_to_rotation_matrix(normalize_quaternion(quaternion))
    sin_beta = float(np.clip(sign * m[a, c], -1.0, 1.0))
    beta = math.asin(sin_beta)

    if abs(sin_beta) >= GIMBAL_LOCK_THRESHOLD:
        logger.warning(
            "Gimbal lock extracting Euler angles in order '%s': "
            "third angle fixed to 0, first angle holds the combined rotation",
            order,
        )
        alpha = math.atan2(sign * m[c, b], m[b, b])
        gamma = 0.0
    else:
        alpha = math.atan2(-sign * m[b, c], m[c, c])
        gamma = math.atan2(-sign * m[a, b], m[a, a])

    return alpha, beta, gamma


def _parse_target(target: Union[RotationFormat, str]) -> RotationFormat:
    try:
        return RotationFormat(target)
    except ValueError:
        known = ", ".join(f.value for f in RotationFormat)
        raise ValidationError(f"Unknown rotation format {target!r} (expected one of: {known})") from None


def from_quaternion(
    quaternion: Quaternion,
    target: Union[RotationFormat, str],
    order: str = DEFAULT_EULER_ORDER,
) -> Rotation:
    """Convert a quaternion to the requested rotation variant.

    Angles in the result are in radians.

    Args:
        quaternion: Source rotation.
        target: Format tag of the variant to produce.
        order: Axis order when the target is Euler.

    Returns:
        Rotation of the target variant.

    Raises:
        ValidationError: If the target is not a known format tag.
    """
    target = _parse_target(target)
    ijkw = normalize_quaternion(quaternion.array)

    if target is RotationFormat.QUATERNION:
        return Quaternion.from_array(ijkw)

    if target is RotationFormat.EULER:
        validate_euler_order(order)
        return Euler.from_radians(order, quaternion_to_euler_angles(ijkw, order))

    if target is RotationFormat.AXIS_ANGLE:
        axis, angle = quaternion_to_axis_angle(ijkw)
        return AxisAngle(tuple(axis), AngleValue.from_radians(angle))

    if target is RotationFormat.RODRIGUES:
        axis, angle = quaternion_to_axis_angle(ijkw)
        return Rodrigues(tuple(axis * angle))

    if target is RotationFormat.ROTATION_MATRIX:
        return RotationMatrix(quaternion_to_rotation_matrix(ijkw))

    raise ValueError(f"Unsupported rotation format: {target}")


def convert_rotation(
    rotation: Rotation,
    target: Union[RotationFormat, str],
    order: str = DEFAULT_EULER_ORDER,
) -> Rotation:
    """Convert a rotation to another variant through the quaternion.

    A rotation that is already in the target variant (and, for Euler, the
    requested order) is returned unchanged.

    Args:
        rotation: Rotation in any format.
        target: Format tag of the variant to produce.
        order: Axis order when the target is Euler.

    Returns:
        Rotation of the target variant.
    """
    target = _parse_target(target)
    if isinstance(rotation, _VARIANT_TYPES[target]):
        if not isinstance(rotation, Euler) or rotation.order == order:
            return rotation

    return from_quaternion(to_quaternion(rotation), target, order=order)


# --- Angle units ---

def rotation_into_degrees(rotation: Rotation) -> Rotation:
    """Express every angle of a rotation in degrees."""
    if isinstance(rotation, Euler):
        return Euler(rotation.order, tuple(angle.to_degrees() for angle in rotation.angles))
    if isinstance(rotation, AxisAngle):
        return AxisAngle(rotation.axis, rotation.angle.to_degrees())
    rotation_format(rotation)
    return rotation


def rotation_into_radians(rotation: Rotation) -> Rotation:
    """Express every angle of a rotation in radians."""
    if isinstance(rotation, Euler):
        return Euler(rotation.order, tuple(angle.to_radians() for angle in rotation.angles))
    if isinstance(rotation, AxisAngle):
        return AxisAngle(rotation.axis, rotation.angle.to_radians())
    rotation_format(rotation)
    return rotation


# --- Inverse and normalization ---

def inverse_rotation(rotation: Rotation) -> Rotation:
    """Inverse rotation in the same variant.

    Euler angles keep their axis order; the angles are re-extracted from the
    inverse quaternion and come back in radians.
    """
    if isinstance(rotation, Quaternion):
        return Quaternion.from_array(quaternion_conjugate(rotation.array))
    if isinstance(rotation, Euler):
        inverse = quaternion_conjugate(to_quaternion(rotation).array)
        return Euler.from_radians(rotation.order, quaternion_to_euler_angles(inverse, rotation.order))
    if isinstance(rotation, AxisAngle):
        return AxisAngle(rotation.axis, AngleValue(-rotation.angle.value, rotation.angle.unit))
    if isinstance(rotation, Rodrigues):
        return Rodrigues(tuple(-p for p in rotation.params))
    if isinstance(rotation, RotationMatrix):
        return RotationMatrix(rotation.array.T)
    raise TypeError(f"Expected a rotation, got {type(rotation).__name__}")


def normalize_rotation(rotation: Rotation) -> Rotation:
    """Wrap the angles of a rotation into a single turn.

    Euler and axis-angle angles are wrapped into [0, 360) degrees or
    [0, 2*pi) radians, and a rotation vector's length into [0, 2*pi).
    Quaternions and matrices carry no angles and are returned unchanged.
    """
    if isinstance(rotation, Euler):
        return Euler(rotation.order, tuple(angle.normalize() for angle in rotation.angles))
    if isinstance(rotation, AxisAngle):
        return AxisAngle(rotation.axis, rotation.angle.normalize())
    if isinstance(rotation, Rodrigues):
        params = rotation.array
        angle = float(np.linalg.norm(params))
        if angle == 0.0:
            return rotation
        wrapped = AngleValue.from_radians(angle).normalize().value
        return Rodrigues(tuple(params / angle * wrapped))
    rotation_format(rotation)
    return rotation
