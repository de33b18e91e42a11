"""Rotation variants and conversions through the quaternion pivot."""

from .conversions import (
    convert_rotation,
    from_quaternion,
    inverse_rotation,
    normalize_rotation,
    rotation_into_degrees,
    rotation_into_radians,
    to_quaternion,
)
from .model import (
    DEFAULT_EULER_ORDER,
    TOLERANCE,
    AxisAngle,
    Euler,
    Quaternion,
    Rodrigues,
    Rotation,
    RotationFormat,
    RotationMatrix,
    is_rotation,
    rotation_format,
    validate_euler_order,
)

__all__ = [
    "DEFAULT_EULER_ORDER",
    "TOLERANCE",
    "AxisAngle",
    "Euler",
    "Quaternion",
    "Rodrigues",
    "Rotation",
    "RotationFormat",
    "RotationMatrix",
    "is_rotation",
    "rotation_format",
    "validate_euler_order",
    "convert_rotation",
    "from_quaternion",
    "inverse_rotation",
    "normalize_rotation",
    "rotation_into_degrees",
    "rotation_into_radians",
    "to_quaternion",
]
