"""Format and unit conversions for rotations and transforms.

Each function accepts either a rotation variant or a Transform and returns
the same kind. For a Transform only the rotation changes; the translation
(or its absence) is passed through untouched.
"""

from typing import Callable, Union

from rigidtf.rotation.conversions import (
    convert_rotation,
    inverse_rotation,
    normalize_rotation,
    rotation_into_degrees,
    rotation_into_radians,
)
from rigidtf.rotation.model import (
    DEFAULT_EULER_ORDER,
    Rotation,
    RotationFormat,
    is_rotation,
)
from rigidtf.transform.model import Transform

RotationOrTransform = Union[Rotation, Transform]


def _map_rotation(
    value: RotationOrTransform,
    func: Callable[[Rotation], Rotation],
) -> RotationOrTransform:
    if isinstance(value, Transform):
        return value.map_rotation(func)
    if is_rotation(value):
        return func(value)
    raise TypeError(f"Expected a rotation or Transform, got {type(value).__name__}")


def to_format(
    value: RotationOrTransform,
    target: Union[RotationFormat, str],
    order: str = DEFAULT_EULER_ORDER,
) -> RotationOrTransform:
    """Convert to the given rotation format.

    Args:
        value: Rotation or Transform.
        target: Rotation format tag.
        order: Axis order used when the target is Euler.

    Returns:
        Value of the same kind with its rotation in the target format.
    """
    return _map_rotation(value, lambda r: convert_rotation(r, target, order=order))


def to_quaternion_form(value: RotationOrTransform) -> RotationOrTransform:
    """Convert the rotation to a quaternion."""
    return to_format(value, RotationFormat.QUATERNION)


def to_euler_form(value: RotationOrTransform, order: str = DEFAULT_EULER_ORDER) -> RotationOrTransform:
    """Convert the rotation to Euler angles in the given axis order."""
    return to_format(value, RotationFormat.EULER, order=order)


def to_axis_angle_form(value: RotationOrTransform) -> RotationOrTransform:
    """Convert the rotation to axis-angle."""
    return to_format(value, RotationFormat.AXIS_ANGLE)


def to_rodrigues_form(value: RotationOrTransform) -> RotationOrTransform:
    """Convert the rotation to a Rodrigues vector."""
    return to_format(value, RotationFormat.RODRIGUES)


def to_rotation_matrix_form(value: RotationOrTransform) -> RotationOrTransform:
    """Convert the rotation to a 3x3 matrix."""
    return to_format(value, RotationFormat.ROTATION_MATRIX)


def into_degrees(value: RotationOrTransform) -> RotationOrTransform:
    """Express all angles in degrees."""
    return _map_rotation(value, rotation_into_degrees)


def into_radians(value: RotationOrTransform) -> RotationOrTransform:
    """Express all angles in radians."""
    return _map_rotation(value, rotation_into_radians)


def normalize(value: RotationOrTransform) -> RotationOrTransform:
    """Wrap all angles into a single turn."""
    return _map_rotation(value, normalize_rotation)


def inverse(value: RotationOrTransform) -> RotationOrTransform:
    """Inverse rotation or transform, keeping the rotation format."""
    if isinstance(value, Transform):
        return value.inverse()
    return _map_rotation(value, inverse_rotation)
