"""Rotation value types.

A rotation is one of five immutable variants:

- Euler: three angles applied about roll (X), pitch (Y), yaw (Z) axes
- Quaternion: unit quaternion [i, j, k, w]
- AxisAngle: rotation axis and angle
- Rodrigues: rotation vector, direction = axis, norm = angle in radians
- RotationMatrix: 3x3 orthonormal matrix with determinant +1

Validation policy per variant:

- Quaternion: zero norm is rejected; a norm further than TOLERANCE from 1
  is renormalized at construction.
- AxisAngle: zero axis is rejected unless the angle is zero too.
- RotationMatrix: non-orthonormal or reflecting matrices are rejected.
- Euler: only the six permutations of "rpy" are accepted.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

import numpy as np

from rigidtf.errors import ValidationError
from rigidtf.units.angle import AngleValue

logger = logging.getLogger(__name__)

# Slack allowed on unit norm, orthonormality and determinant checks
TOLERANCE = 1e-6

EULER_AXES = {
    "r": np.array([1.0, 0.0, 0.0]),  # roll about X
    "p": np.array([0.0, 1.0, 0.0]),  # pitch about Y
    "y": np.array([0.0, 0.0, 1.0]),  # yaw about Z
}

DEFAULT_EULER_ORDER = "rpy"

Vec3 = Tuple[float, float, float]


class RotationFormat(str, Enum):
    """Serialized format tag of each rotation variant."""

    EULER = "euler"
    QUATERNION = "quaternion"
    AXIS_ANGLE = "axis-angle"
    RODRIGUES = "rodrigues"
    ROTATION_MATRIX = "rotation-matrix"


def _finite_vector(values: Sequence[float], length: int, name: str) -> Tuple[float, ...]:
    """Coerce a sequence to a tuple of finite floats of the given length."""
    try:
        array = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must contain real numbers, got {values!r}") from e

    if array.shape != (length,):
        raise ValidationError(f"{name} must have {length} components, got shape {array.shape}")
    if not np.all(np.isfinite(array)):
        raise ValidationError(f"{name} must be finite, got {array.tolist()}")

    return tuple(float(v) for v in array)


def validate_euler_order(order: str) -> str:
    """Check that an Euler order is a permutation of "rpy".

    Args:
        order: Axis order string, e.g. "rpy" or "ypr".

    Returns:
        The order unchanged.

    Raises:
        ValidationError: If the order has unknown or repeated axis letters
            or is not three letters long.
    """
    if not isinstance(order, str):
        raise ValidationError(f"Euler order must be a string, got {type(order).__name__}")

    unknown = [axis for axis in order if axis not in EULER_AXES]
    if unknown:
        raise ValidationError(
            f"Invalid Euler order '{order}': unknown axis code '{unknown[0]}' "
            f"(use r for roll, p for pitch, y for yaw)"
        )
    if len(order) != 3 or len(set(order)) != 3:
        raise ValidationError(
            f"Invalid Euler order '{order}': must use each of r, p, y exactly once"
        )

    return order


@dataclass(frozen=True)
class Euler:
    """Euler angles applied as successive intrinsic rotations.

    ``Euler("ypr", (a, b, c))`` rotates by ``a`` about Z, then by ``b``
    about the rotated Y axis, then by ``c`` about the twice-rotated X axis.

    Attributes:
        order: Permutation of "rpy" naming the axis of each angle.
        angles: One angle per axis letter, in order.
    """

    order: str
    angles: Tuple[AngleValue, AngleValue, AngleValue]

    FORMAT = RotationFormat.EULER

    def __post_init__(self):
        validate_euler_order(self.order)

        angles = tuple(self.angles)
        if len(angles) != 3:
            raise ValidationError(f"Euler rotation needs 3 angles, got {len(angles)}")
        for angle in angles:
            if not isinstance(angle, AngleValue):
                raise ValidationError(
                    f"Euler angles must be AngleValue instances, got {type(angle).__name__}"
                )
        object.__setattr__(self, "angles", angles)

    @classmethod
    def from_degrees(cls, order: str, angles: Sequence[float]) -> "Euler":
        """Create Euler angles from magnitudes in degrees."""
        return cls(order, tuple(AngleValue.from_degrees(a) for a in angles))

    @classmethod
    def from_radians(cls, order: str, angles: Sequence[float]) -> "Euler":
        """Create Euler angles from magnitudes in radians."""
        return cls(order, tuple(AngleValue.from_radians(a) for a in angles))


@dataclass(frozen=True)
class Quaternion:
    """Unit quaternion ``w + i*x + j*y + k*z``.

    Attributes:
        i: First vector component.
        j: Second vector component.
        k: Third vector component.
        w: Scalar component.
    """

    i: float
    j: float
    k: float
    w: float

    FORMAT = RotationFormat.QUATERNION

    def __post_init__(self):
        ijkw = np.array(_finite_vector((self.i, self.j, self.k, self.w), 4, "Quaternion"))
        norm = float(np.linalg.norm(ijkw))

        if norm == 0.0:
            raise ValidationError("Quaternion has zero norm and does not describe a rotation")

        if abs(norm - 1.0) > TOLERANCE:
            logger.debug("Renormalizing quaternion %s (norm %.9g)", ijkw.tolist(), norm)
            ijkw = ijkw / norm

        for name, value in zip("ijkw", ijkw):
            object.__setattr__(self, name, float(value))

    @classmethod
    def identity(cls) -> "Quaternion":
        """The identity rotation."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, ijkw: Sequence[float]) -> "Quaternion":
        """Create a quaternion from an [i, j, k, w] sequence."""
        i, j, k, w = _finite_vector(ijkw, 4, "Quaternion")
        return cls(i, j, k, w)

    @property
    def ijkw(self) -> Tuple[float, float, float, float]:
        """Components in serialized order."""
        return (self.i, self.j, self.k, self.w)

    @property
    def array(self) -> np.ndarray:
        """Components as a numpy array [i, j, k, w]."""
        return np.array(self.ijkw)


@dataclass(frozen=True)
class AxisAngle:
    """Rotation by an angle about an axis.

    The axis does not need to be unit length; it is normalized when the
    rotation is converted.

    Attributes:
        axis: Rotation axis [x, y, z].
        angle: Rotation angle.
    """

    axis: Vec3
    angle: AngleValue

    FORMAT = RotationFormat.AXIS_ANGLE

    def __post_init__(self):
        axis = _finite_vector(self.axis, 3, "Rotation axis")
        if not isinstance(self.angle, AngleValue):
            raise ValidationError(
                f"Axis-angle angle must be an AngleValue, got {type(self.angle).__name__}"
            )
        if np.linalg.norm(axis) == 0.0 and self.angle.value != 0.0:
            raise ValidationError(
                f"Axis-angle rotation has a zero axis with non-zero angle {self.angle}"
            )
        object.__setattr__(self, "axis", axis)

    @property
    def unit_axis(self) -> np.ndarray:
        """Normalized rotation axis; +Z for the zero axis."""
        axis = np.array(self.axis)
        norm = np.linalg.norm(axis)
        if norm == 0.0:
            return np.array([0.0, 0.0, 1.0])
        return axis / norm


@dataclass(frozen=True)
class Rodrigues:
    """Rotation vector: direction is the axis, norm is the angle in radians.

    Attributes:
        params: Rotation vector [r1, r2, r3].
    """

    params: Vec3

    FORMAT = RotationFormat.RODRIGUES

    def __post_init__(self):
        object.__setattr__(self, "params", _finite_vector(self.params, 3, "Rodrigues parameters"))

    @property
    def array(self) -> np.ndarray:
        """Parameters as a numpy array."""
        return np.array(self.params)


@dataclass(frozen=True)
class RotationMatrix:
    """3x3 rotation matrix stored row-major.

    Attributes:
        matrix: Three rows of three elements.
    """

    matrix: Tuple[Vec3, Vec3, Vec3]

    FORMAT = RotationFormat.ROTATION_MATRIX

    def __post_init__(self):
        try:
            array = np.asarray(self.matrix, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Rotation matrix must contain real numbers: {e}") from e

        if array.shape != (3, 3):
            raise ValidationError(f"Rotation matrix must be 3x3, got shape {array.shape}")
        if not np.all(np.isfinite(array)):
            raise ValidationError(f"Rotation matrix must be finite, got {array.tolist()}")

        orthogonality_error = float(np.max(np.abs(array @ array.T - np.eye(3))))
        if orthogonality_error > TOLERANCE:
            raise ValidationError(
                f"Rotation matrix is not orthonormal (max |R R^T - I| = {orthogonality_error:.3g})"
            )

        determinant = float(np.linalg.det(array))
        if abs(determinant - 1.0) > TOLERANCE:
            raise ValidationError(
                f"Rotation matrix must have determinant +1, got {determinant:.9g}"
            )

        object.__setattr__(self, "matrix", tuple(tuple(float(v) for v in row) for row in array))

    @classmethod
    def identity(cls) -> "RotationMatrix":
        """The identity rotation."""
        return cls(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)))

    @property
    def array(self) -> np.ndarray:
        """Matrix as a numpy array, shape (3, 3)."""
        return np.array(self.matrix)


Rotation = Union[Euler, Quaternion, AxisAngle, Rodrigues, RotationMatrix]

ROTATION_TYPES = (Euler, Quaternion, AxisAngle, Rodrigues, RotationMatrix)


def is_rotation(value: object) -> bool:
    """Return True if ``value`` is one of the rotation variants."""
    return isinstance(value, ROTATION_TYPES)


def rotation_format(rotation: Rotation) -> RotationFormat:
    """Format tag of a rotation variant.

    Raises:
        TypeError: If ``rotation`` is not a rotation variant.
    """
    if not is_rotation(rotation):
        raise TypeError(f"Expected a rotation, got {type(rotation).__name__}")
    return rotation.FORMAT
