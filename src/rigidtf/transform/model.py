"""Rigid transform: a rotation with an optional translation."""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from rigidtf.errors import ValidationError
from rigidtf.rotation.conversions import inverse_rotation, to_quaternion
from rigidtf.rotation.model import Quaternion, Rotation, RotationMatrix, is_rotation
from rigidtf.rotation.quaternion import (
    matrix_to_pose,
    pose_to_matrix,
    quaternion_conjugate,
    rotate_vector,
)


@dataclass(frozen=True)
class Transform:
    """Rotation followed by an optional translation.

    A transform without translation is a pure rotation. This is kept
    distinct from a zero translation so that documents round-trip with the
    same shape.

    Attributes:
        rotation: Rotation in any format.
        translation: [x, y, z] translation, or None for rotation only.
    """

    rotation: Rotation
    translation: Optional[Tuple[float, float, float]] = None

    def __post_init__(self):
        if not is_rotation(self.rotation):
            raise ValidationError(
                f"Transform rotation must be a rotation variant, got {type(self.rotation).__name__}"
            )

        if self.translation is not None:
            try:
                translation = np.asarray(self.translation, dtype=np.float64)
            except (TypeError, ValueError) as e:
                raise ValidationError(f"Translation must contain real numbers: {e}") from e
            if translation.shape != (3,):
                raise ValidationError(
                    f"Translation must have 3 components, got shape {translation.shape}"
                )
            if not np.all(np.isfinite(translation)):
                raise ValidationError(f"Translation must be finite, got {translation.tolist()}")
            object.__setattr__(self, "translation", tuple(float(v) for v in translation))

    @classmethod
    def identity(cls, with_translation: bool = False) -> "Transform":
        """Identity transform, with a zero translation if requested."""
        translation = (0.0, 0.0, 0.0) if with_translation else None
        return cls(Quaternion.identity(), translation)

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "Transform":
        """Create a transform from a 4x4 homogeneous matrix.

        Args:
            matrix: 4x4 homogeneous transformation matrix.

        Returns:
            Transform with a quaternion rotation and explicit translation.

        Raises:
            ValidationError: If the matrix is not 4x4 or its upper-left block
                is not a rotation.
        """
        matrix = np.asarray(matrix, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValidationError(f"Homogeneous matrix must be 4x4, got shape {matrix.shape}")

        # Validates the rotation block
        RotationMatrix(matrix[:3, :3])

        quaternion, translation = matrix_to_pose(matrix)
        return cls(Quaternion.from_array(quaternion), tuple(translation))

    @property
    def has_translation(self) -> bool:
        """True if the transform carries an explicit translation."""
        return self.translation is not None

    @property
    def translation_array(self) -> np.ndarray:
        """Translation as a numpy array; zeros when absent."""
        if self.translation is None:
            return np.zeros(3)
        return np.array(self.translation)

    def to_matrix(self) -> np.ndarray:
        """Convert to a 4x4 homogeneous transformation matrix."""
        return pose_to_matrix(to_quaternion(self.rotation).array, self.translation_array)

    def with_rotation(self, rotation: Rotation) -> "Transform":
        """Copy of this transform with the rotation replaced."""
        return Transform(rotation, self.translation)

    def map_rotation(self, func: Callable[[Rotation], Rotation]) -> "Transform":
        """Apply a rotation conversion, passing the translation through."""
        return self.with_rotation(func(self.rotation))

    def inverse(self) -> "Transform":
        """Inverse transform (R^-1, -R^-1 t).

        The rotation keeps its variant. A transform without translation
        inverts to one without translation.
        """
        rotation = inverse_rotation(self.rotation)
        if self.translation is None:
            return Transform(rotation)

        inverse_quaternion = quaternion_conjugate(to_quaternion(self.rotation).array)
        translation = -rotate_vector(inverse_quaternion, self.translation_array)
        return Transform(rotation, tuple(translation))

    def apply(self, point: Sequence[float]) -> np.ndarray:
        """Transform a 3D point: R p + t."""
        return rotate_vector(to_quaternion(self.rotation).array, point) + self.translation_array
