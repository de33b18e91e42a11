"""Distance metrics between rotations and transforms."""

from typing import Dict, Union

import numpy as np
from scipy.spatial.transform import Rotation as ScipyRotation

from rigidtf.rotation.conversions import to_quaternion
from rigidtf.rotation.model import Rotation
from rigidtf.transform.model import Transform


def _as_rotation(value: Union[Rotation, Transform]) -> Rotation:
    if isinstance(value, Transform):
        return value.rotation
    return value


def _as_scipy(value: Union[Rotation, Transform]) -> ScipyRotation:
    # scipy uses the same scalar-last [x, y, z, w] layout as ijkw
    return ScipyRotation.from_quat(to_quaternion(_as_rotation(value)).array)


def compute_translation_error(a: Transform, b: Transform) -> float:
    """Compute translation error (Euclidean distance) between two transforms.

    Missing translations count as zero.

    Args:
        a: First transform.
        b: Second transform.

    Returns:
        Distance between the translations.
    """
    return float(np.linalg.norm(a.translation_array - b.translation_array))


def compute_rotation_error(a: Union[Rotation, Transform], b: Union[Rotation, Transform]) -> float:
    """Compute rotation error (geodesic distance) between two rotations.

    The geodesic distance on SO(3) is the angle of the relative rotation.
    Any rotation variant can be compared with any other.

    Args:
        a: First rotation, or a transform whose rotation is used.
        b: Second rotation, or a transform whose rotation is used.

    Returns:
        Rotation error in degrees.
    """
    relative = _as_scipy(a).inv() * _as_scipy(b)

    # magnitude() returns the rotation angle in radians
    return float(np.degrees(relative.magnitude()))


def rotations_close(a: Union[Rotation, Transform], b: Union[Rotation, Transform], atol: float = 1e-6) -> bool:
    """Check whether two rotations are the same up to ``atol``.

    Compares unit quaternions component-wise, treating q and -q as equal.
    """
    qa = to_quaternion(_as_rotation(a)).array
    qb = to_quaternion(_as_rotation(b)).array
    return bool(np.allclose(qa, qb, atol=atol) or np.allclose(qa, -qb, atol=atol))


def compare_transforms(a: Transform, b: Transform) -> Dict[str, float]:
    """Compare two transforms and return error metrics.

    Args:
        a: First transform (e.g., computed).
        b: Second transform (e.g., reference).

    Returns:
        Dictionary with:
        - translation_error: Euclidean distance between translations
        - rotation_error_deg: Geodesic distance in degrees
    """
    return {
        "translation_error": compute_translation_error(a, b),
        "rotation_error_deg": compute_rotation_error(a, b),
    }


def transforms_within_tolerance(
    a: Transform,
    b: Transform,
    translation_tol: float = 1e-6,
    rotation_tol_deg: float = 1e-6,
) -> bool:
    """Check if two transforms are within specified tolerances.

    Args:
        a: First transform.
        b: Second transform.
        translation_tol: Maximum allowed translation error.
        rotation_tol_deg: Maximum allowed rotation error in degrees.

    Returns:
        True if both errors are within tolerance.
    """
    comparison = compare_transforms(a, b)

    return (
        comparison["translation_error"] <= translation_tol
        and comparison["rotation_error_deg"] <= rotation_tol_deg
    )
