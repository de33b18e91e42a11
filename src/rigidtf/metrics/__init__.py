"""Metrics for rotation and transform comparison."""

from .distance import (
    compare_transforms,
    compute_rotation_error,
    compute_translation_error,
    rotations_close,
    transforms_within_tolerance,
)

__all__ = [
    "compare_transforms",
    "compute_rotation_error",
    "compute_translation_error",
    "rotations_close",
    "transforms_within_tolerance",
]
