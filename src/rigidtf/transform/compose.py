"""Composition of rigid transform chains."""

import logging
from typing import Sequence

import numpy as np

from rigidtf.errors import CompositionError
from rigidtf.rotation.conversions import to_quaternion
from rigidtf.rotation.model import Quaternion
from rigidtf.rotation.quaternion import (
    IDENTITY_QUATERNION,
    normalize_quaternion,
    quaternion_multiply,
    rotate_vector,
)
from rigidtf.transform.model import Transform

logger = logging.getLogger(__name__)


def compose(transforms: Sequence[Transform]) -> Transform:
    """Compose transforms in the order given.

    Transforms are applied left-to-right: compose([A, B]) is
    ``(R_A R_B, t_A + R_A t_B)``, i.e. B expressed in A's frame. Missing
    translations count as zero. The result carries a translation only if at
    least one input does.

    Args:
        transforms: Non-empty sequence of transforms.

    Returns:
        Composed transform with a quaternion rotation. A single transform is
        returned unchanged.

    Raises:
        CompositionError: If the sequence is empty.
    """
    transforms = list(transforms)
    if not transforms:
        raise CompositionError("Nothing to compose: at least one transform is required")

    for index, transform in enumerate(transforms):
        if not isinstance(transform, Transform):
            raise CompositionError(
                f"Item {index} is a {type(transform).__name__}, expected a Transform"
            )

    if len(transforms) == 1:
        return transforms[0]

    quaternion = IDENTITY_QUATERNION.copy()
    translation = np.zeros(3)
    has_translation = False

    for transform in transforms:
        # Rotate the next translation into the frame built so far
        translation = translation + rotate_vector(quaternion, transform.translation_array)
        quaternion = normalize_quaternion(
            quaternion_multiply(quaternion, to_quaternion(transform.rotation).array)
        )
        has_translation = has_translation or transform.has_translation

    logger.debug(
        "Composed %d transforms (translation %s)",
        len(transforms),
        "kept" if has_translation else "absent",
    )

    return Transform(
        Quaternion.from_array(quaternion),
        tuple(translation) if has_translation else None,
    )
