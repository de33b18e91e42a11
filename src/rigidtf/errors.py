"""Exceptions raised by the rotation and transform engine."""


class RigidTfError(Exception):
    """Base class for all rigidtf errors."""

    pass


class ParseError(RigidTfError):
    """Raised when an angle token or a document shape cannot be parsed."""

    pass


class ValidationError(RigidTfError):
    """Raised when a value violates a rotation or transform invariant.

    Examples are an invalid Euler axis order, a zero-norm quaternion, a
    non-orthonormal rotation matrix or a zero axis with a non-zero angle.
    """

    pass


class UnrecognizedFormatError(RigidTfError):
    """Raised when a document is neither a rotation nor a transform."""

    pass


class CompositionError(RigidTfError):
    """Raised when a transform chain cannot be composed."""

    pass
