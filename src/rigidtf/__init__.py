"""Conversion between 3D rotation formats and rigid transform composition."""

__version__ = "0.1.0"

from rigidtf.convert import (
    into_degrees,
    into_radians,
    inverse,
    normalize,
    to_axis_angle_form,
    to_euler_form,
    to_format,
    to_quaternion_form,
    to_rodrigues_form,
    to_rotation_matrix_form,
)
from rigidtf.errors import (
    CompositionError,
    ParseError,
    RigidTfError,
    UnrecognizedFormatError,
    ValidationError,
)
from rigidtf.io import (
    DocumentKind,
    FileFormat,
    detect,
    dump,
    dumps,
    load,
    loads,
    parse_document,
    parse_rotation,
    parse_transform,
    serialize,
)
from rigidtf.rotation import (
    AxisAngle,
    Euler,
    Quaternion,
    Rodrigues,
    Rotation,
    RotationFormat,
    RotationMatrix,
    from_quaternion,
    to_quaternion,
)
from rigidtf.transform import Transform, compose
from rigidtf.units import AngleUnit, AngleValue, format_angle, parse_angle

__all__ = [
    # Angles
    "AngleUnit",
    "AngleValue",
    "format_angle",
    "parse_angle",
    # Rotations
    "AxisAngle",
    "Euler",
    "Quaternion",
    "Rodrigues",
    "Rotation",
    "RotationFormat",
    "RotationMatrix",
    "from_quaternion",
    "to_quaternion",
    # Transforms
    "Transform",
    "compose",
    # Conversions
    "into_degrees",
    "into_radians",
    "inverse",
    "normalize",
    "to_axis_angle_form",
    "to_euler_form",
    "to_format",
    "to_quaternion_form",
    "to_rodrigues_form",
    "to_rotation_matrix_form",
    # Documents
    "DocumentKind",
    "FileFormat",
    "detect",
    "dump",
    "dumps",
    "load",
    "loads",
    "parse_document",
    "parse_rotation",
    "parse_transform",
    "serialize",
    # Errors
    "CompositionError",
    "ParseError",
    "RigidTfError",
    "UnrecognizedFormatError",
    "ValidationError",
]
