"""Map rotations and transforms to and from tagged structured data.

Rotations are maps with a ``format`` discriminator::

    {"format": "euler", "order": "rpy", "angles": ["10d", "-5d", "3d"]}
    {"format": "quaternion", "ijkw": [0.0, 0.0, 0.0, 1.0]}
    {"format": "axis-angle", "axis": [0.6, -0.8, 0.0], "angle": "45d"}
    {"format": "rodrigues", "params": [0.0, 0.0, 1.5707963267948966]}
    {"format": "rotation-matrix", "matrix": [[...], [...], [...]]}

Transforms wrap a rotation under ``r`` with an optional translation ``t``::

    {"r": {"format": "quaternion", ...}, "t": [1.0, -2.0, 0.3]}
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any, Union

from rigidtf.errors import ParseError, UnrecognizedFormatError
from rigidtf.io.detect import (
    FORMAT_KEY,
    ROTATION_KEY,
    TRANSLATION_KEY,
    DocumentKind,
    detect,
)
from rigidtf.rotation.model import (
    AxisAngle,
    Euler,
    Quaternion,
    Rodrigues,
    Rotation,
    RotationFormat,
    RotationMatrix,
)
from rigidtf.transform.model import Transform
from rigidtf.units.angle import format_angle, parse_angle


def _require_mapping(data: Any, what: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise ParseError(f"Expected a mapping for {what}, got {type(data).__name__}")
    return data


def _require_field(data: Mapping, key: str, what: str) -> Any:
    if key not in data:
        raise ParseError(f"Missing '{key}' field in {what}")
    return data[key]


def _parse_number(value: Any, what: str) -> float:
    # bool is a Real subclass but never a valid coordinate
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ParseError(f"Expected a number for {what}, got {type(value).__name__} {value!r}")
    return float(value)


def _parse_numbers(value: Any, length: int, what: str) -> tuple:
    if isinstance(value, (str, bytes, Mapping)) or not hasattr(value, "__len__"):
        raise ParseError(f"Expected a list of {length} numbers for {what}, got {value!r}")
    if len(value) != length:
        raise ParseError(f"Expected {length} numbers for {what}, got {len(value)}")
    return tuple(_parse_number(v, what) for v in value)


def _numbers_to_list(values) -> list:
    return [float(v) for v in values]


# --- Per-variant mapping ---

def _serialize_euler(rotation: Euler) -> dict[str, Any]:
    return {
        FORMAT_KEY: RotationFormat.EULER.value,
        "order": rotation.order,
        "angles": [format_angle(angle) for angle in rotation.angles],
    }


def _deserialize_euler(data: Mapping) -> Euler:
    order = _require_field(data, "order", "euler rotation")
    if not isinstance(order, str):
        raise ParseError(f"Euler 'order' must be a string, got {order!r}")

    angles = _require_field(data, "angles", "euler rotation")
    if isinstance(angles, (str, bytes, Mapping)) or not hasattr(angles, "__len__"):
        raise ParseError(f"Euler 'angles' must be a list of angle tokens, got {angles!r}")
    if len(angles) != 3:
        raise ParseError(f"Expected 3 angle tokens for euler 'angles', got {len(angles)}")

    return Euler(order, tuple(parse_angle(token) for token in angles))


def _serialize_quaternion(rotation: Quaternion) -> dict[str, Any]:
    return {
        FORMAT_KEY: RotationFormat.QUATERNION.value,
        "ijkw": _numbers_to_list(rotation.ijkw),
    }


def _deserialize_quaternion(data: Mapping) -> Quaternion:
    ijkw = _parse_numbers(_require_field(data, "ijkw", "quaternion"), 4, "quaternion 'ijkw'")
    return Quaternion(*ijkw)


def _serialize_axis_angle(rotation: AxisAngle) -> dict[str, Any]:
    return {
        FORMAT_KEY: RotationFormat.AXIS_ANGLE.value,
        "axis": _numbers_to_list(rotation.axis),
        "angle": format_angle(rotation.angle),
    }


def _deserialize_axis_angle(data: Mapping) -> AxisAngle:
    axis = _parse_numbers(_require_field(data, "axis", "axis-angle rotation"), 3, "axis-angle 'axis'")
    angle = parse_angle(_require_field(data, "angle", "axis-angle rotation"))
    return AxisAngle(axis, angle)


def _serialize_rodrigues(rotation: Rodrigues) -> dict[str, Any]:
    return {
        FORMAT_KEY: RotationFormat.RODRIGUES.value,
        "params": _numbers_to_list(rotation.params),
    }


def _deserialize_rodrigues(data: Mapping) -> Rodrigues:
    params = _parse_numbers(_require_field(data, "params", "rodrigues rotation"), 3, "rodrigues 'params'")
    return Rodrigues(params)


def _serialize_rotation_matrix(rotation: RotationMatrix) -> dict[str, Any]:
    return {
        FORMAT_KEY: RotationFormat.ROTATION_MATRIX.value,
        "matrix": [_numbers_to_list(row) for row in rotation.matrix],
    }


def _deserialize_rotation_matrix(data: Mapping) -> RotationMatrix:
    rows = _require_field(data, "matrix", "rotation matrix")
    if isinstance(rows, (str, bytes, Mapping)) or not hasattr(rows, "__len__") or len(rows) != 3:
        raise ParseError(f"Rotation 'matrix' must be a list of 3 rows, got {rows!r}")
    return RotationMatrix(tuple(_parse_numbers(row, 3, "rotation matrix row") for row in rows))


_SERIALIZERS = {
    Euler: _serialize_euler,
    Quaternion: _serialize_quaternion,
    AxisAngle: _serialize_axis_angle,
    Rodrigues: _serialize_rodrigues,
    RotationMatrix: _serialize_rotation_matrix,
}

_DESERIALIZERS = {
    RotationFormat.EULER: _deserialize_euler,
    RotationFormat.QUATERNION: _deserialize_quaternion,
    RotationFormat.AXIS_ANGLE: _deserialize_axis_angle,
    RotationFormat.RODRIGUES: _deserialize_rodrigues,
    RotationFormat.ROTATION_MATRIX: _deserialize_rotation_matrix,
}


# --- Public API ---

def serialize_rotation(rotation: Rotation) -> dict[str, Any]:
    """Serialize a rotation variant to a tagged dict."""
    serializer = _SERIALIZERS.get(type(rotation))
    if serializer is None:
        raise TypeError(f"Expected a rotation, got {type(rotation).__name__}")
    return serializer(rotation)


def serialize_transform(transform: Transform) -> dict[str, Any]:
    """Serialize a transform; ``t`` is omitted when there is no translation."""
    result = {ROTATION_KEY: serialize_rotation(transform.rotation)}
    if transform.translation is not None:
        result[TRANSLATION_KEY] = _numbers_to_list(transform.translation)
    return result


def serialize(value: Union[Rotation, Transform]) -> dict[str, Any]:
    """Serialize a rotation or transform to structured data.

    Args:
        value: Rotation variant or Transform.

    Returns:
        Dict of plain Python lists, strings and floats, ready for a JSON or
        YAML writer. Angles are written as tokens such as "90.0d".
    """
    if isinstance(value, Transform):
        return serialize_transform(value)
    return serialize_rotation(value)


def parse_rotation(data: Any) -> Rotation:
    """Parse a tagged rotation document.

    Args:
        data: Mapping with a "format" discriminator and its fields.

    Returns:
        Rotation variant named by the "format" tag.

    Raises:
        ParseError: If the tag is unknown or a field is missing or malformed.
        ValidationError: If the values violate the variant's invariants.
    """
    data = _require_mapping(data, "rotation")
    tag = _require_field(data, FORMAT_KEY, "rotation")

    try:
        rotation_format = RotationFormat(tag)
    except ValueError:
        known = ", ".join(f.value for f in RotationFormat)
        raise ParseError(f"Unknown rotation format {tag!r} (expected one of: {known})") from None

    return _DESERIALIZERS[rotation_format](data)


def parse_transform(data: Any) -> Transform:
    """Parse a transform document.

    Args:
        data: Mapping with a rotation under "r" and an optional "t".

    Returns:
        Transform; its translation is None when "t" is absent.
    """
    data = _require_mapping(data, "transform")
    rotation = parse_rotation(_require_field(data, ROTATION_KEY, "transform"))

    translation = None
    if TRANSLATION_KEY in data and data[TRANSLATION_KEY] is not None:
        translation = _parse_numbers(data[TRANSLATION_KEY], 3, "translation 't'")

    return Transform(rotation, translation)


def parse_document(data: Any) -> Union[Rotation, Transform]:
    """Detect the document kind and parse it.

    Returns:
        A rotation variant for a bare rotation document, or a Transform.

    Raises:
        UnrecognizedFormatError: If the document shape is not recognized.
    """
    kind = detect(data)
    if kind is DocumentKind.TRANSFORM:
        return parse_transform(data)
    if kind is DocumentKind.ROTATION:
        return parse_rotation(data)
    raise UnrecognizedFormatError(f"Unsupported document kind: {kind}")
