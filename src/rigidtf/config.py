"""Output configuration for conversion and composition."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import yaml

from rigidtf.convert import RotationOrTransform, into_degrees, into_radians, to_format
from rigidtf.errors import ValidationError
from rigidtf.rotation.model import (
    DEFAULT_EULER_ORDER,
    RotationFormat,
    validate_euler_order,
)
from rigidtf.transform.model import Transform


class AngleFormat(str, Enum):
    """Unit for angles in output documents."""

    DEG = "deg"
    RAD = "rad"


class KeepTranslation(str, Enum):
    """What to do with the translation of an output document."""

    AUTO = "auto"  # leave the document shape as is
    ALWAYS = "always"  # add a zero translation if missing
    DISCARD = "discard"  # drop it


# Short names accepted for rotation formats on the command line
ROTATION_FORMAT_ALIASES = {
    "quat": RotationFormat.QUATERNION,
    "euler": RotationFormat.EULER,
    "mat": RotationFormat.ROTATION_MATRIX,
    "axis-angle": RotationFormat.AXIS_ANGLE,
    "rodrigues": RotationFormat.RODRIGUES,
}


def parse_rotation_format(name: Union[str, RotationFormat]) -> RotationFormat:
    """Resolve a rotation format from its short or full name.

    Raises:
        ValidationError: If the name is not a known format.
    """
    if isinstance(name, RotationFormat):
        return name
    if name in ROTATION_FORMAT_ALIASES:
        return ROTATION_FORMAT_ALIASES[name]
    try:
        return RotationFormat(name)
    except ValueError:
        known = ", ".join(ROTATION_FORMAT_ALIASES)
        raise ValidationError(f"Unknown rotation format {name!r} (expected one of: {known})") from None


def _parse_enum(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        known = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Invalid {field_name} {value!r} (expected one of: {known})") from None


@dataclass
class ConversionConfig:
    """How to shape an output document.

    Attributes:
        rotation_format: Target rotation format; None keeps the input format.
        angle_format: Unit for output angles.
        keep_translation: Translation policy for the output.
        euler_order: Axis order used when converting to Euler angles.
        pretty: Indent JSON output.
    """

    rotation_format: Optional[RotationFormat] = None
    angle_format: AngleFormat = AngleFormat.DEG
    keep_translation: KeepTranslation = KeepTranslation.AUTO
    euler_order: str = DEFAULT_EULER_ORDER
    pretty: bool = True

    def __post_init__(self):
        """Coerce string options to their enum types and validate them."""
        if self.rotation_format is not None:
            self.rotation_format = parse_rotation_format(self.rotation_format)
        self.angle_format = _parse_enum(AngleFormat, self.angle_format, "angle_format")
        self.keep_translation = _parse_enum(KeepTranslation, self.keep_translation, "keep_translation")
        validate_euler_order(self.euler_order)
        if not isinstance(self.pretty, bool):
            raise ValidationError(f"Invalid pretty {self.pretty!r} (expected true or false)")

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ConversionConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConversionConfig instance.
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict) -> "ConversionConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary; missing keys keep their defaults.

        Returns:
            ConversionConfig instance.

        Raises:
            ValidationError: If a key is unknown or a value is invalid.
        """
        if not isinstance(data, dict):
            raise ValidationError(f"Configuration must be a mapping, got {type(data).__name__}")

        known = {"rotation_format", "angle_format", "keep_translation", "euler_order", "pretty"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(f"Unknown configuration keys: {', '.join(unknown)}")

        return cls(**data)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary.

        Returns:
            Configuration as dictionary.
        """
        return {
            "rotation_format": self.rotation_format.value if self.rotation_format else None,
            "angle_format": self.angle_format.value,
            "keep_translation": self.keep_translation.value,
            "euler_order": self.euler_order,
            "pretty": self.pretty,
        }

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file.

        Args:
            path: Output path for YAML file.
        """
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    def apply(self, value: RotationOrTransform) -> RotationOrTransform:
        """Shape a rotation or transform for output.

        Converts the rotation format, then the angle unit, then applies the
        translation policy. With KeepTranslation.ALWAYS a bare rotation
        becomes a Transform with zero translation; with DISCARD a Transform
        becomes a bare rotation.

        Args:
            value: Rotation or Transform.

        Returns:
            Converted rotation or Transform.
        """
        if self.rotation_format is not None:
            value = to_format(value, self.rotation_format, order=self.euler_order)

        if self.angle_format is AngleFormat.DEG:
            value = into_degrees(value)
        else:
            value = into_radians(value)

        return apply_translation_policy(value, self.keep_translation)


def apply_translation_policy(value: RotationOrTransform, keep: KeepTranslation) -> RotationOrTransform:
    """Keep, add or drop the translation of an output value.

    Args:
        value: Rotation or Transform.
        keep: Translation policy.

    Returns:
        AUTO returns the value unchanged. ALWAYS returns a Transform with an
        explicit (possibly zero) translation. DISCARD returns the bare
        rotation.
    """
    keep = KeepTranslation(keep)
    if keep is KeepTranslation.AUTO:
        return value

    transform = value if isinstance(value, Transform) else Transform(value)

    if keep is KeepTranslation.ALWAYS:
        translation = transform.translation or (0.0, 0.0, 0.0)
        return Transform(transform.rotation, translation)

    return transform.rotation
