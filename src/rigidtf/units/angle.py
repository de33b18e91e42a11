"""Unit-tagged angle values and the angle token grammar.

Angles are written as a real number followed by a unit suffix:

    "90d", "90deg"      degrees
    "1.57r", "1.57rad"  radians

Suffixes are case-sensitive and there is no default unit.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum

from rigidtf.errors import ParseError, ValidationError


class AngleUnit(str, Enum):
    """Unit of an angle magnitude."""

    DEGREE = "degree"
    RADIAN = "radian"


# Longest suffix first so that "deg" is not read as "de" + "g".
_SUFFIXES = (
    ("deg", AngleUnit.DEGREE),
    ("rad", AngleUnit.RADIAN),
    ("d", AngleUnit.DEGREE),
    ("r", AngleUnit.RADIAN),
)

_FORMAT_SUFFIX = {
    AngleUnit.DEGREE: "d",
    AngleUnit.RADIAN: "r",
}

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


@dataclass(frozen=True)
class AngleValue:
    """A real angle magnitude paired with its unit.

    Attributes:
        value: Angle magnitude, finite.
        unit: Unit the magnitude is expressed in.
    """

    value: float
    unit: AngleUnit

    def __post_init__(self):
        """Store the magnitude as a plain float and reject non-finite values."""
        try:
            value = float(self.value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Angle magnitude must be a real number, got {self.value!r}") from e
        if not math.isfinite(value):
            raise ValidationError(f"Angle magnitude must be finite, got {value}")
        try:
            unit = AngleUnit(self.unit)
        except ValueError as e:
            raise ValidationError(f"Unknown angle unit {self.unit!r}") from e
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "unit", unit)

    @classmethod
    def from_degrees(cls, value: float) -> "AngleValue":
        """Create an angle in degrees."""
        return cls(value, AngleUnit.DEGREE)

    @classmethod
    def from_radians(cls, value: float) -> "AngleValue":
        """Create an angle in radians."""
        return cls(value, AngleUnit.RADIAN)

    @classmethod
    def zero(cls) -> "AngleValue":
        """Zero angle (in radians)."""
        return cls(0.0, AngleUnit.RADIAN)

    @property
    def as_radians(self) -> float:
        """Magnitude converted to radians."""
        if self.unit is AngleUnit.RADIAN:
            return self.value
        return math.radians(self.value)

    @property
    def as_degrees(self) -> float:
        """Magnitude converted to degrees."""
        if self.unit is AngleUnit.DEGREE:
            return self.value
        return math.degrees(self.value)

    def to_degrees(self) -> "AngleValue":
        """Return the same angle expressed in degrees."""
        return to_degrees(self)

    def to_radians(self) -> "AngleValue":
        """Return the same angle expressed in radians."""
        return to_radians(self)

    def normalize(self) -> "AngleValue":
        """Wrap the magnitude into one full turn, keeping the unit.

        Returns:
            Angle in [0, 360) degrees or [0, 2*pi) radians.
        """
        period = 360.0 if self.unit is AngleUnit.DEGREE else 2.0 * math.pi
        wrapped = self.value % period
        # x % period can round up to period itself for tiny negative x
        if wrapped >= period:
            wrapped = 0.0
        return AngleValue(wrapped, self.unit)

    def isclose(self, other: "AngleValue", atol: float = 1e-9) -> bool:
        """Compare two angles in radians regardless of their units."""
        return abs(self.as_radians - other.as_radians) <= atol

    def __str__(self) -> str:
        return format_angle(self)


def parse_angle(token: str) -> AngleValue:
    """Parse an angle token such as ``"90d"`` or ``"-1.2rad"``.

    Args:
        token: Number followed by one of the suffixes d, deg, r, rad.

    Returns:
        Parsed AngleValue.

    Raises:
        ParseError: If the token is not a string, has no known suffix, or
            its numeric part is not a finite real literal.
    """
    if not isinstance(token, str):
        raise ParseError(
            f"Angle must be a string with a unit suffix, got {type(token).__name__} {token!r}"
        )

    for suffix, unit in _SUFFIXES:
        if token.endswith(suffix):
            number = token[: -len(suffix)]
            break
    else:
        raise ParseError(
            f"Unable to parse angle value '{token}': expected suffix d, deg, r or rad"
        )

    if not _NUMBER_RE.match(number):
        raise ParseError(f"Unable to parse angle value '{token}': invalid number '{number}'")

    value = float(number)
    if not math.isfinite(value):
        raise ParseError(f"Invalid angle value '{token}': magnitude is not finite")

    return AngleValue(value, unit)


def format_angle(angle: AngleValue) -> str:
    """Render an angle as a token that parse_angle reads back exactly.

    Args:
        angle: Angle to format.

    Returns:
        Shortest round-trip representation of the magnitude followed by
        "d" for degrees or "r" for radians.
    """
    return f"{float(angle.value)!r}{_FORMAT_SUFFIX[angle.unit]}"


def to_degrees(angle: AngleValue) -> AngleValue:
    """Convert an angle to degrees."""
    return AngleValue(angle.as_degrees, AngleUnit.DEGREE)


def to_radians(angle: AngleValue) -> AngleValue:
    """Convert an angle to radians."""
    return AngleValue(angle.as_radians, AngleUnit.RADIAN)
