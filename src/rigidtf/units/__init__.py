"""Angle units and the angle token grammar."""

from .angle import (
    AngleUnit,
    AngleValue,
    format_angle,
    parse_angle,
    to_degrees,
    to_radians,
)

__all__ = [
    "AngleUnit",
    "AngleValue",
    "format_angle",
    "parse_angle",
    "to_degrees",
    "to_radians",
]
