"""Document detection, serialization and file I/O."""

from .detect import DocumentKind, detect
from .files import FileFormat, dump, dumps, guess_format, load, loads
from .mapping import (
    parse_document,
    parse_rotation,
    parse_transform,
    serialize,
)

__all__ = [
    "DocumentKind",
    "detect",
    "FileFormat",
    "dump",
    "dumps",
    "guess_format",
    "load",
    "loads",
    "parse_document",
    "parse_rotation",
    "parse_transform",
    "serialize",
]
