"""Classify untyped documents as a bare rotation or a transform."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from rigidtf.errors import UnrecognizedFormatError

ROTATION_KEY = "r"
TRANSLATION_KEY = "t"
FORMAT_KEY = "format"


class DocumentKind(str, Enum):
    """Top-level shape of a serialized document."""

    ROTATION = "rotation"
    TRANSFORM = "transform"


def detect(data: Any) -> DocumentKind:
    """Decide whether a document is a rotation or a transform.

    Only the top-level keys are inspected; field values are validated later
    when the document is parsed.

    Args:
        data: Structured data as returned by a JSON or YAML reader.

    Returns:
        DocumentKind.TRANSFORM if the document has an "r" key,
        DocumentKind.ROTATION if it has a "format" key.

    Raises:
        UnrecognizedFormatError: If neither key is present or the document
            is not a mapping.
    """
    if not isinstance(data, Mapping):
        raise UnrecognizedFormatError(
            f"Expected a mapping at the top level, got {type(data).__name__}"
        )

    if ROTATION_KEY in data:
        return DocumentKind.TRANSFORM
    if FORMAT_KEY in data:
        return DocumentKind.ROTATION

    keys = ", ".join(repr(k) for k in data) or "none"
    raise UnrecognizedFormatError(
        f"Document is neither a rotation (needs '{FORMAT_KEY}') nor a transform "
        f"(needs '{ROTATION_KEY}'); found keys: {keys}"
    )
