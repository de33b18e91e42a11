"""Read and write rotation/transform documents as JSON, JSON5 or YAML."""

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

import json5
import yaml

from rigidtf.errors import ParseError
from rigidtf.io.mapping import parse_document, serialize

logger = logging.getLogger(__name__)

STDIO = "-"


class FileFormat(str, Enum):
    """Text formats supported for documents."""

    JSON = "json"
    JSON5 = "json5"
    YAML = "yaml"


_EXTENSIONS = {
    ".json": FileFormat.JSON,
    ".json5": FileFormat.JSON5,
    ".yaml": FileFormat.YAML,
    ".yml": FileFormat.YAML,
}


def guess_format(path: Union[str, Path]) -> Optional[FileFormat]:
    """Guess the document format from a file extension.

    Args:
        path: File path, or "-" for stdin/stdout.

    Returns:
        FileFormat, or None for "-" and unknown extensions.
    """
    if str(path) == STDIO:
        return None
    return _EXTENSIONS.get(Path(path).suffix.lower())


def _resolve_format(path: Union[str, Path], fmt: Optional[Union[FileFormat, str]]) -> FileFormat:
    if fmt is not None:
        return FileFormat(fmt)

    guessed = guess_format(path)
    if guessed is None:
        raise ParseError(
            f"Unable to determine the file format for '{path}'; "
            f"specify one of: {', '.join(f.value for f in FileFormat)}"
        )
    logger.debug("Guessed %s format for %s", guessed.value, path)
    return guessed


def load_data(text: str, fmt: Union[FileFormat, str]) -> Any:
    """Parse JSON, JSON5 or YAML text into structured data.

    Raises:
        ParseError: If the text is not valid in the given format.
    """
    fmt = FileFormat(fmt)
    try:
        if fmt is FileFormat.JSON:
            return json.loads(text)
        if fmt is FileFormat.JSON5:
            return json5.loads(text)
        return yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as e:
        # json.JSONDecodeError and json5 syntax errors are both ValueErrors
        raise ParseError(f"Invalid {fmt.value.upper()} document: {e}") from e


def dump_data(data: Any, fmt: Union[FileFormat, str], pretty: bool = True) -> str:
    """Render structured data as JSON, JSON5 or YAML text."""
    fmt = FileFormat(fmt)
    if fmt is FileFormat.JSON:
        if pretty:
            return json.dumps(data, indent=2) + "\n"
        return json.dumps(data)
    if fmt is FileFormat.JSON5:
        if pretty:
            return json5.dumps(data, indent=2) + "\n"
        return json5.dumps(data)
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def loads(text: str, fmt: Union[FileFormat, str]):
    """Parse a rotation or transform document from text.

    Args:
        text: JSON, JSON5 or YAML text.
        fmt: Format of the text.

    Returns:
        Rotation variant or Transform.
    """
    return parse_document(load_data(text, fmt))


def dumps(value, fmt: Union[FileFormat, str], pretty: bool = True) -> str:
    """Serialize a rotation or transform to JSON, JSON5 or YAML text."""
    return dump_data(serialize(value), fmt, pretty=pretty)


def load(path: Union[str, Path], fmt: Optional[Union[FileFormat, str]] = None):
    """Load a rotation or transform document from a file.

    Args:
        path: Path to the document, or "-" for stdin.
        fmt: Format of the file; guessed from the extension if None.

    Returns:
        Rotation variant or Transform.

    Raises:
        ParseError: If the format cannot be determined or the file is invalid.
        OSError: If the file cannot be read.
    """
    fmt = _resolve_format(path, fmt)
    if str(path) == STDIO:
        text = sys.stdin.read()
    else:
        with open(path) as f:
            text = f.read()
    return loads(text, fmt)


def dump(value, path: Union[str, Path], fmt: Optional[Union[FileFormat, str]] = None, pretty: bool = True) -> None:
    """Write a rotation or transform document to a file.

    Args:
        value: Rotation variant or Transform.
        path: Output path, or "-" for stdout.
        fmt: Output format; guessed from the extension if None.
        pretty: Indent JSON output.
    """
    fmt = _resolve_format(path, fmt)
    text = dumps(value, fmt, pretty=pretty)
    if str(path) == STDIO:
        sys.stdout.write(text)
        sys.stdout.flush()
    else:
        with open(path, "w") as f:
            f.write(text)
