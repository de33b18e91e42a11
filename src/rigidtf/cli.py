"""Command-line tool for converting and composing rotation documents.

Usage:
    rigidtf convert -r quat -i rotation.yaml -o rotation.json
    rigidtf convert -r euler --order ypr -a rad < in.json
    rigidtf compose -o total.yaml first.json second.yaml third.json
"""

import argparse
import logging
import sys
from typing import List, Optional

from rigidtf.config import (
    ROTATION_FORMAT_ALIASES,
    AngleFormat,
    ConversionConfig,
    KeepTranslation,
)
from rigidtf.errors import ParseError, RigidTfError
from rigidtf.io.files import STDIO, FileFormat, dump, guess_format, load
from rigidtf.transform.compose import compose
from rigidtf.transform.model import Transform

logger = logging.getLogger(__name__)


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-t",
        "--output-format",
        choices=[f.value for f in FileFormat],
        help="Output file format (default: guessed from --output)",
    )
    parser.add_argument(
        "-r",
        "--rotation-format",
        choices=list(ROTATION_FORMAT_ALIASES),
        help="Rotation format of the output (default: keep input format)",
    )
    parser.add_argument(
        "-a",
        "--angle-format",
        choices=[f.value for f in AngleFormat],
        help="Angle unit of the output (default: deg)",
    )
    parser.add_argument(
        "-k",
        "--keep-translation",
        choices=[k.value for k in KeepTranslation],
        help="Translation policy: auto, always or discard (default: auto)",
    )
    parser.add_argument(
        "--order",
        help="Euler axis order used with -r euler (default: rpy)",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Write JSON on a single line",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to YAML configuration file (command-line flags take precedence)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=STDIO,
        help="Output path, '-' for stdout (default: -)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the rigidtf command."""
    parser = argparse.ArgumentParser(
        prog="rigidtf",
        description="Convert and compose 3D rotations and rigid transforms",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a rotation or transform to another format",
    )
    convert_parser.add_argument(
        "-f",
        "--input-format",
        choices=[f.value for f in FileFormat],
        help="Input file format (default: guessed from --input)",
    )
    convert_parser.add_argument(
        "-i",
        "--input",
        default=STDIO,
        help="Input path, '-' for stdin (default: -)",
    )
    _add_output_options(convert_parser)
    convert_parser.set_defaults(handler=run_convert)

    compose_parser = subparsers.add_parser(
        "compose",
        help="Compose transforms, applied in the order given",
    )
    compose_parser.add_argument(
        "input_files",
        nargs="+",
        help="Transform or rotation documents to compose",
    )
    _add_output_options(compose_parser)
    compose_parser.set_defaults(handler=run_compose)

    return parser


def build_config(args: argparse.Namespace) -> ConversionConfig:
    """Merge the optional YAML configuration file with command-line flags.

    Args:
        args: Parsed command-line arguments.

    Returns:
        ConversionConfig instance.
    """
    if args.config:
        config = ConversionConfig.from_yaml(args.config)
    else:
        config = ConversionConfig()

    data = config.to_dict()
    if args.rotation_format is not None:
        data["rotation_format"] = args.rotation_format
    if args.angle_format is not None:
        data["angle_format"] = args.angle_format
    if args.keep_translation is not None:
        data["keep_translation"] = args.keep_translation
    if args.order is not None:
        data["euler_order"] = args.order
    if args.compact:
        data["pretty"] = False

    return ConversionConfig.from_dict(data)


def _output_format(args: argparse.Namespace) -> FileFormat:
    if args.output_format is not None:
        return FileFormat(args.output_format)

    guessed = guess_format(args.output)
    if guessed is None:
        raise ParseError("Please specify the output file format using --output-format")
    return guessed


def run_convert(args: argparse.Namespace) -> int:
    """Convert one document and write it out."""
    config = build_config(args)
    output_format = _output_format(args)

    if args.input_format is None and guess_format(args.input) is None:
        raise ParseError("Please specify the input file format using --input-format")

    value = load(args.input, args.input_format)
    logger.debug("Loaded %s from %s", type(value).__name__, args.input)

    dump(config.apply(value), args.output, output_format, pretty=config.pretty)
    return 0


def run_compose(args: argparse.Namespace) -> int:
    """Compose documents in order and write the result."""
    config = build_config(args)
    output_format = _output_format(args)

    transforms: List[Transform] = []
    for path in args.input_files:
        value = load(path)
        if not isinstance(value, Transform):
            value = Transform(value)
        transforms.append(value)
        logger.debug("Loaded %s", path)

    dump(config.apply(compose(transforms)), args.output, output_format, pretty=config.pretty)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.handler(args)
    except (RigidTfError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
