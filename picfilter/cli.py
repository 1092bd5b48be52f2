from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .codec import SUPPORTED_EXTENSIONS
from .errors import InvalidArgument, PictureError
from .picture import parse_flip_axis, parse_rotation
from .processor import PictureProcessor, ProcessSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROTATE_ERROR = "cannot rotate with this angle."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="picfilter",
        description="Apply simple filters to raster images. Output is always written as PNG.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    for name, summary in (
        ("invert", "Invert every color channel"),
        ("grayscale", "Convert to gray by averaging the channels"),
        ("blur", "3x3 box blur, borders left untouched"),
    ):
        sub = commands.add_parser(name, help=summary)
        sub.add_argument("input", help="Input image")
        sub.add_argument("output", help="Output PNG path")

    rotate = commands.add_parser("rotate", help="Rotate clockwise by 90, 180 or 270 degrees")
    rotate.add_argument("degrees", help="90, 180 or 270")
    rotate.add_argument("input", help="Input image")
    rotate.add_argument("output", help="Output PNG path")

    flip = commands.add_parser("flip", help="Mirror horizontally (H) or vertically (V)")
    flip.add_argument("direction", metavar="H|V", help="H mirrors left-right, V mirrors top-bottom")
    flip.add_argument("input", help="Input image")
    flip.add_argument("output", help="Output PNG path")

    blend = commands.add_parser("blend", help="Average several images over their common area")
    blend.add_argument("inputs", nargs="+", help="Input images (at least one)")
    blend.add_argument("output", help="Output PNG path")

    parser.epilog = "Readable input formats include " + ", ".join(sorted(SUPPORTED_EXTENSIONS)) + "."
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def run_command(args: argparse.Namespace, processor: PictureProcessor) -> int:
    if args.command == "invert":
        processor.invert(args.input, args.output)
    elif args.command == "grayscale":
        processor.grayscale(args.input, args.output)
    elif args.command == "rotate":
        try:
            rotation = parse_rotation(args.degrees)
        except InvalidArgument:
            print(ROTATE_ERROR)
            return 0
        processor.rotate(rotation, args.input, args.output)
    elif args.command == "flip":
        processor.flip(parse_flip_axis(args.direction), args.input, args.output)
    elif args.command == "blend":
        processor.blend(args.inputs, args.output)
    elif args.command == "blur":
        processor.blur(args.input, args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    processor = PictureProcessor(ProcessSettings())
    try:
        return run_command(args, processor)
    except PictureError as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
