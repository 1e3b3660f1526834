"""
Command-line access to the color codec and interpolator.

Usage:
    color-tween convert "#f00"                        # rgb(255,0,0)
    color-tween convert "#f00" --mode hsl             # hsl(0,100%,50%)
    color-tween tween "#000" "rgb(100,200,50)" --steps 3
"""

import argparse
import logging
import sys
from pathlib import Path

from ..color.codec import ColorCodec
from ..config import ColorTweenConfig, load_config
from ..errors import ColorError, ConfigError
from ..tween.interpolator import Interpolator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-tween",
        description="Convert and interpolate CSS-style color strings",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML config file (keys: mode, properties)",
    )
    parser.add_argument(
        "--mode",
        choices=["rgb", "hsl"],
        help="Color space to work in (default: from config, else rgb)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Print a color in canonical form")
    convert.add_argument("color", help='Color string, e.g. "#f00" or "hsl(0,100%%,50%%)"')

    tween = subparsers.add_parser("tween", help="Print evenly spaced colors between two colors")
    tween.add_argument("start", help="Color at ratio 0")
    tween.add_argument("end", help="Color at ratio 1")
    tween.add_argument(
        "--steps",
        type=_positive_int,
        default=5,
        help="Number of colors to print, ends included (default: 5)",
    )
    return parser


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return value


def _ratios(steps: int) -> list[float]:
    if steps == 1:
        return [0.0]
    return [i / (steps - 1) for i in range(steps)]


def _load(args: argparse.Namespace) -> ColorTweenConfig:
    config = load_config(args.config) if args.config else ColorTweenConfig()
    if args.mode:
        config.set_mode(args.mode)
    return config


def main(argv: list[str] | None = None) -> int:
    """Entry point for the color-tween command."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(name)s] %(levelname)s: %(message)s")

    try:
        config = _load(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    codec = ColorCodec(config)
    try:
        if args.command == "convert":
            print(codec.convert(args.color))
            return 0

        # Parse the boundaries once, then sample
        interpolator = Interpolator(config, codec)
        start = codec.parse(args.start)
        end = codec.parse(args.end)
        for ratio in _ratios(args.steps):
            color = codec.serialize(interpolator.tween_triplet(start, end, ratio))
            print(f"{ratio:.2f}\t{color}")
    except ColorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
