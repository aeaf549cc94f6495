"""Command line interface: inspect, invert and generate 24-bit BMP files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from bmp24.api import get_bmp_info, load_bmp, save_bmp
from bmp24.components.image import RgbImage
from bmp24.config import load_config
from bmp24.core.errors import BmpError

logger = logging.getLogger(__name__)


def invert_channels(image: RgbImage) -> RgbImage:
    """Return a copy with every channel replaced by 255 - value."""
    return RgbImage.from_array(255 - image.to_array())


def sine_gradient(width: int, height: int) -> RgbImage:
    """Grey diagonal wave test pattern."""
    y, x = np.mgrid[0:height, 0:width]
    wave = np.clip(np.sin((x + y) * 0.1) + 1.0, 0.0, 2.0) * 128.0
    grey = np.minimum(wave, 255).astype(np.uint8)
    return RgbImage.from_array(np.stack([grey, grey, grey], axis=-1))


def _cmd_info(args: argparse.Namespace) -> None:
    for key, value in get_bmp_info(args.path).items():
        print(f"{key}: {value}")


def _cmd_invert(args: argparse.Namespace) -> None:
    image = load_bmp(args.input)
    save_bmp(invert_channels(image), args.output, config=args.config_obj)


def _cmd_gradient(args: argparse.Namespace) -> None:
    save_bmp(sine_gradient(args.width, args.height), args.output, config=args.config_obj)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmp24", description="24-bit uncompressed BMP tools"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to bmp24.toml (auto-detected if omitted)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="Print header fields")
    info.add_argument("path", type=Path)
    info.set_defaults(func=_cmd_info)

    invert = sub.add_parser("invert", help="Invert every color channel")
    invert.add_argument("input", type=Path)
    invert.add_argument("output", type=Path)
    invert.set_defaults(func=_cmd_invert)

    gradient = sub.add_parser("gradient", help="Write a grey wave test image")
    gradient.add_argument("output", type=Path)
    gradient.add_argument("--width", type=int, default=30)
    gradient.add_argument("--height", type=int, default=30)
    gradient.set_defaults(func=_cmd_gradient)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        args.config_obj = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"bmp24: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=args.log_level or args.config_obj.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        args.func(args)
    except BmpError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"bmp24: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
