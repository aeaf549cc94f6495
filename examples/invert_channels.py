#!/usr/bin/env python3
"""Channel inversion example using the high-level save/load API.

This example demonstrates the simplest round trip through the codec:
- Generate a grey wave test image (or load an existing 24-bit BMP)
- Save it with save_bmp()
- Load it back with load_bmp()
- Invert every channel in place and save the result

Inversion is done directly on the Rgb pixels to show how callers own pixel
mutation; the codec itself never changes pixel values.
"""

from __future__ import annotations

import argparse
import math
from pathlib import Path

from bmp24 import Rgb, RgbImage, get_bmp_info, load_bmp, save_bmp


def _wave_image(width: int, height: int) -> RgbImage:
    pixels = []
    for y in range(height):
        for x in range(width):
            color = min(int(max(0.0, min(2.0, math.sin((x + y) * 0.1) + 1.0)) * 128.0), 255)
            pixels.append(Rgb(color, color, color))
    return RgbImage(pixels, width)


def main() -> None:
    parser = argparse.ArgumentParser(description="Channel inversion example")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Existing 24-bit BMP (a test image is generated if omitted)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("examples/goodbye.bmp"),
        help="Output path for the inverted image",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=30,
        help="Test image size if no input image is given",
    )
    args = parser.parse_args()

    if args.input is None:
        args.input = Path("examples/hello.bmp")
        save_bmp(_wave_image(args.size, args.size), args.input)
        print(f"Wrote test image to {args.input}")

    image = load_bmp(args.input)
    print(f"Loaded {image.width}x{image.height} image")

    for i, p in enumerate(image.pixels):
        image.pixels[i] = Rgb(255 - p.r, 255 - p.g, 255 - p.b)

    save_bmp(image, args.output)
    info = get_bmp_info(args.output)
    print(f"Saved inverted image to {args.output} ({info['file_size']} bytes)")


if __name__ == "__main__":
    main()
