"""Encode an RgbImage into a 24-bit uncompressed BMP byte string."""

from __future__ import annotations

import logging

from bmp24.components.image import RgbImage
from bmp24.core.binary import ByteWriter
from bmp24.core.errors import InvalidWidth
from bmp24.core.format import (
    BITS_PER_PIXEL,
    COLORS_USED,
    COMPRESSION_NONE,
    DATA_OFFSET,
    IMPORTANT_COLORS,
    INFO_HEADER_SIZE,
    PLANES,
    SIGNATURE,
    file_size,
    row_padding,
)

logger = logging.getLogger(__name__)


def encode_bmp(image: RgbImage) -> bytes:
    """Serialize an image to a complete BMP file.

    Rows are written bottom-up, each pixel as B, G, R, and every row is
    zero-padded to a 4-byte boundary.

    Args:
        image: Image whose pixel count is a multiple of its width

    Returns:
        Encoded file contents

    Raises:
        InvalidWidth: If width is 0 or does not divide the pixel count
    """
    width = image.width
    count = len(image.pixels)
    if width == 0:
        raise InvalidWidth(width)
    if count % width != 0:
        raise InvalidWidth(width, f"{count} pixels is not a multiple of the width")

    height = count // width
    padding = row_padding(width)
    size = file_size(width, height)

    out = ByteWriter()

    # File header
    out.write_bytes(SIGNATURE)
    out.write_u32(size)
    out.write_u32(0)  # reserved
    out.write_u32(DATA_OFFSET)

    # Info header
    out.write_u32(INFO_HEADER_SIZE)
    out.write_u32(width)
    out.write_u32(height)
    out.write_u16(PLANES)
    out.write_u16(BITS_PER_PIXEL)
    out.write_u32(COMPRESSION_NONE)
    out.write_u32(0)  # compressed size
    out.write_u32(width)  # horizontal resolution placeholder
    out.write_u32(height)  # vertical resolution placeholder
    out.write_u32(COLORS_USED)
    out.write_u32(IMPORTANT_COLORS)

    # Pixel rows, bottom-up
    pixels = image.pixels
    for i in range(height):
        start = (height - i - 1) * width
        row = bytearray()
        for p in pixels[start:start + width]:
            row += bytes((p.b, p.g, p.r))
        out.write_bytes(bytes(row))
        out.write_zeros(padding)

    logger.debug(
        "Encoded %dx%d image (padding=%d) into %d bytes", width, height, padding, len(out)
    )
    return out.getvalue()
