"""Decode a 24-bit uncompressed BMP byte string into an RgbImage.

Parsing is strictly sequential. The signature is checked before the info
header is read, and the info header constraints (size, planes, depth,
compression) are checked as each field is read, so a malformed header never
leads to a pixel read. The stored file size and data offset are not
trusted; pixel data is located by the fixed header sizes.
"""

from __future__ import annotations

import logging

from bmp24.components.header import BmpHeader
from bmp24.components.image import Rgb, RgbImage
from bmp24.core.binary import ByteReader
from bmp24.core.errors import (
    InvalidHeaderSize,
    InvalidSignature,
    InvalidWidth,
    IOFailure,
    UnsupportedColorDepth,
    UnsupportedCompression,
    UnsupportedPlaneCount,
)
from bmp24.core.format import (
    BITS_PER_PIXEL,
    BYTES_PER_PIXEL,
    COMPRESSION_NONE,
    INFO_HEADER_SIZE,
    PLANES,
    SIGNATURE,
    row_padding,
)

logger = logging.getLogger(__name__)


def _read_headers(reader: ByteReader) -> BmpHeader:
    # File header
    signature = reader.read_bytes(2)
    if signature != SIGNATURE:
        raise InvalidSignature(signature)
    file_size = reader.read_u32()
    reserved = reader.read_u32()
    data_offset = reader.read_u32()

    # Info header
    header_size = reader.read_u32()
    if header_size != INFO_HEADER_SIZE:
        raise InvalidHeaderSize(header_size)
    width = reader.read_u32()
    height = reader.read_u32()
    planes = reader.read_u16()
    if planes != PLANES:
        raise UnsupportedPlaneCount(planes)
    bits_per_pixel = reader.read_u16()
    if bits_per_pixel != BITS_PER_PIXEL:
        raise UnsupportedColorDepth(bits_per_pixel)
    compression = reader.read_u32()
    if compression != COMPRESSION_NONE:
        raise UnsupportedCompression(compression)

    return BmpHeader(
        signature=signature,
        file_size=file_size,
        reserved=reserved,
        data_offset=data_offset,
        header_size=header_size,
        width=width,
        height=height,
        planes=planes,
        bits_per_pixel=bits_per_pixel,
        compression=compression,
        compressed_size=reader.read_u32(),
        x_resolution=reader.read_u32(),
        y_resolution=reader.read_u32(),
        colors_used=reader.read_u32(),
        important_colors=reader.read_u32(),
    )


def read_bmp_header(data: bytes) -> BmpHeader:
    """Parse and validate the 54 header bytes without touching pixel data.

    Raises:
        IOFailure: If data ends inside the headers
        InvalidSignature, InvalidHeaderSize, UnsupportedPlaneCount,
        UnsupportedColorDepth, UnsupportedCompression: On unsupported files
    """
    return _read_headers(ByteReader(data))


def _read_pixels(reader: ByteReader, width: int, height: int) -> list[Rgb]:
    padding = row_padding(width)
    row_bytes = width * BYTES_PER_PIXEL

    needed = height * (row_bytes + padding)
    if reader.remaining < needed:
        raise IOFailure(
            f"Unexpected end of data: {width}x{height} image needs {needed} "
            f"pixel bytes at offset {reader.position}, got {reader.remaining}"
        )

    pixels = [Rgb()] * (width * height)
    for i in range(height):
        start = (height - i - 1) * width
        row = reader.read_bytes(row_bytes)
        for j in range(width):
            b, g, r = row[j * 3:j * 3 + 3]
            pixels[start + j] = Rgb.model_construct(r=r, g=g, b=b)
        reader.skip(padding)
    return pixels


def decode_bmp(data: bytes) -> RgbImage:
    """Parse a complete BMP file.

    Args:
        data: Entire file contents

    Returns:
        Image whose row 0 is the top row of the picture

    Raises:
        IOFailure: If data is truncated
        InvalidWidth: If the stored width is 0
        InvalidSignature, InvalidHeaderSize, UnsupportedPlaneCount,
        UnsupportedColorDepth, UnsupportedCompression: On unsupported files
    """
    reader = ByteReader(data)
    header = _read_headers(reader)
    if header.width == 0:
        raise InvalidWidth(header.width)

    pixels = _read_pixels(reader, header.width, header.height)
    logger.debug(
        "Decoded %dx%d image (padding=%d, %d trailing bytes)",
        header.width,
        header.height,
        header.padding,
        reader.remaining,
    )
    return RgbImage(pixels, header.width)
