"""BMP layout constants and row geometry.

File format (little-endian, fixed offsets):
  [File header: 14 bytes]
    - Signature: 2 bytes ('BM')
    - File size: 4 bytes
    - Reserved: 4 bytes (0)
    - Pixel data offset: 4 bytes (54)
  [Info header: 40 bytes]
    - Header size (40), width, height: 4 bytes each
    - Planes (1), bits per pixel (24): 2 bytes each
    - Compression (0), compressed size, x/y resolution,
      colors used, important colors: 4 bytes each
  [Pixel data]
    - Rows bottom-up, pixels B, G, R, each row zero-padded to 4 bytes
"""

from __future__ import annotations

SIGNATURE = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE  # 54, no palette at 24 bpp

PLANES = 1
BITS_PER_PIXEL = 24
BYTES_PER_PIXEL = 3
COMPRESSION_NONE = 0
COLORS_USED = 1 << 24
IMPORTANT_COLORS = 0


def row_padding(width: int) -> int:
    """Zero bytes appended to each row so its length is a multiple of 4."""
    return (4 - (width * BYTES_PER_PIXEL) % 4) % 4


def row_stride(width: int) -> int:
    """On-disk length of one row in bytes, padding included."""
    return width * BYTES_PER_PIXEL + row_padding(width)


def file_size(width: int, height: int) -> int:
    """Total size of an encoded file with the given geometry."""
    return DATA_OFFSET + height * row_stride(width)
