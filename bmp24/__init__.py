"""Minimal codec for uncompressed 24-bit BMP images.

Converts between an in-memory RGB pixel buffer and the Windows BMP file
layout: a 14-byte file header, a 40-byte info header and bottom-up B-G-R
pixel rows padded to 4-byte boundaries.

Quick Start:
    >>> from bmp24 import Rgb, RgbImage, encode_bmp, decode_bmp
    >>>
    >>> img = RgbImage(
    ...     [Rgb(255, 0, 0), Rgb(0, 255, 0), Rgb(0, 0, 255), Rgb(255, 255, 255)],
    ...     width=2,
    ... )
    >>> data = encode_bmp(img)
    >>> len(data)
    70
    >>> decode_bmp(data).pixels == img.pixels
    True

Files on disk:
    >>> from bmp24 import save_bmp, load_bmp
    >>> save_bmp(img, "tiny.bmp")
    >>> load_bmp("tiny.bmp").height
    2
"""

__version__ = "0.1.0"

from bmp24.api import get_bmp_info, load_bmp, save_bmp
from bmp24.components.header import BmpHeader
from bmp24.components.image import Rgb, RgbImage
from bmp24.core.decoder import decode_bmp, read_bmp_header
from bmp24.core.encoder import encode_bmp
from bmp24.core.errors import (
    BmpError,
    InvalidHeaderSize,
    InvalidSignature,
    InvalidWidth,
    IOFailure,
    UnsupportedColorDepth,
    UnsupportedCompression,
    UnsupportedPlaneCount,
)

__all__ = [
    "__version__",
    "encode_bmp",
    "decode_bmp",
    "read_bmp_header",
    "save_bmp",
    "load_bmp",
    "get_bmp_info",
    "Rgb",
    "RgbImage",
    "BmpHeader",
    "BmpError",
    "IOFailure",
    "InvalidSignature",
    "InvalidHeaderSize",
    "UnsupportedPlaneCount",
    "UnsupportedColorDepth",
    "UnsupportedCompression",
    "InvalidWidth",
]
