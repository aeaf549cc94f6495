"""High-level file API for 24-bit BMP images.

Provides save_bmp() and load_bmp(), which pair the in-memory codec with
the filesystem, plus get_bmp_info() for header inspection.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Union

from bmp24.components.image import RgbImage
from bmp24.config import Bmp24Config
from bmp24.core.decoder import decode_bmp, read_bmp_header
from bmp24.core.encoder import encode_bmp
from bmp24.core.errors import IOFailure

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _read_file(path: PathLike) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise IOFailure(f"Failed to read {os.fspath(path)}: {e}") from e


def _write_file(path: PathLike, data: bytes, overwrite: bool) -> None:
    mode = "wb" if overwrite else "xb"
    try:
        with open(path, mode) as f:
            f.write(data)
    except OSError as e:
        raise IOFailure(f"Failed to write {os.fspath(path)}: {e}") from e


def save_bmp(
    image: RgbImage,
    path: PathLike,
    config: Bmp24Config | None = None,
) -> None:
    """Encode an image and write it to disk.

    The file is created, or truncated when it already exists and
    ``config.overwrite`` is true, then written in full.

    Args:
        image: Image to save
        path: Destination file
        config: Settings (defaults if None; config files are not read here)

    Raises:
        InvalidWidth: If the image geometry is inconsistent
        IOFailure: If the file cannot be created or written

    Example:
        >>> from bmp24 import Rgb, RgbImage, save_bmp, load_bmp
        >>> img = RgbImage([Rgb(255, 0, 0), Rgb(0, 255, 0)], width=2)
        >>> save_bmp(img, "pair.bmp")
        >>> load_bmp("pair.bmp").pixels == img.pixels
        True
    """
    if config is None:
        config = Bmp24Config()
    data = encode_bmp(image)
    _write_file(path, data, overwrite=config.overwrite)
    logger.info("Wrote %s (%d bytes)", os.fspath(path), len(data))


def load_bmp(path: PathLike) -> RgbImage:
    """Read and decode a BMP file.

    Raises:
        IOFailure: If the file cannot be read or is truncated
        BmpError: If the file is not a supported 24-bit BMP
    """
    data = _read_file(path)
    logger.info("Read %s (%d bytes)", os.fspath(path), len(data))
    return decode_bmp(data)


def get_bmp_info(source: PathLike | bytes) -> dict[str, Any]:
    """Get header fields of a BMP file or buffer without decoding pixels.

    Args:
        source: File path, or the file contents as bytes

    Returns:
        Dictionary of header fields plus derived padding and row_stride
    """
    data = bytes(source) if isinstance(source, (bytes, bytearray)) else _read_file(source)
    header = read_bmp_header(data)
    info = header.model_dump()
    info["padding"] = header.padding
    info["row_stride"] = header.row_stride
    return info
