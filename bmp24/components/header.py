"""Parsed BMP header fields."""

from pydantic import Field

from bmp24.components.image import Component
from bmp24.core.format import row_padding, row_stride


class BmpHeader(Component):
    """File header and info header of a 24-bit BMP, as stored on disk.

    Only ``width`` and ``height`` matter for decoding; the remaining fields
    are kept for inspection and are not validated.
    """

    signature: bytes = b"BM"
    file_size: int = Field(ge=0)
    reserved: int = 0
    data_offset: int = Field(ge=0)
    header_size: int
    width: int = Field(ge=0)
    height: int = Field(ge=0)
    planes: int
    bits_per_pixel: int
    compression: int
    compressed_size: int = 0
    x_resolution: int = 0
    y_resolution: int = 0
    colors_used: int = 0
    important_colors: int = 0

    @property
    def padding(self) -> int:
        return row_padding(self.width)

    @property
    def row_stride(self) -> int:
        return row_stride(self.width)
