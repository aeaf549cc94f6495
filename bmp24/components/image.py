"""Image components: Rgb, RgbImage."""

from __future__ import annotations

from typing import cast

import numpy as np
from pydantic import BaseModel, Field

U32_MAX = 2**32 - 1


class Component(BaseModel):
    """Base class for codec data containers.

    Components are plain value holders validated by Pydantic.
    """


class Rgb(Component):
    """A single 24-bit pixel. Defaults to black.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """

    model_config = {"frozen": True}

    r: int = Field(default=0, ge=0, le=255)
    g: int = Field(default=0, ge=0, le=255)
    b: int = Field(default=0, ge=0, le=255)

    def __init__(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        super().__init__(r=r, g=g, b=b)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class RgbImage(Component):
    """Row-major RGB pixel buffer.

    Height is never stored; it is ``len(pixels) // width``. Pixel ``(x, y)``
    lives at ``y * width + x`` with ``y = 0`` the top row.

    Attributes:
        pixels: Pixel sequence of length width * height
        width: Pixels per row
    """

    pixels: list[Rgb] = Field(default_factory=list)
    width: int = Field(ge=0, le=U32_MAX)

    def __init__(self, pixels: list[Rgb], width: int) -> None:
        super().__init__(pixels=pixels, width=width)

    @property
    def height(self) -> int:
        if self.width == 0:
            return 0
        return len(self.pixels) // self.width

    def is_consistent(self) -> bool:
        """True when width is positive and divides the pixel count."""
        return self.width > 0 and len(self.pixels) % self.width == 0

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) out of bounds for {self.width}x{self.height} image"
            )
        return y * self.width + x

    def pixel(self, x: int, y: int) -> Rgb:
        return self.pixels[self.index(x, y)]

    @classmethod
    def from_array(cls, array: np.ndarray) -> RgbImage:
        """Build an image from an (H, W, 3) integer array.

        Raises:
            TypeError: If array is not an ndarray
            ValueError: If shape, dtype or value range is wrong
        """
        if not isinstance(array, np.ndarray):
            raise TypeError(f"Expected ndarray, got {type(array)}")
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected shape (H, W, 3), got {array.shape}")
        if not np.issubdtype(array.dtype, np.integer):
            raise ValueError(f"Expected uint8 or int dtype, got {array.dtype}")
        if array.size and (array.min() < 0 or array.max() > 255):
            raise ValueError("Channel values must be in [0, 255]")

        height, width, _ = array.shape
        flat = array.reshape(height * width, 3).tolist()
        pixels = [Rgb.model_construct(r=r, g=g, b=b) for r, g, b in flat]
        return cls(pixels, width)

    def to_array(self) -> np.ndarray:
        """Return the pixels as an (H, W, 3) uint8 array."""
        flat = np.array([p.as_tuple() for p in self.pixels], dtype=np.uint8)
        return cast(np.ndarray, flat.reshape(self.height, self.width, 3))
