"""Exceptions raised by the BMP codec.

Every failure aborts the current encode/decode call; nothing is retried and
no partial image is ever returned. Validation errors carry the offending raw
value in ``actual`` and are also ``ValueError`` subclasses.
"""

from __future__ import annotations

from typing import Any


class BmpError(Exception):
    """Base class for all codec errors."""


class IOFailure(BmpError):
    """Byte source/sink failure, including reads past the end of the input."""


class _FieldError(BmpError, ValueError):
    """A header field holds a value outside the supported subset."""

    message = "Invalid field"

    def __init__(self, actual: Any, detail: str | None = None) -> None:
        self.actual = actual
        text = f"{self.message}, got {actual!r}"
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)


class InvalidSignature(_FieldError):
    message = "Invalid signature, expected b'BM'"


class InvalidHeaderSize(_FieldError):
    message = "Invalid header size, expected 40"


class UnsupportedPlaneCount(_FieldError):
    message = "Unsupported plane count, expected 1"


class UnsupportedColorDepth(_FieldError):
    message = "Unsupported color depth, expected 24"


class UnsupportedCompression(_FieldError):
    message = "Unsupported compression, expected 0"


class InvalidWidth(_FieldError):
    """Width is zero or does not divide the pixel count."""

    message = "Invalid width"
