"""Fixed-width little-endian field reader/writer.

The lowest layer of the codec. ``ByteWriter`` appends u8/u16/u32 fields to
a growing buffer; ``ByteReader`` walks an immutable buffer with a cursor and
fails with ``IOFailure`` the moment a read would run past the end. Neither
class validates field values beyond byte availability.

Example:
    >>> w = ByteWriter()
    >>> w.write_u16(0x4D42)
    >>> w.write_u32(70)
    >>> r = ByteReader(w.getvalue())
    >>> r.read_u16(), r.read_u32()
    (19778, 70)
"""

from __future__ import annotations

import struct
from typing import Tuple

from bmp24.core.errors import IOFailure

_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class ByteWriter:
    """Append-only little-endian output buffer."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def write_u8(self, value: int) -> None:
        _append(_U8, self._buf, value)

    def write_u16(self, value: int) -> None:
        _append(_U16, self._buf, value)

    def write_u32(self, value: int) -> None:
        _append(_U32, self._buf, value)

    def write_bytes(self, data: bytes) -> None:
        self._buf += data

    def write_zeros(self, count: int) -> None:
        self._buf += bytes(count)

    def getvalue(self) -> bytes:
        return bytes(self._buf)

    def __len__(self) -> int:
        return len(self._buf)


class ByteReader:
    """Cursor over an immutable byte buffer.

    Attributes:
        position: Offset of the next byte to be read
    """

    def __init__(self, data: bytes) -> None:
        self._view = memoryview(bytes(data))
        self.position = 0

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._view) - self.position

    def _take(self, count: int) -> memoryview:
        if count > self.remaining:
            raise IOFailure(
                f"Unexpected end of data: need {count} bytes at offset "
                f"{self.position}, got {self.remaining}"
            )
        start = self.position
        self.position += count
        return self._view[start:self.position]

    def read_u8(self) -> int:
        return int(_U8.unpack(self._take(1))[0])

    def read_u16(self) -> int:
        return int(_U16.unpack(self._take(2))[0])

    def read_u32(self) -> int:
        return int(_U32.unpack(self._take(4))[0])

    def read_bytes(self, count: int) -> bytes:
        return self._take(count).tobytes()

    def skip(self, count: int) -> None:
        self._take(count)


# Functional forms: write into a bytearray, read from the front of a buffer
# and hand back whatever is left.


def _append(fmt: struct.Struct, buffer: bytearray, value: int) -> None:
    try:
        buffer += fmt.pack(value)
    except struct.error as e:
        raise ValueError(
            f"Value {value!r} does not fit in {fmt.size * 8} unsigned bits"
        ) from e


def write_u8(buffer: bytearray, value: int) -> None:
    _append(_U8, buffer, value)


def write_u16(buffer: bytearray, value: int) -> None:
    _append(_U16, buffer, value)


def write_u32(buffer: bytearray, value: int) -> None:
    _append(_U32, buffer, value)


def _read(fmt: struct.Struct, data: bytes) -> Tuple[bytes, int]:
    if len(data) < fmt.size:
        raise IOFailure(
            f"Unexpected end of data: need {fmt.size} bytes, got {len(data)}"
        )
    (value,) = fmt.unpack_from(data)
    return data[fmt.size:], int(value)


def read_u8(data: bytes) -> Tuple[bytes, int]:
    return _read(_U8, data)


def read_u16(data: bytes) -> Tuple[bytes, int]:
    return _read(_U16, data)


def read_u32(data: bytes) -> Tuple[bytes, int]:
    return _read(_U32, data)
