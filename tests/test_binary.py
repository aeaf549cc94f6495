"""Tests for the little-endian field reader/writer."""

import pytest

from bmp24.core.binary import (
    ByteReader,
    ByteWriter,
    read_u8,
    read_u16,
    read_u32,
    write_u8,
    write_u16,
    write_u32,
)
from bmp24.core.errors import IOFailure


class TestByteWriter:
    """Tests for ByteWriter."""

    def test_little_endian_layout(self) -> None:
        """Test that multi-byte fields are written least significant first."""
        w = ByteWriter()
        w.write_u8(0xAB)
        w.write_u16(0x1234)
        w.write_u32(0xDEADBEEF)

        assert w.getvalue() == b"\xab\x34\x12\xef\xbe\xad\xde"
        assert len(w) == 7

    def test_write_zeros_and_bytes(self) -> None:
        """Test raw byte and zero padding output."""
        w = ByteWriter()
        w.write_bytes(b"BM")
        w.write_zeros(3)

        assert w.getvalue() == b"BM\x00\x00\x00"

    def test_out_of_range_value_rejected(self) -> None:
        """Test that values wider than the field raise ValueError."""
        w = ByteWriter()
        with pytest.raises(ValueError, match="16 unsigned bits"):
            w.write_u16(0x10000)
        with pytest.raises(ValueError):
            w.write_u32(-1)


class TestByteReader:
    """Tests for ByteReader."""

    def test_reads_advance_position(self) -> None:
        """Test sequential reads and cursor movement."""
        r = ByteReader(b"\x07\x02\x01\x28\x00\x00\x00")

        assert r.read_u8() == 7
        assert r.read_u16() == 0x0102
        assert r.position == 3
        assert r.read_u32() == 40
        assert r.remaining == 0

    def test_underflow_raises_io_failure(self) -> None:
        """Test that reading past the end fails instead of zero-padding."""
        r = ByteReader(b"\x01\x02\x03")
        with pytest.raises(IOFailure, match="need 4 bytes at offset 0, got 3"):
            r.read_u32()

    def test_failed_read_does_not_consume(self) -> None:
        """Test that the cursor stays put after a failed read."""
        r = ByteReader(b"\x01")
        with pytest.raises(IOFailure):
            r.read_u16()
        assert r.position == 0
        assert r.read_u8() == 1

    def test_skip_and_read_bytes(self) -> None:
        """Test skipping and raw reads."""
        r = ByteReader(b"BMxyz")
        assert r.read_bytes(2) == b"BM"
        r.skip(2)
        assert r.remaining == 1
        with pytest.raises(IOFailure):
            r.skip(2)


class TestFunctionalForms:
    """Tests for the buffer-in, remainder-out helpers."""

    def test_write_into_bytearray(self) -> None:
        """Test appending to a caller-owned buffer."""
        buf = bytearray()
        write_u8(buf, ord("B"))
        write_u16(buf, 1)
        write_u32(buf, 54)

        assert bytes(buf) == b"B\x01\x00\x36\x00\x00\x00"

    def test_read_returns_remaining(self) -> None:
        """Test that reads return the unconsumed tail."""
        rest, value = read_u32(b"\x46\x00\x00\x00tail")
        assert value == 70
        assert rest == b"tail"

        rest, value = read_u16(rest)
        assert value == ord("t") | (ord("a") << 8)
        rest, value = read_u8(rest)
        assert value == ord("i")
        assert rest == b"l"

    def test_read_underflow(self) -> None:
        """Test that short input raises IOFailure."""
        with pytest.raises(IOFailure):
            read_u16(b"\x01")
        with pytest.raises(IOFailure):
            read_u8(b"")

    def test_write_rejects_overflow(self) -> None:
        """Test that a u8 cannot hold 256."""
        with pytest.raises(ValueError):
            write_u8(bytearray(), 256)
