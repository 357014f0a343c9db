"""Unit tests for byte packing utilities."""

from __future__ import annotations

import pytest

from tagpack.codec.buffer import ByteReader, ByteWriter


class TestByteWriter:
    """Test ByteWriter functionality."""

    def test_write_tag(self) -> None:
        """Test packing a bit prefix and a small value into one byte."""
        writer = ByteWriter()
        writer.write_tag(0b0, 1, 0x7F)  # positive fixint
        writer.write_tag(0b1001, 4, 15)  # fixarray
        writer.write_tag(0b101, 3, 5)  # fixraw

        assert writer.to_bytes() == b"\x7f\x9f\xa5"

    def test_write_tag_negative(self) -> None:
        """Test negative values are stored modulo the value width."""
        writer = ByteWriter()
        writer.write_tag(0b111, 3, -1)
        writer.write_tag(0b111, 3, -32)

        assert writer.to_bytes() == b"\xff\xe0"

    def test_write_tag_bounds(self) -> None:
        """Test tag bounds checking."""
        writer = ByteWriter()

        with pytest.raises(ValueError, match="doesn't fit"):
            writer.write_tag(0b1001, 4, 16)

        with pytest.raises(ValueError, match="prefix_bits"):
            writer.write_tag(0, 8, 0)

    def test_write_uint(self) -> None:
        """Test writing big-endian unsigned integers."""
        writer = ByteWriter()
        writer.write_uint(0xCD, 1)
        writer.write_uint(0x0102, 2)
        writer.write_uint(1, 4)

        assert writer.to_bytes() == b"\xcd\x01\x02\x00\x00\x00\x01"

    def test_write_uint_bounds(self) -> None:
        """Test uint bounds checking."""
        writer = ByteWriter()

        writer.write_uint(0, 1)
        writer.write_uint(255, 1)

        with pytest.raises(ValueError, match="negative"):
            writer.write_uint(-1, 1)

        with pytest.raises(ValueError, match="more than"):
            writer.write_uint(256, 1)

    def test_write_int(self) -> None:
        """Test writing two's complement integers."""
        writer = ByteWriter()
        writer.write_int(-1, 1)
        writer.write_int(-129, 2)

        assert writer.to_bytes() == b"\xff\xff\x7f"

    def test_write_int_bounds(self) -> None:
        """Test signed bounds checking."""
        writer = ByteWriter()

        with pytest.raises(ValueError, match="doesn't fit"):
            writer.write_int(-129, 1)

    def test_write_float(self) -> None:
        """Test writing IEEE-754 doubles."""
        writer = ByteWriter()
        writer.write_float(1.5)

        assert writer.to_bytes() == b"\x3f\xf8\x00\x00\x00\x00\x00\x00"

    def test_empty(self) -> None:
        """Test empty writer."""
        assert ByteWriter().to_bytes() == b""


class TestByteReader:
    """Test ByteReader functionality."""

    def test_read_fields(self) -> None:
        """Test reading mixed fields."""
        reader = ByteReader(b"\xcd\x01\x02\xff\xab\xcd")

        assert reader.read_byte() == 0xCD
        assert reader.read_uint(2) == 0x0102
        assert reader.read_int(1) == -1
        assert reader.read_bytes(2) == b"\xab\xcd"
        assert reader.bytes_remaining() == 0

    def test_read_float(self) -> None:
        """Test reading 32- and 64-bit floats."""
        reader = ByteReader(b"\x3f\xc0\x00\x00" + b"\x3f\xf8\x00\x00\x00\x00\x00\x00")

        assert reader.read_float(4) == 1.5
        assert reader.read_float(8) == 1.5

    def test_read_past_end(self) -> None:
        """Test reading beyond the buffer."""
        reader = ByteReader(b"\x01")

        with pytest.raises(IndexError, match="Not enough bytes"):
            reader.read_uint(2)

        reader.read_byte()
        with pytest.raises(IndexError):
            reader.read_byte()

    def test_position_seek_rest(self) -> None:
        """Test position tracking and rewinding."""
        reader = ByteReader(b"\x01\x02\x03", position=1)

        assert reader.position() == 1
        assert reader.read_byte() == 2
        assert reader.rest() == b"\x03"

        reader.seek(0)
        assert reader.rest() == b"\x01\x02\x03"

    def test_bytearray_and_memoryview(self) -> None:
        """Test non-bytes buffers."""
        assert ByteReader(bytearray(b"\x00\x2a")).read_uint(2) == 42
        assert ByteReader(memoryview(b"\x00\x2a")).read_bytes(2) == b"\x00\x2a"
