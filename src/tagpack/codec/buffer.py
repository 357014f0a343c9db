"""Byte-level packing and unpacking utilities.

This module provides the low-level primitives the encoder and decoder are
built on: big-endian fixed-width fields, raw byte runs, and compact tags
that pack a bit prefix and a small value into a single byte.
"""

from __future__ import annotations

import struct

_FLOAT_FORMATS = {4: ">f", 8: ">d"}


class ByteWriter:
    """Appends encoded fields to a growable byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_tag(0b1001, 4, 2)  # fixarray of length 2
        >>> writer.write_uint(0xCC, 1)
        >>> writer.write_uint(200, 1)
        >>> writer.to_bytes()
        b'\\x92\\xcc\\xc8'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_tag(self, prefix: int, prefix_bits: int, value: int) -> None:
        """Write one byte made of a bit prefix followed by a small value.

        Args:
            prefix: Leading bits, most significant first
            prefix_bits: Width of the prefix (1-7)
            value: Value for the remaining low bits; negative values are
                stored modulo 2**(8 - prefix_bits)

        Raises:
            ValueError: If prefix_bits is out of range or value doesn't fit
        """
        if prefix_bits < 1 or prefix_bits > 7:
            raise ValueError(f"prefix_bits must be 1-7, got {prefix_bits}")

        value_bits = 8 - prefix_bits
        if not -(1 << value_bits) <= value < (1 << value_bits):
            raise ValueError(f"Value {value} doesn't fit in {value_bits} bits")

        mask = (1 << value_bits) - 1
        self._buffer.append((prefix << value_bits) | (value & mask))

    def write_uint(self, value: int, num_bytes: int) -> None:
        """Write an unsigned big-endian integer.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bytes: Field width in bytes

        Raises:
            ValueError: If value is negative or doesn't fit in num_bytes
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        try:
            self._buffer += value.to_bytes(num_bytes, "big")
        except OverflowError as err:
            raise ValueError(f"Value {value} requires more than {num_bytes} bytes") from err

    def write_int(self, value: int, num_bytes: int) -> None:
        """Write a signed big-endian integer in two's complement.

        Args:
            value: Signed integer value to write
            num_bytes: Field width in bytes

        Raises:
            ValueError: If value doesn't fit in num_bytes
        """
        try:
            self._buffer += value.to_bytes(num_bytes, "big", signed=True)
        except OverflowError as err:
            raise ValueError(f"Value {value} doesn't fit in {num_bytes} signed bytes") from err

    def write_float(self, value: float) -> None:
        """Write an IEEE-754 big-endian double."""
        self._buffer += struct.pack(">d", value)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer += data

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Reads encoded fields from a byte buffer.

    Reads never copy more than the requested field and raise IndexError
    when the buffer ends before the field does; that is how callers learn
    that more input is needed.

    Example:
        >>> reader = ByteReader(b"\\xcd\\x01\\x00")
        >>> reader.read_byte()
        205
        >>> reader.read_uint(2)
        256
    """

    def __init__(self, data: bytes | bytearray | memoryview, position: int = 0) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Byte buffer to read from
            position: Offset of the first byte to read
        """
        self._data = data if isinstance(data, bytes) else memoryview(data).cast("B")
        self._position = position

    def _take(self, num_bytes: int) -> bytes | memoryview:
        end = self._position + num_bytes
        if end > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {len(self._data) - self._position}"
            )
        chunk = self._data[self._position:end]
        self._position = end
        return chunk

    def read_byte(self) -> int:
        """Read a single byte as an unsigned integer.

        Raises:
            IndexError: If no bytes remain
        """
        if self._position >= len(self._data):
            raise IndexError("Attempted to read past end of buffer")
        value = self._data[self._position]
        self._position += 1
        return value

    def read_uint(self, num_bytes: int) -> int:
        """Read an unsigned big-endian integer of the given width."""
        return int.from_bytes(self._take(num_bytes), "big")

    def read_int(self, num_bytes: int) -> int:
        """Read a signed (two's complement) big-endian integer of the given width."""
        return int.from_bytes(self._take(num_bytes), "big", signed=True)

    def read_float(self, num_bytes: int) -> float:
        """Read an IEEE-754 big-endian float (4 or 8 bytes)."""
        return struct.unpack(_FLOAT_FORMATS[num_bytes], self._take(num_bytes))[0]

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes."""
        return bytes(self._take(num_bytes))

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read offset."""
        return self._position

    def seek(self, position: int) -> None:
        """Move the read offset back to a previously saved position."""
        self._position = position

    def rest(self) -> bytes:
        """Return all unread bytes without consuming them."""
        return bytes(self._data[self._position:])
