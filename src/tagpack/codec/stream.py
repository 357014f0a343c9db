"""Splitting buffers of back-to-back encoded values.

unpack_all() handles a buffer known to hold only complete values;
StreamUnpacker handles bytes that arrive in arbitrary fragments.
"""

from __future__ import annotations

import logging
from typing import Iterator

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import BufferFullError, IncompleteDataError, MalformedDataError
from ..models.value import Value
from .buffer import ByteReader
from .decoder import read_value
from .result import Malformed, NeedMoreInput

log = logging.getLogger(__name__)


def unpack_all(buf: bytes | bytearray | memoryview, config: CodecConfig | None = None) -> list[Value]:
    """Decode every value in a buffer of back-to-back encoded values.

    Args:
        buf: Zero or more complete encoded values, with nothing trailing
        config: Codec configuration

    Returns:
        The decoded values, in buffer order

    Raises:
        IncompleteDataError: If the buffer ends inside a value
        MalformedDataError: If an invalid tag byte is found
        DepthLimitError: If container nesting exceeds config.max_depth

    Example:
        >>> unpack_all(encode(1) + encode([None]) + encode(b"x"))
        [UInt(kind='uint', value=1), Array(...), Bytes(kind='bytes', value=b'x')]
    """
    config = config or DEFAULT_CONFIG
    reader = ByteReader(buf)
    values: list[Value] = []

    while reader.bytes_remaining():
        start = reader.position()
        outcome = read_value(reader, config)

        if isinstance(outcome, NeedMoreInput):
            log.debug("unpack_all: buffer ends inside the value at offset %d", start)
            raise IncompleteDataError(
                f"Buffer ends inside the value starting at offset {start} "
                f"({len(values)} complete values before it)"
            )
        if isinstance(outcome, Malformed):
            log.debug("unpack_all: malformed value at offset %d", start)
            raise MalformedDataError(outcome.data)

        values.append(outcome)

    return values


class StreamUnpacker:
    """Incremental decoder for values arriving in fragments.

    Feed bytes as they arrive and iterate to collect every value that is
    complete so far; a trailing partial value stays buffered until more
    bytes are fed.

    Example:
        ```python
        unpacker = StreamUnpacker()
        for chunk in transport:
            unpacker.feed(chunk)
            for value in unpacker:
                handle(value)
        ```
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize an empty unpacker.

        Args:
            config: Codec configuration (max_depth and max_buffer_size apply)
        """
        self._config = config or DEFAULT_CONFIG
        self._pending = b""
        self._offset = 0

    def feed(self, data: bytes | bytearray | memoryview) -> None:
        """Append newly received bytes.

        Args:
            data: Bytes to append

        Raises:
            BufferFullError: If the pending bytes would exceed config.max_buffer_size
        """
        pending = self._pending[self._offset:] + bytes(data)

        limit = self._config.max_buffer_size
        if limit is not None and len(pending) > limit:
            raise BufferFullError(
                f"Pending buffer of {len(pending)} bytes exceeds max_buffer_size={limit}"
            )

        self._pending = pending
        self._offset = 0

    @property
    def buffered(self) -> int:
        """Number of fed bytes not yet consumed by a decoded value."""
        return len(self._pending) - self._offset

    def reset(self) -> None:
        """Discard all pending bytes, e.g. after a MalformedDataError."""
        self._pending = b""
        self._offset = 0

    def __iter__(self) -> Iterator[Value]:
        return self

    def __next__(self) -> Value:
        """Return the next complete value.

        Raises:
            StopIteration: If no complete value is buffered
            MalformedDataError: If the buffered bytes contain an invalid tag;
                the bytes stay buffered until reset() is called
        """
        reader = ByteReader(self._pending, self._offset)
        outcome = read_value(reader, self._config)

        if isinstance(outcome, NeedMoreInput):
            raise StopIteration
        if isinstance(outcome, Malformed):
            raise MalformedDataError(outcome.data)

        self._offset = reader.position()
        return outcome
