"""Exception hierarchy for tagpack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from TagpackError for easy catching of any tagpack-specific error.

Note that running out of input is *not* an exception at the single-step
decode level: ``decode()`` returns ``NeedMoreInput`` instead, so that callers
can drive a buffering loop. Only the batch helpers (``unpack_all``,
``unpackb``) turn an incomplete buffer into ``IncompleteDataError``.
"""

from __future__ import annotations

from typing import Any


class TagpackError(Exception):
    """Base exception for all tagpack errors."""

    pass


class EncodeError(TagpackError):
    """Raised when encoding a value fails."""

    pass


class UnsupportedValueError(EncodeError):
    """Raised when an object does not map to any Value variant.

    Examples:
        - A ``str``, ``set`` or arbitrary object handed to ``encode()``
        - An integer outside [-2**63, 2**64 - 1]

    Attributes:
        value: The offending object
    """

    def __init__(self, value: Any, msg: str = "") -> None:
        super().__init__(msg or f"unsupported value of type {type(value).__name__}: {value!r}")
        self.value = value


class DecodeError(TagpackError):
    """Raised when decoding binary data fails.

    Examples:
        - Unassigned tag byte
        - Buffer that ends in the middle of a value where a complete one was required
        - Trailing bytes after a single value
    """

    pass


class MalformedDataError(DecodeError):
    """Raised when a tag byte has no valid interpretation.

    Attributes:
        data: The buffer contents starting at the offending tag byte
    """

    def __init__(self, data: bytes, msg: str = "") -> None:
        tag = f"0x{data[0]:02X}" if data else "<empty>"
        super().__init__(msg or f"malformed data at tag byte {tag}")
        self.data = bytes(data)


class IncompleteDataError(DecodeError):
    """Raised when a buffer expected to hold only complete values ends early."""

    pass


class BufferFullError(DecodeError):
    """Raised when a stream unpacker's pending buffer exceeds its configured cap."""

    pass


class DepthLimitError(TagpackError):
    """Raised when container nesting exceeds the configured maximum depth.

    Attributes:
        max_depth: The limit that was exceeded
    """

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"container nesting exceeds max_depth={max_depth}")
        self.max_depth = max_depth
