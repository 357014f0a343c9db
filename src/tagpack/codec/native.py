"""One-shot packing of plain Python objects."""

from __future__ import annotations

from typing import Any

from ..config import CodecConfig
from ..exceptions import DecodeError, IncompleteDataError, MalformedDataError
from ..models.native import to_python
from .decoder import decode
from .encoder import encode
from .result import Malformed, NeedMoreInput


def packb(obj: Any, config: CodecConfig | None = None) -> bytes:
    """Encode a plain Python object (see to_value() for the accepted types).

    Raises:
        UnsupportedValueError: If obj has no Value equivalent
    """
    return encode(obj, config)


def unpackb(data: bytes | bytearray | memoryview, config: CodecConfig | None = None) -> Any:
    """Decode a buffer holding exactly one value into plain Python objects.

    Args:
        data: One complete encoded value
        config: Codec configuration

    Returns:
        The decoded object (see to_python() for the mapping)

    Raises:
        IncompleteDataError: If data ends inside the value
        MalformedDataError: If an invalid tag byte is found
        DecodeError: If bytes remain after the value

    Example:
        >>> unpackb(packb({b"depth": [1, -2, 3.5]}))
        {b'depth': [1, -2, 3.5]}
    """
    result = decode(data, config)

    if isinstance(result, NeedMoreInput):
        raise IncompleteDataError(f"Truncated data: {len(data)} bytes hold no complete value")
    if isinstance(result, Malformed):
        raise MalformedDataError(result.data)
    if result.rest:
        raise DecodeError(f"{len(result.rest)} unexpected bytes after the value")

    return to_python(result.value)
