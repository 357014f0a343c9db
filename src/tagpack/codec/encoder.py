"""Binary encoder for tagpack values.

This module provides the encode() function that converts a Value (or a
plain Python object convertible to one) to its byte encoding, always
choosing the smallest form the wire format allows for it.
"""

from __future__ import annotations

import logging
from typing import Any

from .. import constants as c
from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DepthLimitError, UnsupportedValueError
from ..models.native import to_value
from ..models.value import Array, Bool, Bytes, Float64, Int, Map, Nil, UInt, Value
from .buffer import ByteWriter

log = logging.getLogger(__name__)


def encode(value: Any, config: CodecConfig | None = None) -> bytes:
    """Encode a value to its complete byte representation.

    Containers are encoded recursively, elements (or key/value pairs) in
    order. Non-negative integers always use the unsigned forms and
    negative integers the signed ones.

    Negative integers pick the smallest signed form whose two's-complement
    payload holds them: int8 down to -128, int16 down to -32768 and int32
    down to -2**31. Wider cut-offs such as -256 for int8 would write
    -200 as D0 38, which reads back as 56.

    Args:
        value: Value instance, or plain Python object accepted by to_value()
        config: Codec configuration (max_depth applies)

    Returns:
        Encoded bytes

    Raises:
        UnsupportedValueError: If value has no Value equivalent
        DepthLimitError: If container nesting exceeds config.max_depth

    Examples:
        ```python
        from tagpack import UInt, encode

        encode(UInt(value=1))        # b'\\x01'
        encode(-1)                   # b'\\xff'
        encode([1, None, True])      # b'\\x93\\x01\\xc0\\xc3'
        encode({b"a": 300})          # b'\\x81\\xa1a\\xcd\\x01,'
        ```
    """
    config = config or DEFAULT_CONFIG
    writer = ByteWriter()
    _encode_value(writer, to_value(value, config), config, 0)
    return writer.to_bytes()


def _encode_value(writer: ByteWriter, value: Value, config: CodecConfig, depth: int) -> None:
    """Encode a single value, recursing into containers.

    Args:
        writer: ByteWriter to append to
        value: Value to encode
        config: Codec configuration
        depth: Nesting depth of value (0 for the top-level value)

    Raises:
        UnsupportedValueError: If value is not a Value variant
        DepthLimitError: If a container sits at or below config.max_depth
    """
    if isinstance(value, UInt):
        _encode_uint(writer, value.value)
        return

    if isinstance(value, Int):
        _encode_int(writer, value.value)
        return

    if isinstance(value, Nil):
        writer.write_uint(c.TAG_NIL, 1)
        return

    if isinstance(value, Bool):
        writer.write_uint(c.TAG_TRUE if value.value else c.TAG_FALSE, 1)
        return

    # Always 64-bit; the 32-bit float form is never emitted
    if isinstance(value, Float64):
        writer.write_uint(c.TAG_FLOAT64, 1)
        writer.write_float(value.value)
        return

    if isinstance(value, Bytes):
        _encode_bytes(writer, value.value)
        return

    if isinstance(value, (Array, Map)):
        if depth >= config.max_depth:
            log.debug("encode: nesting deeper than max_depth=%d", config.max_depth)
            raise DepthLimitError(config.max_depth)

        if isinstance(value, Array):
            _encode_length(writer, len(value.items), c.FIXARRAY, c.TAG_ARRAY16, c.TAG_ARRAY32)
            for item in value.items:
                _encode_value(writer, item, config, depth + 1)
        else:
            _encode_length(writer, len(value.pairs), c.FIXMAP, c.TAG_MAP16, c.TAG_MAP32)
            for key, item in value.pairs:
                _encode_value(writer, key, config, depth + 1)
                _encode_value(writer, item, config, depth + 1)
        return

    raise UnsupportedValueError(value)


def _encode_uint(writer: ByteWriter, n: int) -> None:
    if n < c.POSITIVE_FIXINT_LIMIT:
        writer.write_tag(*c.POSITIVE_FIXINT, n)
    elif n < c.UINT8_LIMIT:
        writer.write_uint(c.TAG_UINT8, 1)
        writer.write_uint(n, 1)
    elif n < c.UINT16_LIMIT:
        writer.write_uint(c.TAG_UINT16, 1)
        writer.write_uint(n, 2)
    elif n < c.UINT32_LIMIT:
        writer.write_uint(c.TAG_UINT32, 1)
        writer.write_uint(n, 4)
    else:
        writer.write_uint(c.TAG_UINT64, 1)
        writer.write_uint(n, 8)


def _encode_int(writer: ByteWriter, n: int) -> None:
    if n >= c.NEGATIVE_FIXINT_MIN:
        writer.write_tag(*c.NEGATIVE_FIXINT, n)
    elif n >= c.INT8_MIN:
        writer.write_uint(c.TAG_INT8, 1)
        writer.write_int(n, 1)
    elif n >= c.INT16_MIN:
        writer.write_uint(c.TAG_INT16, 1)
        writer.write_int(n, 2)
    elif n >= c.INT32_MIN:
        writer.write_uint(c.TAG_INT32, 1)
        writer.write_int(n, 4)
    else:
        writer.write_uint(c.TAG_INT64, 1)
        writer.write_int(n, 8)


def _encode_bytes(writer: ByteWriter, data: bytes) -> None:
    length = len(data)
    if length < c.FIXRAW_LIMIT:
        writer.write_tag(*c.FIXRAW, length)
    elif length < c.LENGTH16_LIMIT:
        writer.write_uint(c.TAG_RAW16, 1)
        writer.write_uint(length, 2)
    else:
        writer.write_uint(c.TAG_RAW32, 1)
        writer.write_uint(length, 4)
    writer.write_bytes(data)


def _encode_length(
    writer: ByteWriter, length: int, fix_form: tuple[int, int], tag16: int, tag32: int
) -> None:
    """Write the header of an array or map with the given element/pair count."""
    if length < c.FIXCONTAINER_LIMIT:
        writer.write_tag(*fix_form, length)
    elif length < c.LENGTH16_LIMIT:
        writer.write_uint(tag16, 1)
        writer.write_uint(length, 2)
    else:
        writer.write_uint(tag32, 1)
        writer.write_uint(length, 4)
