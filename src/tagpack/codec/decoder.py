"""Single-step binary decoder for tagpack values.

This module provides the decode() function, which reads one complete value
from the front of a buffer, and the container helpers it recurses through.
Truncated input is reported as NeedMoreInput, never as an error, so callers
can append bytes and retry.
"""

from __future__ import annotations

import logging
from typing import Union

from .. import constants as c
from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DepthLimitError
from ..models.value import FALSE, NIL, TRUE, Array, Bytes, Float64, Map, Value, integer
from .buffer import ByteReader
from .result import NEED_MORE, DecodeResult, Decoded, Malformed, NeedMoreInput

log = logging.getLogger(__name__)

_Outcome = Union[Value, NeedMoreInput, Malformed]

_RAW_TAGS = (c.TAG_RAW16, c.TAG_RAW32)
_ARRAY_TAGS = (c.TAG_ARRAY16, c.TAG_ARRAY32)


def decode(buf: bytes | bytearray | memoryview, config: CodecConfig | None = None) -> DecodeResult:
    """Decode one value from the front of a buffer.

    Args:
        buf: Buffer holding zero or more bytes of encoded data
        config: Codec configuration (max_depth applies)

    Returns:
        Decoded(value, rest) on success, NeedMoreInput if the buffer holds
        only part of a value (including an empty buffer), or Malformed if
        an unassigned tag byte is found anywhere inside the value

    Raises:
        DepthLimitError: If container nesting exceeds config.max_depth

    Examples:
        ```python
        from tagpack import decode

        decode(b"\\x93\\x01\\x02")   # NeedMoreInput()
        decode(b"\\x01\\xc0")        # Decoded(value=UInt(value=1), rest=b'\\xc0')
        decode(b"\\xc1")            # Malformed(data=b'\\xc1')
        ```
    """
    config = config or DEFAULT_CONFIG
    reader = ByteReader(buf)
    return _finish(reader, _decode_value(reader, config, 0))


def decode_array_items(
    buf: bytes | bytearray | memoryview, count: int, config: CodecConfig | None = None
) -> DecodeResult:
    """Decode exactly ``count`` consecutive values as an Array.

    Any NeedMoreInput or Malformed outcome from an element aborts the whole
    array with that same outcome; a partial array is never returned.

    Args:
        buf: Buffer starting at the first element
        count: Number of elements to decode
        config: Codec configuration

    Returns:
        Decoded(Array, rest), NeedMoreInput or Malformed
    """
    config = config or DEFAULT_CONFIG
    reader = ByteReader(buf)
    return _finish(reader, _decode_items(reader, count, config, 0))


def decode_map_pairs(
    buf: bytes | bytearray | memoryview, count: int, config: CodecConfig | None = None
) -> DecodeResult:
    """Decode exactly ``count`` consecutive key/value pairs as a Map.

    Pairs keep their encoded order and duplicate keys are kept. Outcomes
    propagate as for decode_array_items().

    Args:
        buf: Buffer starting at the first key
        count: Number of pairs (2 * count values) to decode
        config: Codec configuration

    Returns:
        Decoded(Map, rest), NeedMoreInput or Malformed
    """
    config = config or DEFAULT_CONFIG
    reader = ByteReader(buf)
    return _finish(reader, _decode_pairs(reader, count, config, 0))


def read_value(reader: ByteReader, config: CodecConfig | None = None) -> _Outcome:
    """Decode one value at the reader's position.

    On success the reader is left just past the value. After NeedMoreInput
    or Malformed its position is unspecified; callers seek back before retrying.

    Args:
        reader: ByteReader positioned at a tag byte
        config: Codec configuration

    Returns:
        The decoded value, NEED_MORE or Malformed
    """
    return _decode_value(reader, config or DEFAULT_CONFIG, 0)


def _finish(reader: ByteReader, outcome: _Outcome) -> DecodeResult:
    if isinstance(outcome, (NeedMoreInput, Malformed)):
        return outcome
    return Decoded(value=outcome, rest=reader.rest())


def _decode_value(reader: ByteReader, config: CodecConfig, depth: int) -> _Outcome:
    """Decode the value starting at the reader's position.

    Args:
        reader: ByteReader positioned at a tag byte
        config: Codec configuration
        depth: Nesting depth of the value (0 for the top-level value)

    Returns:
        The decoded value, NEED_MORE or Malformed
    """
    start = reader.position()
    try:
        tag = reader.read_byte()
    except IndexError:
        return NEED_MORE

    # Single-byte tags
    if tag == c.TAG_NIL:
        return NIL
    if tag == c.TAG_FALSE:
        return FALSE
    if tag == c.TAG_TRUE:
        return TRUE

    # Fixed-width numbers
    width = c.FIXED_WIDTHS.get(tag)
    if width is not None:
        try:
            return _decode_fixed(reader, tag, width)
        except IndexError:
            return NEED_MORE

    # Length-prefixed raw bytes, arrays and maps
    width = c.LENGTH_WIDTHS.get(tag)
    if width is not None:
        try:
            length = reader.read_uint(width)
        except IndexError:
            return NEED_MORE

        if tag in _RAW_TAGS:
            return _decode_raw(reader, length)
        if tag in _ARRAY_TAGS:
            return _decode_items(reader, length, config, depth)
        return _decode_pairs(reader, length, config, depth)

    # Compact forms
    if _matches(tag, c.POSITIVE_FIXINT):
        return integer(tag)
    if _matches(tag, c.NEGATIVE_FIXINT):
        return integer((tag & 0x1F) - 32)
    if _matches(tag, c.FIXRAW):
        return _decode_raw(reader, tag & 0x1F)
    if _matches(tag, c.FIXARRAY):
        return _decode_items(reader, tag & 0x0F, config, depth)
    if _matches(tag, c.FIXMAP):
        return _decode_pairs(reader, tag & 0x0F, config, depth)

    if tag in c.INVALID_TAGS:
        reader.seek(start)
        data = reader.rest()
        log.debug("decode: invalid tag 0x%02X at offset %d", tag, start)
        return Malformed(data=data)

    # Not recognizable with the bytes on hand
    return NEED_MORE


def _matches(tag: int, form: tuple[int, int]) -> bool:
    prefix, prefix_bits = form
    return tag >> (8 - prefix_bits) == prefix


def _decode_fixed(reader: ByteReader, tag: int, width: int) -> Value:
    """Decode the payload of a fixed-width numeric tag.

    Raises:
        IndexError: If the payload is truncated
    """
    if tag in (c.TAG_FLOAT32, c.TAG_FLOAT64):
        return Float64(value=reader.read_float(width))
    if tag >= c.TAG_INT8:
        return integer(reader.read_int(width))
    return integer(reader.read_uint(width))


def _decode_raw(reader: ByteReader, length: int) -> Bytes | NeedMoreInput:
    try:
        return Bytes(value=reader.read_bytes(length))
    except IndexError:
        return NEED_MORE


def _decode_items(
    reader: ByteReader, count: int, config: CodecConfig, depth: int
) -> Array | NeedMoreInput | Malformed:
    """Decode ``count`` elements of an array sitting at ``depth``."""
    _check_depth(config, depth)

    items: list[Value] = []
    for _ in range(count):
        outcome = _decode_value(reader, config, depth + 1)
        if isinstance(outcome, (NeedMoreInput, Malformed)):
            return outcome
        items.append(outcome)
    return Array(items=tuple(items))


def _decode_pairs(
    reader: ByteReader, count: int, config: CodecConfig, depth: int
) -> Map | NeedMoreInput | Malformed:
    """Decode ``count`` key/value pairs of a map sitting at ``depth``."""
    _check_depth(config, depth)

    pairs: list[tuple[Value, Value]] = []
    for _ in range(count):
        key = _decode_value(reader, config, depth + 1)
        if isinstance(key, (NeedMoreInput, Malformed)):
            return key
        item = _decode_value(reader, config, depth + 1)
        if isinstance(item, (NeedMoreInput, Malformed)):
            return item
        pairs.append((key, item))
    return Map(pairs=tuple(pairs))


def _check_depth(config: CodecConfig, depth: int) -> None:
    if depth >= config.max_depth:
        log.debug("decode: nesting deeper than max_depth=%d", config.max_depth)
        raise DepthLimitError(config.max_depth)
