"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of values
without actually encoding them.
"""

from __future__ import annotations

from typing import Any

from .. import constants as c
from ..config import DEFAULT_CONFIG, CodecConfig
from ..models.native import to_value
from ..models.value import Array, Bytes, Int, Map, UInt, Value


def encoded_size(value: Any, config: CodecConfig | None = None) -> int:
    """Calculate the encoded size of a value in bytes.

    The result always equals ``len(encode(value))``; form selection follows
    the same thresholds as the encoder.

    Args:
        value: Value instance, or plain Python object accepted by to_value()
        config: Codec configuration (max_depth applies)

    Returns:
        Size in bytes

    Raises:
        UnsupportedValueError: If value has no Value equivalent
        DepthLimitError: If container nesting exceeds config.max_depth

    Example:
        >>> encoded_size([1, 300, b"abc"])
        9  # 1 header + 1 + 3 + 4
    """
    config = config or DEFAULT_CONFIG
    return _size(to_value(value, config))


def _size(value: Value) -> int:
    if isinstance(value, UInt):
        return 1 + _uint_payload(value.value)

    if isinstance(value, Int):
        return 1 + _int_payload(value.value)

    if isinstance(value, Bytes):
        return _header_size(len(value.value), c.FIXRAW_LIMIT) + len(value.value)

    if isinstance(value, Array):
        return _header_size(len(value.items), c.FIXCONTAINER_LIMIT) + sum(
            _size(item) for item in value.items
        )

    if isinstance(value, Map):
        return _header_size(len(value.pairs), c.FIXCONTAINER_LIMIT) + sum(
            _size(k) + _size(v) for k, v in value.pairs
        )

    # Float64 carries an 8-byte payload; Nil and Bool are a lone tag
    return 9 if value.kind == "float64" else 1


def _uint_payload(n: int) -> int:
    if n < c.POSITIVE_FIXINT_LIMIT:
        return 0
    if n < c.UINT8_LIMIT:
        return 1
    if n < c.UINT16_LIMIT:
        return 2
    if n < c.UINT32_LIMIT:
        return 4
    return 8


def _int_payload(n: int) -> int:
    if n >= c.NEGATIVE_FIXINT_MIN:
        return 0
    if n >= c.INT8_MIN:
        return 1
    if n >= c.INT16_MIN:
        return 2
    if n >= c.INT32_MIN:
        return 4
    return 8


def _header_size(length: int, fix_limit: int) -> int:
    if length < fix_limit:
        return 1
    if length < c.LENGTH16_LIMIT:
        return 3
    return 5
