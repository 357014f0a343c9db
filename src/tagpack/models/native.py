"""Conversion between plain Python objects and Value models."""

from __future__ import annotations

from typing import Any

from ..config import DEFAULT_CONFIG, CodecConfig
from ..constants import INT64_MIN, UINT64_MAX
from ..exceptions import DepthLimitError, UnsupportedValueError
from .value import (
    FALSE,
    NIL,
    TRUE,
    VALUE_TYPES,
    Array,
    Bytes,
    Float64,
    Map,
    Nil,
    Value,
    integer,
)


def to_value(obj: Any, config: CodecConfig | None = None) -> Value:
    """Convert a plain Python object to a Value.

    Mapping:
        - None -> Nil
        - bool -> Bool
        - int -> Int if negative, UInt otherwise
        - float -> Float64
        - bytes, bytearray, memoryview -> Bytes
        - list, tuple -> Array
        - dict -> Map, in insertion order

    Value instances are returned unchanged, and may be nested anywhere
    inside lists and dicts.

    Args:
        obj: Object to convert
        config: Codec configuration (max_depth applies)

    Returns:
        The equivalent Value

    Raises:
        UnsupportedValueError: If obj (or anything nested in it) has no Value equivalent
        DepthLimitError: If nesting exceeds config.max_depth
    """
    return _to_value(obj, config or DEFAULT_CONFIG, 0)


def _to_value(obj: Any, config: CodecConfig, depth: int) -> Value:
    if isinstance(obj, VALUE_TYPES):
        return obj

    if obj is None:
        return NIL

    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return TRUE if obj else FALSE

    if isinstance(obj, int):
        if obj < INT64_MIN or obj > UINT64_MAX:
            raise UnsupportedValueError(obj, f"integer {obj} outside [-2**63, 2**64 - 1]")
        return integer(obj)

    if isinstance(obj, float):
        return Float64(value=obj)

    if isinstance(obj, (bytes, bytearray, memoryview)):
        return Bytes(value=bytes(obj))

    if isinstance(obj, (list, tuple)):
        if depth >= config.max_depth:
            raise DepthLimitError(config.max_depth)
        return Array(items=tuple(_to_value(item, config, depth + 1) for item in obj))

    if isinstance(obj, dict):
        if depth >= config.max_depth:
            raise DepthLimitError(config.max_depth)
        return Map(
            pairs=tuple(
                (_to_value(k, config, depth + 1), _to_value(v, config, depth + 1))
                for k, v in obj.items()
            )
        )

    raise UnsupportedValueError(obj)


def to_python(value: Value) -> Any:
    """Convert a Value back to plain Python objects.

    Arrays become lists and maps become dicts. Map keys that are not
    hashable as plain objects (arrays, maps) are turned into tuples; when
    a map carries duplicate keys the last pair wins. Use the Map variant
    directly when duplicates or exact pair order matter.

    Args:
        value: Value to convert

    Returns:
        Plain Python object
    """
    if isinstance(value, Array):
        return [to_python(item) for item in value.items]

    if isinstance(value, Map):
        return {_to_key(k): to_python(v) for k, v in value.pairs}

    if isinstance(value, Nil):
        return None

    if isinstance(value, VALUE_TYPES):
        return value.value

    raise TypeError(f"expected a Value, got {type(value).__name__}")


def _to_key(value: Value) -> Any:
    if isinstance(value, Array):
        return tuple(_to_key(item) for item in value.items)

    if isinstance(value, Map):
        return tuple((_to_key(k), _to_key(v)) for k, v in value.pairs)

    return to_python(value)
