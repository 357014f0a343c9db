"""tagpack: Compact Self-Describing Binary Codec

A Python library for encoding nil, booleans, integers, doubles, byte strings,
arrays and maps into a compact tagged binary format, and decoding them back.
Decoding is incremental: a truncated buffer yields NeedMoreInput rather than
an error, so transport code can append bytes and retry.

Key Features:
- Pydantic-based immutable value model
- Smallest-form encoding selected by magnitude and length
- Three-way decode result: Decoded / NeedMoreInput / Malformed
- Bounded recursion on untrusted input

Quick Start:
    >>> from tagpack import UInt, Array, Nil, encode, decode
    >>>
    >>> data = encode(Array(items=(UInt(value=42), Nil())))
    >>> result = decode(data)
    >>> result.value
    Array(kind='array', items=(UInt(kind='uint', value=42), Nil(kind='nil')))
    >>> result.rest
    b''
"""

from __future__ import annotations

from .codec import (
    NEED_MORE,
    DecodeResult,
    Decoded,
    Malformed,
    NeedMoreInput,
    StreamUnpacker,
    decode,
    decode_array_items,
    decode_map_pairs,
    encode,
    packb,
    unpack_all,
    unpackb,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    BufferFullError,
    DecodeError,
    DepthLimitError,
    EncodeError,
    IncompleteDataError,
    MalformedDataError,
    TagpackError,
    UnsupportedValueError,
)
from .models import (
    Array,
    Bool,
    Bytes,
    Float64,
    Int,
    Map,
    Nil,
    UInt,
    Value,
    to_python,
    to_value,
)
from .utils import encoded_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_array_items",
    "decode_map_pairs",
    "unpack_all",
    "StreamUnpacker",
    # Decode results
    "DecodeResult",
    "Decoded",
    "NeedMoreInput",
    "Malformed",
    "NEED_MORE",
    # Value model
    "Value",
    "Nil",
    "Bool",
    "Int",
    "UInt",
    "Float64",
    "Bytes",
    "Array",
    "Map",
    # Native objects
    "to_value",
    "to_python",
    "packb",
    "unpackb",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "TagpackError",
    "EncodeError",
    "UnsupportedValueError",
    "DecodeError",
    "MalformedDataError",
    "IncompleteDataError",
    "BufferFullError",
    "DepthLimitError",
    # Sizing
    "encoded_size",
    # Version
    "__version__",
]
