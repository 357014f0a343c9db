"""Binary codec for tagpack.

This module provides the encoder, the single-step decoder with its
three-way result type, and the stream splitting helpers.
"""

from __future__ import annotations

from .decoder import decode, decode_array_items, decode_map_pairs
from .encoder import encode
from .native import packb, unpackb
from .result import NEED_MORE, DecodeResult, Decoded, Malformed, NeedMoreInput
from .stream import StreamUnpacker, unpack_all

__all__ = [
    "encode",
    "decode",
    "decode_array_items",
    "decode_map_pairs",
    "unpack_all",
    "StreamUnpacker",
    "packb",
    "unpackb",
    "DecodeResult",
    "Decoded",
    "NeedMoreInput",
    "Malformed",
    "NEED_MORE",
]
