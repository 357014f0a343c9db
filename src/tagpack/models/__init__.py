"""Value model for tagpack.

This module provides the eight Value variants and conversion to and from
plain Python objects.
"""

from __future__ import annotations

from .native import to_python, to_value
from .value import (
    FALSE,
    NIL,
    TRUE,
    VALUE_TYPES,
    Array,
    Bool,
    Bytes,
    Float64,
    Int,
    Map,
    Nil,
    UInt,
    Value,
    integer,
)

__all__ = [
    "Value",
    "VALUE_TYPES",
    "Nil",
    "Bool",
    "Int",
    "UInt",
    "Float64",
    "Bytes",
    "Array",
    "Map",
    "NIL",
    "TRUE",
    "FALSE",
    "integer",
    "to_value",
    "to_python",
]
