"""Value model: the closed set of shapes the codec can carry.

Every encodable value is one of eight frozen pydantic models, discriminated
by their ``kind`` field. ``Value`` is the tagged union over all of them and
is what the encoder accepts and the decoder produces.

Example:
    >>> from tagpack.models import Array, Bool, Nil, UInt
    >>> v = Array(items=(UInt(value=1), Nil(), Bool(value=True)))
    >>> v.items[0]
    UInt(kind='uint', value=1)
"""

from __future__ import annotations

from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from ..constants import INT64_MIN, MAX_LENGTH, UINT64_MAX


class _ValueModel(BaseModel):
    """Shared configuration for all Value variants."""

    model_config = ConfigDict(
        # Values are immutable once constructed
        frozen=True,
        extra="forbid",
    )


class Nil(_ValueModel):
    """The nil value."""

    kind: Literal["nil"] = "nil"


class Bool(_ValueModel):
    """A boolean."""

    kind: Literal["bool"] = "bool"
    value: bool = Field(strict=True)


class Int(_ValueModel):
    """A negative integer in [-2**63, -1].

    Non-negative integers are always carried as UInt; constructing an Int
    with a value >= 0 fails validation.
    """

    kind: Literal["int"] = "int"
    value: int = Field(strict=True, ge=INT64_MIN, le=-1)


class UInt(_ValueModel):
    """A non-negative integer in [0, 2**64 - 1]."""

    kind: Literal["uint"] = "uint"
    value: int = Field(strict=True, ge=0, le=UINT64_MAX)


class Float64(_ValueModel):
    """An IEEE-754 double."""

    kind: Literal["float64"] = "float64"
    value: float = Field(strict=True)


class Bytes(_ValueModel):
    """An opaque byte string."""

    kind: Literal["bytes"] = "bytes"
    value: bytes = Field(strict=True, max_length=MAX_LENGTH)


class Array(_ValueModel):
    """An ordered sequence of values."""

    kind: Literal["array"] = "array"
    items: Tuple[Value, ...] = Field(default=(), max_length=MAX_LENGTH)


class Map(_ValueModel):
    """An ordered sequence of key/value pairs.

    Keys need not be unique and pair order is preserved exactly; map
    semantics are left to the caller.
    """

    kind: Literal["map"] = "map"
    pairs: Tuple[Tuple[Value, Value], ...] = Field(default=(), max_length=MAX_LENGTH)


Value = Annotated[
    Union[Nil, Bool, Int, UInt, Float64, Bytes, Array, Map],
    Field(discriminator="kind"),
]

VALUE_TYPES = (Nil, Bool, Int, UInt, Float64, Bytes, Array, Map)

Array.model_rebuild()
Map.model_rebuild()

NIL = Nil()
TRUE = Bool(value=True)
FALSE = Bool(value=False)


def integer(n: int) -> Union[Int, UInt]:
    """Wrap a Python int in the variant the wire format requires for it."""
    if n < 0:
        return Int(value=n)
    return UInt(value=n)
