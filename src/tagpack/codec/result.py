"""Outcome types for single-step decoding.

A decode call ends in exactly one of three ways, and callers driving a
buffering loop must tell them apart:

- Decoded: one complete value was read; ``rest`` holds the unconsumed bytes.
- NeedMoreInput: the buffer is a valid but incomplete prefix; append more
  bytes and call again.
- Malformed: the buffer contains a tag byte with no valid interpretation;
  waiting for more data will not help.

Example:
    ```python
    buffer = b""
    while True:
        buffer += transport.read()
        result = decode(buffer)
        if isinstance(result, NeedMoreInput):
            continue
        if isinstance(result, Malformed):
            raise MalformedDataError(result.data)
        handle(result.value)
        buffer = result.rest
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..models.value import Value


@dataclass(frozen=True)
class Decoded:
    """A complete value and the bytes that follow it."""

    value: Value
    rest: bytes


@dataclass(frozen=True)
class NeedMoreInput:
    """The buffer ends before the value does."""


@dataclass(frozen=True)
class Malformed:
    """An invalid tag byte was found.

    Attributes:
        data: The buffer contents starting at the offending tag byte
    """

    data: bytes


NEED_MORE = NeedMoreInput()

DecodeResult = Union[Decoded, NeedMoreInput, Malformed]
