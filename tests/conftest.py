"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from tagpack import Array, Bool, Bytes, Map, Nil, UInt


@pytest.fixture
def sample_objects() -> list[Any]:
    """Mixed plain objects covering every value kind and most integer widths."""
    return [
        True,
        False,
        None,
        0,
        1,
        2,
        123,
        512,
        1230,
        678908,
        0xFFFFFFFFFF,
        -1,
        -23,
        -512,
        -1230,
        -567898,
        -0xFFFFFFFFFF,
        123.123,
        -234.4355,
        1.0e-34,
        1.0e64,
        [23, 234, 0.23],
        b"hogehoge",
        b"243546rf7g68h798j\x00\x17\xff",
        b"hoasfdafdas][",
        [0, 42, b"sum", [1, 2]],
        [1, 42, None, [3]],
        42,
    ]


@pytest.fixture
def ordered_map() -> Map:
    """Map whose pair order differs from any sorted order."""
    return Map(
        pairs=(
            (UInt(value=1), UInt(value=2)),
            (UInt(value=2), UInt(value=4)),
            (Bytes(value=b"hage"), UInt(value=324)),
            (UInt(value=43542), Array(items=(Nil(), Bool(value=True), Bool(value=False)))),
        )
    )
