"""Unit tests for the value model and native conversion."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tagpack import (
    Array,
    Bool,
    Bytes,
    CodecConfig,
    DepthLimitError,
    Float64,
    Int,
    Map,
    Nil,
    UInt,
    UnsupportedValueError,
    to_python,
    to_value,
)


class TestValueModel:
    """Test variant construction and invariants."""

    def test_integer_sign_split(self) -> None:
        """Test Int holds only negatives and UInt only non-negatives."""
        assert Int(value=-1).value == -1
        assert UInt(value=0).value == 0

        with pytest.raises(ValidationError):
            Int(value=0)
        with pytest.raises(ValidationError):
            UInt(value=-1)

    def test_integer_ranges(self) -> None:
        """Test 64-bit range limits."""
        UInt(value=2**64 - 1)
        Int(value=-(2**63))

        with pytest.raises(ValidationError):
            UInt(value=2**64)
        with pytest.raises(ValidationError):
            Int(value=-(2**63) - 1)

    def test_strict_types(self) -> None:
        """Test bools and ints are not interchangeable."""
        with pytest.raises(ValidationError):
            UInt(value=True)
        with pytest.raises(ValidationError):
            Bool(value=1)
        with pytest.raises(ValidationError):
            Bytes(value="text")

    def test_frozen(self) -> None:
        """Test values are immutable."""
        value = UInt(value=1)

        with pytest.raises(ValidationError):
            value.value = 2  # type: ignore[misc]

    def test_hashable(self) -> None:
        """Test values can be used as dict keys."""
        seen = {UInt(value=1): "one", Bytes(value=b"k"): "k"}
        assert seen[UInt(value=1)] == "one"

    def test_containers_accept_lists(self) -> None:
        """Test container fields are normalized to tuples."""
        value = Array(items=[UInt(value=1), Nil()])
        assert value.items == (UInt(value=1), Nil())

        pairs = Map(pairs=[(Nil(), Nil())])
        assert pairs.pairs == ((Nil(), Nil()),)

    def test_discriminated_from_dicts(self) -> None:
        """Test nested variants can be validated from plain data."""
        value = Array.model_validate({"items": [{"kind": "uint", "value": 3}, {"kind": "nil"}]})
        assert value.items == (UInt(value=3), Nil())

    def test_kind_mismatch(self) -> None:
        """Test the discriminator rejects unknown kinds."""
        with pytest.raises(ValidationError):
            Array.model_validate({"items": [{"kind": "str", "value": "x"}]})


class TestToValue:
    """Test conversion from plain objects."""

    def test_scalars(self) -> None:
        """Test every scalar mapping."""
        assert to_value(None) == Nil()
        assert to_value(True) == Bool(value=True)
        assert to_value(0) == UInt(value=0)
        assert to_value(-5) == Int(value=-5)
        assert to_value(2.5) == Float64(value=2.5)
        assert to_value(b"x") == Bytes(value=b"x")
        assert to_value(bytearray(b"x")) == Bytes(value=b"x")
        assert to_value(memoryview(b"x")) == Bytes(value=b"x")

    def test_bool_is_not_int(self) -> None:
        """Test booleans map to Bool, not UInt."""
        assert to_value(False) == Bool(value=False)
        assert to_value([1, True]) == Array(items=(UInt(value=1), Bool(value=True)))

    def test_containers(self) -> None:
        """Test lists, tuples and dicts."""
        assert to_value((1, [2])) == Array(
            items=(UInt(value=1), Array(items=(UInt(value=2),)))
        )
        assert to_value({b"b": 1, b"a": 2}) == Map(
            pairs=(
                (Bytes(value=b"b"), UInt(value=1)),
                (Bytes(value=b"a"), UInt(value=2)),
            )
        )

    def test_values_pass_through(self) -> None:
        """Test Value instances are kept as they are."""
        value = UInt(value=9)
        assert to_value(value) is value
        assert to_value([value]).items[0] is value

    def test_unsupported(self) -> None:
        """Test objects with no Value equivalent."""
        with pytest.raises(UnsupportedValueError, match="str"):
            to_value("text")
        with pytest.raises(UnsupportedValueError, match="outside"):
            to_value(2**64)

    def test_depth_limit(self) -> None:
        """Test nesting guard."""
        with pytest.raises(DepthLimitError):
            to_value([[[]]], CodecConfig(max_depth=2))


class TestToPython:
    """Test conversion back to plain objects."""

    def test_round_trip(self) -> None:
        """Test plain objects survive a round trip."""
        obj = {b"depth": [1, -2, 3.5, None, True], 7: {b"x": b""}}
        assert to_python(to_value(obj)) == obj

    def test_unhashable_keys(self) -> None:
        """Test array and map keys become tuples."""
        value = Map(
            pairs=(
                (Array(items=(UInt(value=1), UInt(value=2))), Nil()),
                (Map(pairs=((UInt(value=1), Nil()),)), Bool(value=True)),
            )
        )
        assert to_python(value) == {(1, 2): None, ((1, None),): True}

    def test_duplicate_keys_last_wins(self) -> None:
        """Test duplicate keys collapse in plain dicts."""
        value = Map(pairs=((UInt(value=1), UInt(value=2)), (UInt(value=1), UInt(value=3))))
        assert to_python(value) == {1: 3}

    def test_not_a_value(self) -> None:
        """Test non-Value input."""
        with pytest.raises(TypeError, match="expected a Value"):
            to_python(1)  # type: ignore[arg-type]
