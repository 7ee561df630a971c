"""Tests for the value model, classification and packer options."""

from __future__ import annotations

import enum
from collections import OrderedDict

import pytest
from pydantic import ValidationError

from picomsgpack import (NIL, Array, Bin, Bool, Float32, Float64, Int, Kind,
                         Map, PackOptions, Str, UInt, UnsupportedTypeError,
                         as_value)


class Color(enum.IntEnum):
    RED = 1


@pytest.mark.parametrize(
    "obj, expected",
    [
        (None, NIL),
        (True, Bool(True)),
        (False, Bool(False)),
        (0, UInt(0)),
        (7, UInt(7)),
        (-7, Int(-7)),
        (1.25, Float64(1.25)),
        ("x", Str("x")),
        (b"x", Bin(b"x")),
        (bytearray(b"x"), Bin(b"x")),
        (memoryview(b"x"), Bin(b"x")),
        (Color.RED, UInt(1)),
    ],
)
def test_as_value_scalars(obj, expected) -> None:
    assert as_value(obj) == expected


def test_as_value_bool_is_not_int() -> None:
    assert as_value(True).kind is Kind.BOOL
    assert as_value(1).kind is Kind.UINT


def test_as_value_containers_are_shallow() -> None:
    inner = [1, 2]
    value = as_value([inner, "a"])
    assert value.kind is Kind.ARRAY
    assert value.items[0] is inner
    mapping = OrderedDict(a=inner)
    value = as_value(mapping)
    assert value.kind is Kind.MAP
    assert value.entries is mapping


def test_as_value_returns_variants_unchanged() -> None:
    value = Float32(0.5)
    assert as_value(value) is value


@pytest.mark.parametrize("obj", [object(), {1, 2}, 1j, range(3), Kind.NIL])
def test_as_value_unsupported(obj) -> None:
    with pytest.raises(UnsupportedTypeError):
        as_value(obj)


@pytest.mark.parametrize(
    "factory, payload",
    [
        (Bool, 1),
        (Int, True),
        (UInt, 1.0),
        (Float32, "1.0"),
        (Float64, False),
        (Str, b"x"),
        (Bin, "x"),
        (Bin, bytearray(b"x")),
        (Array, {"a": 1}),
        (Map, [("a", 1)]),
    ],
)
def test_variants_reject_wrong_payload(factory, payload) -> None:
    with pytest.raises(UnsupportedTypeError):
        factory(payload)


def test_map_keys_must_be_strings() -> None:
    with pytest.raises(UnsupportedTypeError):
        Map({"a": 1, 2: "b"})
    with pytest.raises(UnsupportedTypeError):
        as_value({None: 1})


def test_variant_kinds() -> None:
    assert {type(v).kind for v in (NIL, Bool(True), Int(-1), UInt(1))} == {
        Kind.NIL,
        Kind.BOOL,
        Kind.INT,
        Kind.UINT,
    }
    assert Array([]).kind is Kind.ARRAY
    assert Map({}).kind is Kind.MAP


def test_pack_options_defaults() -> None:
    options = PackOptions()
    assert options.max_depth == 512
    assert options.sort_keys is True


@pytest.mark.parametrize("kwargs", [{"max_depth": 0}, {"max_depth": -1}, {"unknown": 1}])
def test_pack_options_validation(kwargs) -> None:
    with pytest.raises(ValidationError):
        PackOptions(**kwargs)


def test_pack_options_frozen() -> None:
    options = PackOptions()
    with pytest.raises(ValidationError):
        options.max_depth = 3
