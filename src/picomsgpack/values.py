"""
Value model: one frozen dataclass per MessagePack family, tagged with ``Kind``.

Native Python objects are mapped onto these variants by ``as_value``. The
mapping is shallow: an ``Array`` or ``Map`` keeps its children as given and
the packer classifies them one level at a time while it walks the tree.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Union

from .errors import UnsupportedTypeError


class Kind(enum.Enum):
    NIL = "nil"
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STR = "str"
    BIN = "bin"
    ARRAY = "array"
    MAP = "map"


def _expect(value: Any, types: tuple[type, ...], variant: str) -> None:
    # bool is an int subclass; it never counts as a number here
    if isinstance(value, bool) and bool not in types:
        raise UnsupportedTypeError(f"{variant} does not accept bool")
    if not isinstance(value, types):
        raise UnsupportedTypeError(
            f"{variant} does not accept {type(value).__name__}"
        )


@dataclass(frozen=True)
class Nil:
    kind: ClassVar[Kind] = Kind.NIL


@dataclass(frozen=True)
class Bool:
    value: bool
    kind: ClassVar[Kind] = Kind.BOOL

    def __post_init__(self) -> None:
        _expect(self.value, (bool,), "Bool")


@dataclass(frozen=True)
class Int:
    """Signed 64-bit integer. Non-negative values take the unsigned ladder."""

    value: int
    kind: ClassVar[Kind] = Kind.INT

    def __post_init__(self) -> None:
        _expect(self.value, (int,), "Int")


@dataclass(frozen=True)
class UInt:
    """Unsigned 64-bit integer."""

    value: int
    kind: ClassVar[Kind] = Kind.UINT

    def __post_init__(self) -> None:
        _expect(self.value, (int,), "UInt")


@dataclass(frozen=True)
class Float32:
    """Single precision float; packed as the nearest IEEE-754 binary32."""

    value: float
    kind: ClassVar[Kind] = Kind.FLOAT32

    def __post_init__(self) -> None:
        _expect(self.value, (float, int), "Float32")


@dataclass(frozen=True)
class Float64:
    value: float
    kind: ClassVar[Kind] = Kind.FLOAT64

    def __post_init__(self) -> None:
        _expect(self.value, (float, int), "Float64")


@dataclass(frozen=True)
class Str:
    value: str
    kind: ClassVar[Kind] = Kind.STR

    def __post_init__(self) -> None:
        _expect(self.value, (str,), "Str")


@dataclass(frozen=True)
class Bin:
    value: bytes
    kind: ClassVar[Kind] = Kind.BIN

    def __post_init__(self) -> None:
        _expect(self.value, (bytes,), "Bin")


@dataclass(frozen=True)
class Array:
    """Ordered elements; each is a variant or a native object."""

    items: Sequence[Any]
    kind: ClassVar[Kind] = Kind.ARRAY

    def __post_init__(self) -> None:
        _expect(self.items, (list, tuple), "Array")


@dataclass(frozen=True)
class Map:
    """String-keyed entries; values are variants or native objects."""

    entries: Mapping[str, Any]
    kind: ClassVar[Kind] = Kind.MAP

    def __post_init__(self) -> None:
        _expect(self.entries, (Mapping,), "Map")
        for key in self.entries:
            if not isinstance(key, str):
                raise UnsupportedTypeError(
                    f"map keys must be str, got {type(key).__name__}"
                )


Value = Union[Nil, Bool, Int, UInt, Float32, Float64, Str, Bin, Array, Map]

VARIANTS: tuple[type, ...] = (
    Nil,
    Bool,
    Int,
    UInt,
    Float32,
    Float64,
    Str,
    Bin,
    Array,
    Map,
)

NIL = Nil()


def _from_int(obj: int) -> Value:
    return UInt(int(obj)) if obj >= 0 else Int(int(obj))


# Keyed by exact type; subclasses resolve through their MRO so the most
# specific registered base wins (bool before int, OrderedDict -> dict).
_NATIVE: dict[type, Callable[[Any], Value]] = {
    type(None): lambda obj: NIL,
    bool: lambda obj: Bool(bool(obj)),
    int: _from_int,
    float: lambda obj: Float64(float(obj)),
    str: Str,
    bytes: lambda obj: Bin(bytes(obj)),
    bytearray: lambda obj: Bin(bytes(obj)),
    memoryview: lambda obj: Bin(obj.tobytes()),
    list: Array,
    tuple: Array,
    dict: Map,
}


def as_value(obj: Any) -> Value:
    """
    Classify ``obj`` into exactly one variant.

    Variants are returned unchanged. Raises UnsupportedTypeError when no
    family matches, or when a dict has a non-string key.
    """
    if isinstance(obj, VARIANTS):
        return obj
    for base in type(obj).__mro__:
        factory = _NATIVE.get(base)
        if factory is not None:
            return factory(obj)
    raise UnsupportedTypeError(f"cannot pack object of type {type(obj).__name__}")


__all__: tuple[str, ...] = (
    "Array",
    "Bin",
    "Bool",
    "Float32",
    "Float64",
    "Int",
    "Kind",
    "Map",
    "NIL",
    "Nil",
    "Str",
    "UInt",
    "Value",
    "VARIANTS",
    "as_value",
)
