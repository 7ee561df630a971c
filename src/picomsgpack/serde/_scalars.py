"""Scalar formats: nil, bool, int/uint ladders and IEEE-754 floats. Pure Python; cythonized at build time."""

from __future__ import annotations

import struct

from ..errors import OutOfRangeError

NIL = 0xC0
FALSE = 0xC2
TRUE = 0xC3
FLOAT32 = 0xCA
FLOAT64 = 0xCB
UINT8 = 0xCC
UINT16 = 0xCD
UINT32 = 0xCE
UINT64 = 0xCF
INT8 = 0xD0
INT16 = 0xD1
INT32 = 0xD2
INT64 = 0xD3

UINT64_MAX = 0xFFFFFFFFFFFFFFFF
INT64_MAX = 0x7FFFFFFFFFFFFFFF
INT64_MIN = -0x8000000000000000

_PACK_FLOAT32 = struct.Struct(">f").pack
_PACK_FLOAT64 = struct.Struct(">d").pack


def pack_nil(buf: bytearray) -> None:
    buf.append(NIL)


def pack_bool(value: bool, buf: bytearray) -> None:
    buf.append(TRUE if value else FALSE)


def pack_uint(n: int, buf: bytearray) -> None:
    """Append ``n`` using the narrowest unsigned form (positive fixint up to uint 64)."""
    if n < 0:
        raise OutOfRangeError(f"unsigned integer {n} is negative")
    if n <= 0x7F:
        buf.append(n)
    elif n <= 0xFF:
        buf.extend((UINT8, n))
    elif n <= 0xFFFF:
        buf.append(UINT16)
        buf.extend(n.to_bytes(2, "big"))
    elif n <= 0xFFFFFFFF:
        buf.append(UINT32)
        buf.extend(n.to_bytes(4, "big"))
    elif n <= UINT64_MAX:
        buf.append(UINT64)
        buf.extend(n.to_bytes(8, "big"))
    else:
        raise OutOfRangeError(f"integer {n} does not fit in uint 64")


def pack_int(n: int, buf: bytearray) -> None:
    """
    Append a signed 64-bit integer.

    Non-negative values go through the unsigned ladder; negative values use
    negative fixint, then int 8/16/32/64 in two's complement.
    """
    if n >= 0:
        if n > INT64_MAX:
            raise OutOfRangeError(f"integer {n} does not fit in int 64")
        pack_uint(n, buf)
    elif n >= -0x20:
        buf.append(n & 0xFF)
    elif n >= -0x80:
        buf.extend((INT8, n & 0xFF))
    elif n >= -0x8000:
        buf.append(INT16)
        buf.extend(n.to_bytes(2, "big", signed=True))
    elif n >= -0x80000000:
        buf.append(INT32)
        buf.extend(n.to_bytes(4, "big", signed=True))
    elif n >= INT64_MIN:
        buf.append(INT64)
        buf.extend(n.to_bytes(8, "big", signed=True))
    else:
        raise OutOfRangeError(f"integer {n} does not fit in int 64")


def pack_float32(x: float, buf: bytearray) -> None:
    try:
        payload = _PACK_FLOAT32(float(x))
    except OverflowError as exc:
        raise OutOfRangeError(f"{type(x).__name__} does not fit in float 32") from exc
    buf.append(FLOAT32)
    buf.extend(payload)


def pack_float64(x: float, buf: bytearray) -> None:
    try:
        payload = _PACK_FLOAT64(float(x))
    except OverflowError as exc:
        # int payload wider than a double
        raise OutOfRangeError(f"{type(x).__name__} does not fit in float 64") from exc
    buf.append(FLOAT64)
    buf.extend(payload)


__all__: tuple[str, ...] = (
    "pack_bool",
    "pack_float32",
    "pack_float64",
    "pack_int",
    "pack_nil",
    "pack_uint",
)
