"""
str, bin, array and map headers. Pure Python; cythonized at build time.

Container bodies are not written here: the packer appends the header, then
walks the children itself.
"""

from __future__ import annotations

from operator import itemgetter

from ..errors import OutOfRangeError, PackError, UnsupportedTypeError

FIXSTR = 0xA0
STR8 = 0xD9
STR16 = 0xDA
STR32 = 0xDB
BIN8 = 0xC4
BIN16 = 0xC5
BIN32 = 0xC6
FIXARRAY = 0x90
ARRAY16 = 0xDC
ARRAY32 = 0xDD
FIXMAP = 0x80
MAP16 = 0xDE
MAP32 = 0xDF

_by_key = itemgetter(0)


def _pack_length(
    buf: bytearray,
    n: int,
    family: str,
    fix_base: int,
    fix_limit: int,
    tag8,
    tag16: int,
    tag32: int,
) -> None:
    """Shared length ladder: fix form below ``fix_limit``, then 8/16/32-bit lengths."""
    if n < fix_limit:
        buf.append(fix_base | n)
    elif tag8 is not None and n <= 0xFF:
        buf.extend((tag8, n))
    elif n <= 0xFFFF:
        buf.append(tag16)
        buf.extend(n.to_bytes(2, "big"))
    elif n <= 0xFFFFFFFF:
        buf.append(tag32)
        buf.extend(n.to_bytes(4, "big"))
    else:
        raise OutOfRangeError(f"{family} length {n} does not fit in 32 bits")


def pack_str(text: str, buf: bytearray) -> None:
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PackError(f"str is not valid UTF-8: {exc.reason}") from exc
    _pack_length(buf, len(data), "str", FIXSTR, 32, STR8, STR16, STR32)
    buf.extend(data)


def pack_bin(data: bytes, buf: bytearray) -> None:
    # no fix form: even b"" is c4 00
    _pack_length(buf, len(data), "bin", BIN8, 0, BIN8, BIN16, BIN32)
    buf.extend(data)


def pack_array_header(n: int, buf: bytearray) -> None:
    _pack_length(buf, n, "array", FIXARRAY, 16, None, ARRAY16, ARRAY32)


def pack_map_header(n: int, buf: bytearray) -> None:
    _pack_length(buf, n, "map", FIXMAP, 16, None, MAP16, MAP32)


def map_entries(entries, sort_keys: bool = True) -> list:
    """(key, value) pairs in emission order: ascending key unless ``sort_keys`` is off."""
    items = list(entries.items())
    # the mapping may have changed since the Map variant checked it
    for key, _ in items:
        if not isinstance(key, str):
            raise UnsupportedTypeError(f"map keys must be str, got {type(key).__name__}")
    if sort_keys:
        items.sort(key=_by_key)
    return items


__all__: tuple[str, ...] = (
    "map_entries",
    "pack_array_header",
    "pack_bin",
    "pack_map_header",
    "pack_str",
)
