"""msgpack pack (nil, bool, int, float, str, bin, array, map). Canonical map order by default."""

from __future__ import annotations

from typing import Any, Optional

from structlog import get_logger

from ..config import PackOptions
from ..errors import DepthLimitError, PackError, UnsupportedTypeError
from ..values import Kind, as_value
from ._composites import (map_entries, pack_array_header, pack_bin,
                          pack_map_header, pack_str)
from ._scalars import (pack_bool, pack_float32, pack_float64, pack_int,
                       pack_nil, pack_uint)

logger = get_logger()


class Packer:
    """
    Packs one value per call into a fresh ``bytes`` object.

    Nested containers are walked with an explicit stack instead of recursion,
    so nesting depth is bounded by ``options.max_depth`` and not by the
    interpreter's recursion limit. A Packer holds no per-call state and can be
    shared between threads.
    """

    def __init__(self, options: Optional[PackOptions] = None) -> None:
        self.options = options if options is not None else PackOptions()
        self.log = logger.new(
            max_depth=self.options.max_depth, sort_keys=self.options.sort_keys
        )

    def pack(self, obj: Any) -> bytes:
        buf = bytearray()
        try:
            self._pack_into(obj, buf)
        except PackError as exc:
            self.log.debug("pack rejected", error=type(exc).__name__, reason=str(exc))
            raise
        return bytes(buf)

    def _pack_into(self, obj: Any, buf: bytearray) -> None:
        max_depth = self.options.max_depth
        sort_keys = self.options.sort_keys
        # (item, depth of the container holding it); popped in wire order
        stack: list[tuple[Any, int]] = [(obj, 0)]
        while stack:
            item, depth = stack.pop()
            value = as_value(item)
            kind = value.kind
            if kind is Kind.NIL:
                pack_nil(buf)
            elif kind is Kind.BOOL:
                pack_bool(value.value, buf)
            elif kind is Kind.UINT:
                pack_uint(value.value, buf)
            elif kind is Kind.INT:
                pack_int(value.value, buf)
            elif kind is Kind.FLOAT32:
                pack_float32(value.value, buf)
            elif kind is Kind.FLOAT64:
                pack_float64(value.value, buf)
            elif kind is Kind.STR:
                pack_str(value.value, buf)
            elif kind is Kind.BIN:
                pack_bin(value.value, buf)
            elif kind is Kind.ARRAY:
                depth = _enter(depth, max_depth)
                items = value.items
                pack_array_header(len(items), buf)
                stack.extend((child, depth) for child in reversed(items))
            elif kind is Kind.MAP:
                depth = _enter(depth, max_depth)
                entries = map_entries(value.entries, sort_keys)
                pack_map_header(len(entries), buf)
                for key, child in reversed(entries):
                    stack.append((child, depth))
                    stack.append((key, depth))
            else:
                raise UnsupportedTypeError(f"no encoder for kind {kind!r}")


def _enter(depth: int, max_depth: int) -> int:
    depth += 1
    if depth > max_depth:
        raise DepthLimitError(f"containers nested deeper than {max_depth}")
    return depth


_default_packer = Packer()


def msgpack_pack(obj: Any, options: Optional[PackOptions] = None) -> bytes:
    """
    Pack ``obj`` into MessagePack bytes.

    Args:
        obj: None, bool, int, float, str, bytes-like, list/tuple, dict with str
            keys, or any ``picomsgpack.values`` variant, nested freely.
        options: Packer options; defaults to ``PackOptions()``.

    Returns:
        The encoded bytes.

    Raises:
        OutOfRangeError: a number, length or count exceeds its widest format.
        UnsupportedTypeError: an object (or map key) matches no format.
        DepthLimitError: nesting exceeds ``options.max_depth``.
        PackError: text is not valid UTF-8.
    """
    packer = _default_packer if options is None else Packer(options)
    return packer.pack(obj)


__all__: tuple[str, ...] = ("Packer", "msgpack_pack")
