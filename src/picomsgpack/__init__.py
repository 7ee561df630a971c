"""
MessagePack packing: smallest header for every value, canonical map order.
Pure Python; the wire encoders are cythonized at build time.
"""

from .__about__ import __version__
from .config import PackOptions
from .errors import (DepthLimitError, OutOfRangeError, PackError,
                     UnsupportedTypeError)
from .serde import Packer, msgpack_pack
from .values import (NIL, Array, Bin, Bool, Float32, Float64, Int, Kind, Map,
                     Nil, Str, UInt, Value, as_value)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Serde
    "msgpack_pack",
    "Packer",
    "PackOptions",
    # Values: tagged union over the MessagePack families
    "Kind",
    "Value",
    "as_value",
    "NIL",
    "Nil",
    "Bool",
    "Int",
    "UInt",
    "Float32",
    "Float64",
    "Str",
    "Bin",
    "Array",
    "Map",
    # Errors
    "PackError",
    "OutOfRangeError",
    "UnsupportedTypeError",
    "DepthLimitError",
)
