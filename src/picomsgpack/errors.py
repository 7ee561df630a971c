"""Exceptions raised while packing values into MessagePack."""

from __future__ import annotations


class PackError(ValueError):
    """Base class for every packing failure.

    Raised directly for text that cannot be encoded as UTF-8.
    """


class OutOfRangeError(PackError):
    """Magnitude or length is beyond the widest header of the value's family."""


class UnsupportedTypeError(PackError, TypeError):
    """The value (or a map key) matches no MessagePack family."""


class DepthLimitError(PackError):
    """Containers are nested deeper than the configured ``max_depth``."""


__all__: tuple[str, ...] = (
    "DepthLimitError",
    "OutOfRangeError",
    "PackError",
    "UnsupportedTypeError",
)
