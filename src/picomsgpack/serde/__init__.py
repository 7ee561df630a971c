"""Serialization (serde): msgpack pack and its wire-level encoders."""

from .msgpack_pack import Packer, msgpack_pack

__all__: tuple[str, ...] = ("Packer", "msgpack_pack")
