"""Byte-level codecs for the packed metric tables."""

from afm_pack.codec.varint import MAX_VALUE, decode_varint, encode_varint, varint_size

__all__ = ["MAX_VALUE", "decode_varint", "encode_varint", "varint_size"]
