"""Escape-coded variable-length integers.

Counts and code points in the packed kerning arrays are stored in one to
three bytes, favouring values below 254:

    1 .. 253      value + 1
    254 .. 509    0, value - 254
    0, 510 .. 65535  1, high byte, low byte

A one-byte ``value + 1`` for 0 would be the word escape itself, so 0 takes
the three-byte form. Single-byte encodings therefore lie in 2..254 and never
collide with either escape.
"""

from __future__ import annotations

from afm_pack.exceptions import EncodingRangeError, MalformedTableError

MAX_VALUE = 0xFFFF

_ESCAPE_BYTE = 0
_ESCAPE_WORD = 1
_BYTE_LIMIT = 254
_WORD_LIMIT = 510


def varint_size(value: int) -> int:
    """Return the number of bytes ``encode_varint(value)`` produces."""
    if value < 0 or value > MAX_VALUE:
        raise EncodingRangeError(value)
    if value == 0 or value >= _WORD_LIMIT:
        return 3
    if value < _BYTE_LIMIT:
        return 1
    return 2


def encode_varint(value: int) -> bytes:
    """Encode a 16-bit unsigned value.

    Raises:
        EncodingRangeError: If ``value`` is negative or above 65535.
    """
    if value < 0 or value > MAX_VALUE:
        raise EncodingRangeError(value)
    if value == 0 or value >= _WORD_LIMIT:
        return bytes((_ESCAPE_WORD, value >> 8, value & 0xFF))
    if value < _BYTE_LIMIT:
        return bytes((value + 1,))
    return bytes((_ESCAPE_BYTE, value - _BYTE_LIMIT))


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode one value starting at ``offset``.

    Returns:
        Tuple of (value, offset of the next byte).

    Raises:
        MalformedTableError: If the encoding runs past the end of ``data``.
    """
    if offset >= len(data):
        raise MalformedTableError(
            f"varint at offset {offset} is past the end of the data"
        )
    first = data[offset]
    if first == _ESCAPE_BYTE:
        if offset + 1 >= len(data):
            raise MalformedTableError(f"truncated varint at offset {offset}")
        return data[offset + 1] + _BYTE_LIMIT, offset + 2
    if first == _ESCAPE_WORD:
        if offset + 2 >= len(data):
            raise MalformedTableError(f"truncated varint at offset {offset}")
        return (data[offset + 1] << 8) | data[offset + 2], offset + 3
    return first - 1, offset + 1
