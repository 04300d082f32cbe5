"""Shared packed kerning array.

All kerning pairs of a font live in one byte array. Each character that has
pairs stores a 16-bit offset into it; offset 0 means "no pairs", so the
first byte of the array is a placeholder and is never read.

A sub-list is laid out as::

    varint(count) ( varint(partner code point) signed-byte(delta) ) * count

Sub-lists are short (rarely more than 20 pairs), so lookups scan linearly.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from afm_pack.codec.varint import MAX_VALUE, decode_varint, encode_varint
from afm_pack.exceptions import EncodingRangeError, MalformedTableError

PLACEHOLDER = 0
NO_KERNING = 0


def _to_signed(byte: int) -> int:
    return byte - 256 if byte > 127 else byte


def encode_kerning_list(pairs: Sequence[tuple[int, int]]) -> bytes:
    """Encode one character's (partner, delta) pairs.

    Raises:
        MalformedTableError: If ``pairs`` is empty or holds a zero delta.
        EncodingRangeError: If a partner or delta does not fit.
    """
    if not pairs:
        raise MalformedTableError("kerning sub-list can not be empty")
    out = bytearray(encode_varint(len(pairs)))
    for partner, delta in pairs:
        if delta == 0:
            raise MalformedTableError(f"zero kerning delta for partner {partner}")
        if delta < -128 or delta > 127:
            raise EncodingRangeError(delta, "-128..127")
        out += encode_varint(partner)
        out.append(delta & 0xFF)
    return bytes(out)


def iter_kerning_list(data: bytes, index: int) -> Iterator[tuple[int, int]]:
    """Yield the (partner, delta) pairs of the sub-list at ``index``."""
    if index == NO_KERNING:
        return
    count, pos = decode_varint(data, index)
    for _ in range(count):
        partner, pos = decode_varint(data, pos)
        if pos >= len(data):
            raise MalformedTableError(f"kerning sub-list at {index} is truncated")
        yield partner, _to_signed(data[pos])
        pos += 1


def decode_kerning_list(data: bytes, index: int) -> list[tuple[int, int]]:
    """Decode and validate the sub-list at ``index``.

    Returns exactly ``count`` pairs.

    Raises:
        MalformedTableError: On a zero count, truncation, or a zero delta.
    """
    if index <= 0 or index >= len(data):
        raise MalformedTableError(f"kerning index {index} is outside the kerning data")
    count, _ = decode_varint(data, index)
    if count == 0:
        raise MalformedTableError(f"kerning sub-list at {index} is empty")
    pairs = list(iter_kerning_list(data, index))
    for partner, delta in pairs:
        if delta == 0:
            raise MalformedTableError(
                f"kerning sub-list at {index} has a zero delta for {partner}"
            )
    return pairs


def kerning_lookup(data: bytes, index: int, partner: int) -> int:
    """Return the delta code for ``partner`` in the sub-list at ``index``, or 0."""
    if index == NO_KERNING:
        return 0
    for code_point, delta in iter_kerning_list(data, index):
        if code_point == partner:
            return delta
    return 0


def pack_kerning_lists(
    lists: Sequence[Sequence[tuple[int, int]] | None],
) -> tuple[bytes, tuple[int, ...]]:
    """Pack per-character kerning lists into one shared array.

    Args:
        lists: One entry per character slot; ``None`` or an empty sequence
            means the character has no pairs.

    Returns:
        Tuple of (kerning data, per-slot indices). The data is empty when no
        slot has pairs.

    Raises:
        EncodingRangeError: If the array grows past the 16-bit offset range.
    """
    data = bytearray((PLACEHOLDER,))
    indices: list[int] = []
    for pairs in lists:
        if not pairs:
            indices.append(NO_KERNING)
            continue
        offset = len(data)
        if offset > MAX_VALUE:
            raise EncodingRangeError(offset)
        indices.append(offset)
        data += encode_kerning_list(pairs)
    if len(data) == 1:
        return b"", tuple(indices)
    return bytes(data), tuple(indices)
