"""Per-font character table.

Code points 32..126 are addressed directly: slot = code point - 32. Code
points above 126 that have data get a slot after those 95 entries and are
listed in ``highchars_index``, a tuple of (code point, slot) pairs sorted by
code point. Control characters below 32 are never stored.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

from afm_pack.codec.varint import MAX_VALUE
from afm_pack.exceptions import MalformedTableError

FIRST_CHAR = 32
LAST_CHAR = 126
LOW_CHAR_COUNT = LAST_CHAR - FIRST_CHAR + 1

# Width code meaning "no data for this slot"
WIDTH_MISSING = 0xFF
# Thousandths of em represented by one width or kerning step
WIDTH_SCALE = 1000.0 / 6

HighCharsIndex = Sequence[tuple[int, int]]


def find_high_slot(highchars_index: HighCharsIndex, code_point: int) -> int | None:
    """Binary-search ``highchars_index`` for ``code_point``.

    Returns:
        The slot of the code point, or None if it has no entry.
    """
    pos = bisect_left(highchars_index, (code_point,))
    if pos < len(highchars_index) and highchars_index[pos][0] == code_point:
        return highchars_index[pos][1]
    return None


def char_slot(highchars_index: HighCharsIndex, code_point: int) -> int | None:
    """Return the slot holding ``code_point``'s data, or None.

    None covers control characters, code points outside 16 bits, and code
    points above 126 without an entry.
    """
    if code_point < FIRST_CHAR or code_point > MAX_VALUE:
        return None
    if code_point <= LAST_CHAR:
        return code_point - FIRST_CHAR
    return find_high_slot(highchars_index, code_point)


def validate_character_table(
    widths: bytes,
    kerning_index: Sequence[int],
    highchars_index: HighCharsIndex,
) -> None:
    """Check the slot arrays and the high-character index.

    Raises:
        MalformedTableError: On any size, ordering or range violation.
    """
    for entry in highchars_index:
        if len(entry) != 2 or not all(isinstance(value, int) for value in entry):
            raise MalformedTableError(
                f"high character entry {entry!r} is not a (code point, slot) pair"
            )

    expected = LOW_CHAR_COUNT + len(highchars_index)
    if len(widths) != expected:
        raise MalformedTableError(
            f"expected {expected} width entries, found {len(widths)}"
        )
    if len(kerning_index) != expected:
        raise MalformedTableError(
            f"expected {expected} kerning index entries, found {len(kerning_index)}"
        )
    for index in kerning_index:
        if not isinstance(index, int):
            raise MalformedTableError(
                f"kerning index entry {index!r} is not an integer"
            )

    previous = LAST_CHAR
    for code_point, slot in highchars_index:
        if code_point <= previous:
            raise MalformedTableError(
                f"high character index is not strictly ascending at U+{code_point:04X}"
            )
        if code_point > MAX_VALUE:
            raise MalformedTableError(
                f"high character U+{code_point:X} does not fit 16 bits"
            )
        if slot < LOW_CHAR_COUNT or slot >= expected:
            raise MalformedTableError(
                f"slot {slot} for U+{code_point:04X} is out of range"
            )
        previous = code_point
