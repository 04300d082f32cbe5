"""Per-font ligature list.

Fonts that have ligatures rarely have more than "fi", "fl" and "ffl", so the
table is a flat tuple of (first, second, result) triples searched linearly.
Ligatures never change computed string widths.
"""

from __future__ import annotations

from collections.abc import Sequence

from afm_pack.codec.varint import MAX_VALUE
from afm_pack.exceptions import MalformedTableError

Ligature = tuple[int, int, int]


def find_ligature(ligatures: Sequence[Ligature], first: int, second: int) -> int | None:
    """Return the code point replacing ``first`` followed by ``second``, or None."""
    for lig_first, lig_second, result in ligatures:
        if lig_first == first and lig_second == second:
            return result
    return None


def validate_ligatures(ligatures: Sequence[Ligature]) -> None:
    seen: set[tuple[int, int]] = set()
    for entry in ligatures:
        if len(entry) != 3 or not all(isinstance(value, int) for value in entry):
            raise MalformedTableError(f"ligature entry {entry!r} is not a triple")
        if any(value < 0 or value > MAX_VALUE for value in entry):
            raise MalformedTableError(f"ligature entry {entry!r} does not fit 16 bits")
        if entry[:2] in seen:
            raise MalformedTableError(f"duplicate ligature for pair {entry[:2]!r}")
        seen.add(entry[:2])
