"""Packed metric tables for afm-pack.

This subpackage provides:
- The shared kerning array (encode, decode, lookup)
- The character table (direct ASCII slots, searched high characters)
- The ligature list
"""

from afm_pack.tables.characters import (
    FIRST_CHAR,
    LAST_CHAR,
    LOW_CHAR_COUNT,
    WIDTH_MISSING,
    WIDTH_SCALE,
    char_slot,
    find_high_slot,
)
from afm_pack.tables.kerning import (
    decode_kerning_list,
    encode_kerning_list,
    kerning_lookup,
    pack_kerning_lists,
)
from afm_pack.tables.ligatures import find_ligature

__all__ = [
    "FIRST_CHAR",
    "LAST_CHAR",
    "LOW_CHAR_COUNT",
    "WIDTH_MISSING",
    "WIDTH_SCALE",
    "char_slot",
    "find_high_slot",
    "decode_kerning_list",
    "encode_kerning_list",
    "kerning_lookup",
    "pack_kerning_lists",
    "find_ligature",
]
