"""Immutable per-font metric record."""

from __future__ import annotations

from dataclasses import dataclass

from afm_pack.codec.varint import MAX_VALUE
from afm_pack.exceptions import MalformedTableError
from afm_pack.tables.characters import validate_character_table
from afm_pack.tables.kerning import PLACEHOLDER, decode_kerning_list
from afm_pack.tables.ligatures import Ligature, validate_ligatures


@dataclass(frozen=True)
class FontRecord:
    """Packed metrics of one font.

    Attributes:
        full_name: Registry key, e.g. "Helvetica Bold Oblique".
        postscript_name: e.g. "Helvetica-BoldOblique".
        ascender: Ascender in thousandths of em.
        descender: Descender magnitude in thousandths of em.
        widths: One width code per slot (95 direct slots, then high slots).
        kerning_index: One offset into ``kerning_data`` per slot, 0 for none.
        kerning_data: Shared packed kerning sub-lists.
        highchars_index: (code point, slot) pairs sorted by code point.
        ligatures: (first, second, result) triples.

    Construction validates the packed layout and raises
    MalformedTableError on any violation.
    """

    full_name: str
    postscript_name: str
    ascender: int
    descender: int
    widths: bytes
    kerning_index: tuple[int, ...]
    kerning_data: bytes = b""
    highchars_index: tuple[tuple[int, int], ...] = ()
    ligatures: tuple[Ligature, ...] = ()

    def __post_init__(self) -> None:
        # Normalise list inputs so the record stays hashable and read-only
        try:
            object.__setattr__(self, "widths", bytes(self.widths))
            object.__setattr__(self, "kerning_data", bytes(self.kerning_data))
            object.__setattr__(self, "kerning_index", tuple(self.kerning_index))
            object.__setattr__(
                self,
                "highchars_index",
                tuple(tuple(entry) for entry in self.highchars_index),
            )
            object.__setattr__(
                self, "ligatures", tuple(tuple(entry) for entry in self.ligatures)
            )
        except (TypeError, ValueError) as e:
            raise MalformedTableError(
                f"invalid table value: {e}", font=self.full_name
            ) from e
        try:
            self._validate()
        except MalformedTableError as e:
            raise MalformedTableError(e.reason, font=self.full_name) from e

    @property
    def highchars_count(self) -> int:
        return len(self.highchars_index)

    @property
    def ligatures_count(self) -> int:
        return len(self.ligatures)

    @property
    def kerning_pair_count(self) -> int:
        return sum(
            len(decode_kerning_list(self.kerning_data, index))
            for index in self.kerning_index
            if index
        )

    def _validate(self) -> None:
        if not isinstance(self.full_name, str) or not self.full_name:
            raise MalformedTableError("font has no full name")
        if not isinstance(self.postscript_name, str):
            raise MalformedTableError(
                f"PostScript name must be a string, got {self.postscript_name!r}"
            )
        for label, value in (
            ("ascender", self.ascender),
            ("descender", self.descender),
        ):
            if not isinstance(value, int):
                raise MalformedTableError(f"{label} must be an integer, got {value!r}")
            if value < 0 or value > MAX_VALUE:
                raise MalformedTableError(f"{label} {value} does not fit 16 bits")

        validate_character_table(self.widths, self.kerning_index, self.highchars_index)

        referenced = [index for index in self.kerning_index if index]
        if referenced and not self.kerning_data:
            raise MalformedTableError("kerning index is set but kerning data is empty")
        if self.kerning_data and not referenced:
            raise MalformedTableError(
                "kerning data is present but no character references it"
            )
        if self.kerning_data and self.kerning_data[0] != PLACEHOLDER:
            raise MalformedTableError("first kerning byte must be the placeholder")
        for index in referenced:
            if index < 0 or index > MAX_VALUE:
                raise MalformedTableError(f"kerning index {index} does not fit 16 bits")
            decode_kerning_list(self.kerning_data, index)

        validate_ligatures(self.ligatures)
