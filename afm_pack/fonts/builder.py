"""Build packed FontRecord tables from plain metrics.

This is the encoder side of the format: it takes widths and kerning values
in AFM units (thousandths of em), quantizes them to byte codes and lays out
the character, kerning and ligature tables.
"""

from __future__ import annotations

import logging

from afm_pack.codec.varint import MAX_VALUE
from afm_pack.exceptions import EncodingRangeError
from afm_pack.fonts.record import FontRecord
from afm_pack.tables.characters import (
    FIRST_CHAR,
    LAST_CHAR,
    LOW_CHAR_COUNT,
    WIDTH_MISSING,
    WIDTH_SCALE,
)
from afm_pack.tables.kerning import pack_kerning_lists

logger = logging.getLogger(__name__)


def quantize_width(width: float) -> int:
    """Convert an AFM width to a width code (0..254)."""
    code = round(width / WIDTH_SCALE)
    return max(0, min(WIDTH_MISSING - 1, code))


def quantize_kerning(delta: float) -> int:
    """Convert an AFM kerning value to a signed code (-128..127)."""
    code = round(delta / WIDTH_SCALE)
    return max(-128, min(127, code))


def _check_code_point(code_point: int) -> None:
    if code_point < 0 or code_point > MAX_VALUE:
        raise EncodingRangeError(code_point)


class FontBuilder:
    """Collects metrics for one font and packs them into a FontRecord."""

    def __init__(
        self,
        full_name: str,
        postscript_name: str = "",
        ascender: int = 0,
        descender: int = 0,
    ) -> None:
        self.full_name = full_name
        self.postscript_name = postscript_name or full_name.replace(" ", "-")
        self.ascender = ascender
        self.descender = descender
        self._widths: dict[int, int] = {}
        self._kerning: dict[int, dict[int, int]] = {}
        self._ligatures: dict[tuple[int, int], int] = {}

    def set_width(self, code_point: int, width: float) -> None:
        """Record an AFM width (thousandths of em) for ``code_point``."""
        self.set_width_code(code_point, quantize_width(width))

    def set_width_code(self, code_point: int, code: int) -> None:
        _check_code_point(code_point)
        if code < 0 or code >= WIDTH_MISSING:
            raise EncodingRangeError(code, f"0..{WIDTH_MISSING - 1}")
        if code_point < FIRST_CHAR:
            logger.debug(
                "%s: dropping control character U+%04X", self.full_name, code_point
            )
            return
        self._widths[code_point] = code

    def add_kerning(self, first: int, second: int, delta: float) -> None:
        """Record an AFM kerning value for the pair (``first``, ``second``)."""
        self.add_kerning_code(first, second, quantize_kerning(delta))

    def add_kerning_code(self, first: int, second: int, code: int) -> None:
        _check_code_point(first)
        _check_code_point(second)
        if code < -128 or code > 127:
            raise EncodingRangeError(code, "-128..127")
        if first < FIRST_CHAR or second < FIRST_CHAR:
            return
        pairs = self._kerning.setdefault(first, {})
        if code == 0:
            pairs.pop(second, None)
        else:
            pairs[second] = code

    def add_ligature(self, first: int, second: int, result: int) -> None:
        for code_point in (first, second, result):
            _check_code_point(code_point)
        self._ligatures[(first, second)] = result

    def build(self) -> FontRecord:
        """Pack the collected metrics.

        Returns:
            A validated FontRecord.

        Raises:
            EncodingRangeError: If the kerning data outgrows 16-bit offsets.
        """
        kerned = {cp for cp, pairs in self._kerning.items() if pairs}
        high_chars = sorted(
            code_point
            for code_point in set(self._widths) | kerned
            if code_point > LAST_CHAR
        )
        slot_chars = list(range(FIRST_CHAR, LAST_CHAR + 1)) + high_chars

        widths = bytes(
            self._widths.get(code_point, WIDTH_MISSING) for code_point in slot_chars
        )
        kerning_lists = [
            sorted(self._kerning.get(code_point, {}).items())
            for code_point in slot_chars
        ]
        kerning_data, kerning_index = pack_kerning_lists(kerning_lists)

        highchars_index = tuple(
            (code_point, LOW_CHAR_COUNT + i) for i, code_point in enumerate(high_chars)
        )
        ligatures = tuple(
            (first, second, result)
            for (first, second), result in sorted(self._ligatures.items())
        )

        missing = sum(1 for code in widths[:LOW_CHAR_COUNT] if code == WIDTH_MISSING)
        if missing:
            logger.debug(
                "%s: %d of %d ASCII characters have no width",
                self.full_name,
                missing,
                LOW_CHAR_COUNT,
            )

        return FontRecord(
            full_name=self.full_name,
            postscript_name=self.postscript_name,
            ascender=self.ascender,
            descender=abs(self.descender),
            widths=widths,
            kerning_index=kerning_index,
            kerning_data=kerning_data,
            highchars_index=highchars_index,
            ligatures=ligatures,
        )
