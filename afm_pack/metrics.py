"""Metrics engine: width, kerning and ligature queries over packed fonts.

Widths and kerning deltas are returned in thousandths of em. String widths
are returned in device units (thousandths of em scaled by font size / 1000).

The engine holds no mutable state, so one instance can serve any number of
threads.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from afm_pack.config import Config
from afm_pack.fonts.record import FontRecord
from afm_pack.fonts.registry import FontRegistry
from afm_pack.tables.characters import WIDTH_MISSING, WIDTH_SCALE, char_slot
from afm_pack.tables.kerning import kerning_lookup
from afm_pack.tables.ligatures import find_ligature

_SPACE_SLOT = 0
_TAB = 0x09


class MetricsEngine:
    """Query surface over a FontRegistry.

    Example:
        >>> engine = MetricsEngine(load_default_catalog())
        >>> engine.string_width("Courier", "Hello", 12)
    """

    def __init__(self, registry: FontRegistry, config: Config | None = None) -> None:
        self.registry = registry
        self.config = config or Config()

    def lookup_font(self, full_name: str) -> FontRecord:
        """Return the font named ``full_name``; raises FontNotFoundError."""
        return self.registry.lookup(full_name)

    def _resolve(self, font: FontRecord | str) -> FontRecord:
        if isinstance(font, FontRecord):
            return font
        return self.registry.lookup(font)

    def _default_code(self, font: FontRecord) -> int:
        if self.config.default_width == "zero":
            return 0
        code = font.widths[_SPACE_SLOT]
        return 0 if code == WIDTH_MISSING else code

    def _width_code(self, font: FontRecord, slot: int | None) -> int:
        if slot is None:
            return self._default_code(font)
        code = font.widths[slot]
        if code == WIDTH_MISSING:
            return self._default_code(font)
        return code

    def _kerning_code(self, font: FontRecord, slot: int | None, next_char: int) -> int:
        if slot is None or not font.kerning_data:
            return 0
        return kerning_lookup(font.kerning_data, font.kerning_index[slot], next_char)

    def char_width(self, font: FontRecord | str, code_point: int) -> float:
        """Width of ``code_point`` in thousandths of em.

        Characters without data resolve through the default-width policy.
        """
        font = self._resolve(font)
        slot = char_slot(font.highchars_index, code_point)
        return self._width_code(font, slot) * WIDTH_SCALE

    def kern_delta(self, font: FontRecord | str, first: int, second: int) -> float:
        """Kerning adjustment for ``first`` followed by ``second``, 0.0 if none."""
        font = self._resolve(font)
        slot = char_slot(font.highchars_index, first)
        return self._kerning_code(font, slot, second) * WIDTH_SCALE

    def ligature(self, font: FontRecord | str, first: int, second: int) -> int | None:
        """Code point of the ligature for the pair, or None."""
        font = self._resolve(font)
        return find_ligature(font.ligatures, first, second)

    def _units(self, font: FontRecord, code_points: list[int]) -> int:
        # Sum of width and kerning codes; scaling is applied once by the caller
        total = 0
        last = len(code_points) - 1
        for i, code_point in enumerate(code_points):
            slot = char_slot(font.highchars_index, code_point)
            total += self._width_code(font, slot)
            if i < last:
                total += self._kerning_code(font, slot, code_points[i + 1])
        return total

    def string_width(
        self,
        font: FontRecord | str,
        code_points: str | Iterable[int],
        font_size: float,
    ) -> float:
        """Width of a string in device units.

        Adds each character's width and the kerning between adjacent
        characters. Ligatures are not applied.

        Args:
            font: FontRecord or full font name.
            code_points: A str or an iterable of code points.
            font_size: Font size in device units.

        Raises:
            FontNotFoundError: If ``font`` names an unknown font.
        """
        font = self._resolve(font)
        if isinstance(code_points, str):
            chars = [ord(ch) for ch in code_points]
        else:
            chars = list(code_points)
        if not chars:
            return 0.0
        return self._units(font, chars) * WIDTH_SCALE * font_size / 1000.0

    def text_width(
        self,
        font: FontRecord | str,
        text: str,
        font_size: float,
        tab_width: float | None = None,
        start: float = 0.0,
    ) -> float:
        """Width of ``text`` in device units, honouring tab stops.

        A tab advances to the next multiple of ``tab_width`` counted from
        ``start`` (the position of the text within its line). Kerning never
        spans a tab. A tab width of 0 treats tabs as control characters.

        Raises:
            ValueError: If ``tab_width`` is negative.
        """
        font = self._resolve(font)
        if tab_width is None:
            tab_width = self.config.tab_width
        if tab_width < 0:
            raise ValueError(f"tab_width must not be negative, got {tab_width}")
        if not tab_width:
            return self.string_width(font, text, font_size)

        width = 0.0
        for i, segment in enumerate(text.split(chr(_TAB))):
            if i:
                position = start + width
                stop = math.floor(position / tab_width + 1e-9) + 1
                width = stop * tab_width - start
            width += self.string_width(font, segment, font_size)
        return width

    def ascent(self, font: FontRecord | str, font_size: float) -> float:
        font = self._resolve(font)
        return font.ascender * font_size / 1000.0

    def descent(self, font: FontRecord | str, font_size: float) -> float:
        font = self._resolve(font)
        return font.descender * font_size / 1000.0
