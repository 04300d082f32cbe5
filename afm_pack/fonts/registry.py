"""Font registry: the catalog of packed fonts, searchable by name."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator

from afm_pack.exceptions import FontNotFoundError, MalformedTableError
from afm_pack.fonts.record import FontRecord


class FontRegistry:
    """Immutable, name-ordered collection of FontRecord.

    Lookups by full name use binary search over the sorted records. A second
    sorted index covers PostScript names.
    """

    __slots__ = ("_fonts", "_names", "_ps_index")

    def __init__(self, fonts: Iterable[FontRecord]) -> None:
        """Initialize registry.

        Args:
            fonts: Records already sorted by ``full_name``.

        Raises:
            MalformedTableError: If names are unsorted or duplicated.
        """
        records = tuple(fonts)
        names = tuple(font.full_name for font in records)
        for previous, current in zip(names, names[1:]):
            if current == previous:
                raise MalformedTableError(f"duplicate font name {current!r}")
            if current < previous:
                raise MalformedTableError(
                    f"fonts are not sorted by name at {current!r}"
                )
        self._fonts = records
        self._names = names
        self._ps_index = tuple(
            sorted((font.postscript_name, i) for i, font in enumerate(records))
        )

    @classmethod
    def from_records(cls, fonts: Iterable[FontRecord]) -> FontRegistry:
        """Build a registry from records in any order."""
        return cls(sorted(fonts, key=lambda font: font.full_name))

    def __len__(self) -> int:
        return len(self._fonts)

    def __iter__(self) -> Iterator[FontRecord]:
        return iter(self._fonts)

    def __contains__(self, full_name: object) -> bool:
        return isinstance(full_name, str) and self.find(full_name) is not None

    def __repr__(self) -> str:
        return f"FontRegistry({len(self._fonts)} fonts)"

    def names(self) -> tuple[str, ...]:
        return self._names

    def find(self, full_name: str) -> FontRecord | None:
        """Return the font named ``full_name``, or None."""
        pos = bisect_left(self._names, full_name)
        if pos < len(self._names) and self._names[pos] == full_name:
            return self._fonts[pos]
        return None

    def lookup(self, full_name: str) -> FontRecord:
        """Return the font named ``full_name``.

        Raises:
            FontNotFoundError: If no such font is registered.
        """
        font = self.find(full_name)
        if font is None:
            raise FontNotFoundError(full_name)
        return font

    def find_by_postscript_name(self, postscript_name: str) -> FontRecord | None:
        pos = bisect_left(self._ps_index, (postscript_name,))
        if pos < len(self._ps_index) and self._ps_index[pos][0] == postscript_name:
            return self._fonts[self._ps_index[pos][1]]
        return None
