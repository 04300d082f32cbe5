"""Build FontRecords from Adobe Font Metrics (.afm) files.

Widths and kerning pairs come from fontTools.afmLib; glyph names are mapped
to code points through the Adobe Glyph List. afmLib ignores the ``L``
(ligature) entries of character metric lines, so those are read here.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from fontTools import afmLib
from fontTools.agl import toUnicode

from afm_pack.codec.varint import MAX_VALUE
from afm_pack.exceptions import MalformedTableError
from afm_pack.fonts.builder import FontBuilder
from afm_pack.fonts.record import FontRecord

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"\bN\s+([^\s;]+)")
_LIGATURE_RE = re.compile(r"\bL\s+([^\s;]+)\s+([^\s;]+)")


def glyph_code_point(glyph_name: str) -> int | None:
    """Map a glyph name to a BMP code point, or None."""
    text = toUnicode(glyph_name)
    if len(text) != 1:
        return None
    code_point = ord(text)
    if code_point > MAX_VALUE:
        return None
    return code_point


def read_ligatures(path: Path) -> list[tuple[str, str, str]]:
    """Return (first, second, ligature) glyph names from the C lines of an AFM file."""
    ligatures = []
    for line in path.read_text(encoding="latin-1").splitlines():
        if not line.startswith("C "):
            continue
        name = _NAME_RE.search(line)
        if name is None:
            continue
        for successor, ligature in _LIGATURE_RE.findall(line):
            ligatures.append((name.group(1), successor, ligature))
    return ligatures


def _attr(afm: afmLib.AFM, name: str, default=None):
    try:
        return getattr(afm, name)
    except AttributeError:
        return default


def read_afm(path: Path | str) -> FontRecord:
    """Parse an AFM file into a packed FontRecord.

    Raises:
        MalformedTableError: If the file can not be parsed.
    """
    path = Path(path)
    try:
        afm = afmLib.AFM(str(path))
    except (OSError, afmLib.error, ValueError) as e:
        raise MalformedTableError(f"can not parse AFM file {path}: {e}") from e

    font_name = _attr(afm, "FontName", path.stem)
    full_name = _attr(afm, "FullName", font_name)
    builder = FontBuilder(
        full_name=str(full_name),
        postscript_name=str(font_name),
        ascender=int(_attr(afm, "Ascender", 0)),
        descender=int(_attr(afm, "Descender", 0)),
    )

    code_points: dict[str, int] = {}
    for glyph in afm.chars():
        code_point = glyph_code_point(glyph)
        if code_point is None:
            logger.debug("%s: no BMP code point for glyph %r", full_name, glyph)
            continue
        code_points[glyph] = code_point
        _charnum, width, _bbox = afm[glyph]
        builder.set_width(code_point, width)

    for left, right in afm.kernpairs():
        if left in code_points and right in code_points:
            builder.add_kerning(
                code_points[left], code_points[right], afm[(left, right)]
            )

    for first, second, ligature in read_ligatures(path):
        if first in code_points and second in code_points and ligature in code_points:
            builder.add_ligature(
                code_points[first], code_points[second], code_points[ligature]
            )

    record = builder.build()
    logger.info(
        "%s: %d high characters, %d ligatures",
        record.full_name,
        record.highchars_count,
        record.ligatures_count,
    )
    return record
