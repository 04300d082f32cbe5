"""Unit tests for afm_pack.fonts.afm (AFM import through fontTools)."""

from pathlib import Path

import pytest

from afm_pack.exceptions import MalformedTableError
from afm_pack.fonts.afm import glyph_code_point, read_afm, read_ligatures
from afm_pack.fonts.registry import FontRegistry
from afm_pack.metrics import MetricsEngine
from afm_pack.tables.characters import WIDTH_MISSING
from afm_pack.tables.kerning import decode_kerning_list


class TestGlyphCodePoint:
    """Tests for glyph name to code point mapping."""

    @pytest.mark.parametrize(
        ("name", "code_point"),
        [("A", 0x41), ("space", 0x20), ("eacute", 0xE9), ("fi", 0xFB01), ("uni20AC", 0x20AC)],
    )
    def test_known_names(self, name: str, code_point: int) -> None:
        """Adobe Glyph List names and uniXXXX names resolve."""
        assert glyph_code_point(name) == code_point

    def test_unknown_name(self) -> None:
        """Names without a mapping return None."""
        assert glyph_code_point("notaglyphname") is None

    def test_astral_code_point_skipped(self) -> None:
        """Code points beyond the BMP are not representable."""
        assert glyph_code_point("u1F600") is None


class TestReadLigatures:
    """Tests for ligature extraction from character metric lines."""

    def test_reads_l_entries(self, afm_file: Path) -> None:
        """L entries are returned as (first, second, ligature) names."""
        assert read_ligatures(afm_file) == [("f", "i", "fi"), ("f", "l", "fl")]


class TestReadAfm:
    """Tests for building a FontRecord from an AFM file."""

    def test_metadata(self, afm_file: Path) -> None:
        """Names and vertical metrics come from the header."""
        font = read_afm(afm_file)
        assert font.full_name == "Test Sans Bold"
        assert font.postscript_name == "TestSans-Bold"
        assert font.ascender == 718
        assert font.descender == 207

    def test_widths_quantized(self, afm_file: Path) -> None:
        """AFM widths are quantized to width codes."""
        font = read_afm(afm_file)
        assert font.widths[0x20 - 32] == 10
        assert font.widths[ord("A") - 32] == 40
        assert font.widths[ord("V") - 32] == 38
        assert font.widths[ord("B") - 32] == WIDTH_MISSING

    def test_high_characters(self, afm_file: Path) -> None:
        """Glyphs above 126 get sorted high slots."""
        font = read_afm(afm_file)
        assert [code_point for code_point, _ in font.highchars_index] == [0xE9, 0xFB01, 0xFB02]
        assert font.widths[font.highchars_index[0][1]] == 33

    def test_kerning(self, afm_file: Path) -> None:
        """Kerning pairs are quantized; pairs rounding to zero are dropped."""
        font = read_afm(afm_file)
        a_pairs = decode_kerning_list(font.kerning_data, font.kerning_index[ord("A") - 32])
        v_pairs = decode_kerning_list(font.kerning_data, font.kerning_index[ord("V") - 32])
        assert a_pairs == [(ord("V"), -5)]
        assert v_pairs == [(ord("A"), -4)]

    def test_ligatures(self, afm_file: Path) -> None:
        """L entries become ligature triples."""
        font = read_afm(afm_file)
        assert font.ligatures == ((0x66, 0x69, 0xFB01), (0x66, 0x6C, 0xFB02))

    def test_end_to_end_width(self, afm_file: Path) -> None:
        """An imported font measures "AV" with its kerning."""
        font = read_afm(afm_file)
        engine = MetricsEngine(FontRegistry([font]))
        assert engine.string_width("Test Sans Bold", "AV", 10) == pytest.approx((40 + 38 - 5) * 10 / 6)

    def test_unparsable_file(self, tmp_path: Path) -> None:
        """Files afmLib can not parse raise MalformedTableError."""
        path = tmp_path / "broken.afm"
        path.write_text("StartFontMetrics 4.1\nC 65 ; WX oops ; N A ;\n", encoding="ascii")
        with pytest.raises(MalformedTableError):
            read_afm(path)
