"""Pytest configuration and shared fixtures for afm-pack tests."""

from pathlib import Path
from textwrap import dedent

import pytest

from afm_pack.config import Config
from afm_pack.fonts.builder import FontBuilder
from afm_pack.fonts.record import FontRecord
from afm_pack.fonts.registry import FontRegistry
from afm_pack.metrics import MetricsEngine

from code_points import A, E_ACUTE, EURO, F, FI_LIGATURE, I, SPACE, V


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user configuration and catalog overrides out of tests."""
    monkeypatch.delenv("AFM_PACK_CONFIG", raising=False)
    monkeypatch.delenv("AFM_PACK_CATALOG", raising=False)
    monkeypatch.setattr("afm_pack.config.DEFAULT_CONFIG_PATH", tmp_path / "no-config.yaml")


@pytest.fixture
def sample_font() -> FontRecord:
    """Font with space=10, A=40, V=38, kerning A->V=-5, two high chars and an fi ligature."""
    builder = FontBuilder("Sample Sans", "SampleSans", ascender=718, descender=-207)
    builder.set_width_code(SPACE, 10)
    builder.set_width_code(A, 40)
    builder.set_width_code(V, 38)
    builder.set_width_code(F, 12)
    builder.set_width_code(I, 8)
    builder.set_width_code(E_ACUTE, 33)
    builder.set_width_code(EURO, 35)
    builder.add_kerning_code(A, V, -5)
    builder.add_kerning_code(V, A, -4)
    builder.add_kerning_code(A, E_ACUTE, 3)
    builder.add_kerning_code(E_ACUTE, V, -2)
    builder.add_kerning_code(A, EURO, 7)
    builder.add_ligature(F, I, FI_LIGATURE)
    return builder.build()


@pytest.fixture
def plain_font() -> FontRecord:
    """Font without kerning, ligatures or high characters; only space and 'x' have widths."""
    builder = FontBuilder("Plain Mono", "PlainMono", ascender=600, descender=200)
    builder.set_width_code(SPACE, 6)
    builder.set_width_code(ord("x"), 6)
    return builder.build()


@pytest.fixture
def registry(sample_font: FontRecord, plain_font: FontRecord) -> FontRegistry:
    """Registry holding sample_font and plain_font."""
    return FontRegistry.from_records([sample_font, plain_font])


@pytest.fixture
def engine(registry: FontRegistry) -> MetricsEngine:
    """Engine with the default (space width) fallback policy."""
    return MetricsEngine(registry, Config())


@pytest.fixture
def afm_text() -> str:
    """Minimal AFM file with widths, a kerning pair and an fi ligature."""
    return dedent("""\
        StartFontMetrics 4.1
        FontName TestSans-Bold
        FullName Test Sans Bold
        FamilyName Test Sans
        Weight Bold
        Ascender 718
        Descender -207
        StartCharMetrics 9
        C 32 ; WX 1667 ; N space ; B 0 0 0 0 ;
        C 65 ; WX 6667 ; N A ; B 0 0 6600 700 ;
        C 86 ; WX 6333 ; N V ; B 0 0 6300 700 ;
        C 102 ; WX 2000 ; N f ; B 0 0 1900 700 ; L i fi ; L l fl ;
        C 105 ; WX 1333 ; N i ; B 0 0 1300 700 ;
        C 108 ; WX 1333 ; N l ; B 0 0 1300 700 ;
        C -1 ; WX 5500 ; N eacute ; B 0 0 5400 900 ;
        C 174 ; WX 2000 ; N fi ; B 0 0 1900 700 ;
        C 175 ; WX 2000 ; N fl ; B 0 0 1900 700 ;
        EndCharMetrics
        StartKernData
        StartKernPairs 3
        KPX A V -833
        KPX V A -667
        KPX A eacute 20
        EndKernPairs
        EndKernData
        EndFontMetrics
        """)


@pytest.fixture
def afm_file(tmp_path: Path, afm_text: str) -> Path:
    """Write afm_text to a temporary .afm file."""
    path = tmp_path / "TestSans-Bold.afm"
    path.write_text(afm_text, encoding="ascii")
    return path
