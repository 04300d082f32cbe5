"""Font records, registry and catalog handling for afm-pack.

This subpackage provides:
- FontRecord, the packed per-font metrics
- FontRegistry, the name-ordered catalog
- FontBuilder and AFM import (the encoder side)
- Catalog file loading and writing
"""

from afm_pack.fonts.afm import read_afm
from afm_pack.fonts.builder import FontBuilder, quantize_kerning, quantize_width
from afm_pack.fonts.catalog import (
    DEFAULT_CATALOG,
    dump_catalog,
    load_catalog,
    load_default_catalog,
)
from afm_pack.fonts.record import FontRecord
from afm_pack.fonts.registry import FontRegistry

__all__ = [
    "FontRecord",
    "FontRegistry",
    "FontBuilder",
    "quantize_width",
    "quantize_kerning",
    "read_afm",
    "DEFAULT_CATALOG",
    "load_catalog",
    "load_default_catalog",
    "dump_catalog",
]
