"""afm-pack: Packed font metrics for fast string width computation.

This library provides:
- A compact packed format for character widths, kerning pairs and ligatures
- A read-only font registry searchable by name
- A metrics engine computing character, kerning and string widths
- Tools to compile Adobe Font Metrics files into a packed catalog

Example:
    >>> from afm_pack import MetricsEngine, load_default_catalog
    >>> engine = MetricsEngine(load_default_catalog())
    >>> engine.string_width("Courier", "Hello", 12)
"""

from afm_pack.codec import decode_varint, encode_varint
from afm_pack.config import Config
from afm_pack.exceptions import (
    AfmPackError,
    ConfigError,
    EncodingRangeError,
    FontNotFound,
    FontNotFoundError,
    MalformedTable,
    MalformedTableError,
)
from afm_pack.fonts import (
    FontBuilder,
    FontRecord,
    FontRegistry,
    dump_catalog,
    load_catalog,
    load_default_catalog,
    read_afm,
)
from afm_pack.metrics import MetricsEngine

__version__ = "0.1.0"

__all__ = [
    # Main API
    "MetricsEngine",
    "FontRegistry",
    "FontRecord",
    "Config",
    # Catalog handling
    "FontBuilder",
    "read_afm",
    "load_catalog",
    "load_default_catalog",
    "dump_catalog",
    # Codec
    "encode_varint",
    "decode_varint",
    # Exceptions
    "AfmPackError",
    "FontNotFoundError",
    "FontNotFound",
    "EncodingRangeError",
    "MalformedTableError",
    "MalformedTable",
    "ConfigError",
    # Metadata
    "__version__",
]
