"""Packed catalog file: the persisted form of a FontRegistry.

The catalog is a JSON document produced ahead of time (see ``afm-pack
compile``) and loaded once at startup::

    {"version": 1, "fonts": [{"full_name": ..., "widths": "<hex>", ...}]}

Byte arrays are stored as hex strings, the other tables as JSON arrays.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from afm_pack.exceptions import MalformedTableError
from afm_pack.fonts.record import FontRecord
from afm_pack.fonts.registry import FontRegistry

logger = logging.getLogger(__name__)

CATALOG_VERSION = 1
DEFAULT_CATALOG = Path(__file__).resolve().parent.parent / "data" / "core_fonts.json"

_REQUIRED_KEYS = (
    "full_name",
    "postscript_name",
    "ascender",
    "descender",
    "widths",
    "kerning_index",
)


def _record_to_dict(font: FontRecord) -> dict[str, Any]:
    return {
        "full_name": font.full_name,
        "postscript_name": font.postscript_name,
        "ascender": font.ascender,
        "descender": font.descender,
        "widths": font.widths.hex(),
        "kerning_index": list(font.kerning_index),
        "kerning_data": font.kerning_data.hex(),
        "highchars_index": [list(entry) for entry in font.highchars_index],
        "ligatures": [list(entry) for entry in font.ligatures],
    }


def _int_rows(rows: Any) -> tuple[tuple[int, ...], ...]:
    # Row arity is checked by FontRecord
    return tuple(tuple(int(value) for value in row) for row in rows)


def _record_from_dict(entry: dict[str, Any], position: int) -> FontRecord:
    if not isinstance(entry, dict):
        raise MalformedTableError(f"catalog entry {position} is not an object")
    missing = [key for key in _REQUIRED_KEYS if key not in entry]
    if missing:
        name = entry.get("full_name", f"#{position}")
        raise MalformedTableError(f"missing keys: {', '.join(missing)}", font=name)
    name = entry["full_name"]
    try:
        widths = bytes.fromhex(entry["widths"])
        kerning_data = bytes.fromhex(entry.get("kerning_data", ""))
    except (TypeError, ValueError) as e:
        raise MalformedTableError(f"invalid hex data: {e}", font=name) from e
    try:
        return FontRecord(
            full_name=name,
            postscript_name=entry["postscript_name"],
            ascender=int(entry["ascender"]),
            descender=int(entry["descender"]),
            widths=widths,
            kerning_index=tuple(int(index) for index in entry["kerning_index"]),
            kerning_data=kerning_data,
            highchars_index=_int_rows(entry.get("highchars_index", [])),
            ligatures=_int_rows(entry.get("ligatures", [])),
        )
    except (TypeError, ValueError) as e:
        raise MalformedTableError(f"invalid field value: {e}", font=name) from e


def registry_from_data(data: Any) -> FontRegistry:
    """Validate a decoded catalog document and build its registry.

    Raises:
        MalformedTableError: If the document or any record is invalid.
    """
    if not isinstance(data, dict):
        raise MalformedTableError("catalog root must be an object")
    version = data.get("version")
    if version != CATALOG_VERSION:
        raise MalformedTableError(f"unsupported catalog version {version!r}")
    fonts = data.get("fonts")
    if not isinstance(fonts, list):
        raise MalformedTableError("catalog has no font list")
    return FontRegistry(_record_from_dict(entry, i) for i, entry in enumerate(fonts))


def load_catalog(path: Path | str) -> FontRegistry:
    """Load and validate a packed catalog file.

    Args:
        path: Catalog JSON file.

    Returns:
        The FontRegistry described by the file.

    Raises:
        MalformedTableError: If the file can not be read or violates the format.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise MalformedTableError(f"can not read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise MalformedTableError(f"catalog {path} is not valid JSON: {e}") from e

    registry = registry_from_data(data)
    logger.info("Loaded %d fonts from %s", len(registry), path)
    return registry


def load_default_catalog() -> FontRegistry:
    """Load the catalog bundled with the package."""
    return load_catalog(DEFAULT_CATALOG)


def catalog_to_data(registry: FontRegistry) -> dict[str, Any]:
    return {
        "version": CATALOG_VERSION,
        "fonts": [_record_to_dict(font) for font in registry],
    }


def dump_catalog(registry: FontRegistry, path: Path | str) -> Path:
    """Write ``registry`` as a catalog file and return its path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(catalog_to_data(registry), indent=1)
    path.write_text(text + "\n", encoding="utf-8")
    logger.info("Wrote %d fonts to %s", len(registry), path)
    return path
