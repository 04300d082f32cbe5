"""Exception hierarchy for afm-pack.

Load-time problems (bad tables, out-of-range values, bad config) are raised
as exceptions. Query-time misses (unknown character, no kerning pair, no
ligature) are ordinary return values and never raise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class AfmPackError(Exception):
    """Base class for all afm-pack errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class FontNotFoundError(AfmPackError):
    """Requested font is not in the registry."""

    def __init__(self, full_name: str) -> None:
        self.full_name = full_name
        super().__init__(f"Font not found: {full_name!r}", {"full_name": full_name})


class EncodingRangeError(AfmPackError):
    """A value does not fit the packed representation."""

    def __init__(self, value: int, limit: str = "0..65535") -> None:
        self.value = value
        self.limit = limit
        super().__init__(
            f"Value {value} is outside the encodable range {limit}",
            {"value": value, "limit": limit},
        )


class MalformedTableError(AfmPackError):
    """A packed table violates the format invariants."""

    def __init__(self, reason: str, font: str | None = None) -> None:
        self.reason = reason
        self.font = font
        if font:
            message = f"Malformed table for {font!r}: {reason}"
        else:
            message = f"Malformed table: {reason}"
        super().__init__(message, {"reason": reason, "font": font})


class ConfigError(AfmPackError):
    """Configuration file could not be read or holds invalid values."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        where = f" ({path})" if path else ""
        super().__init__(
            f"Invalid configuration{where}: {reason}",
            {"path": str(path) if path else None},
        )


# Short names used by callers that follow the format documentation
FontNotFound = FontNotFoundError
MalformedTable = MalformedTableError
