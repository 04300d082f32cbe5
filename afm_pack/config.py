"""Configuration for afm-pack.

Settings come from a YAML file; every key is optional::

    catalog: /opt/fonts/catalog.json
    default_width: space      # space | zero
    tab_width: 0
    log_level: WARNING
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from afm_pack.exceptions import ConfigError

CONFIG_ENV = "AFM_PACK_CONFIG"
CATALOG_ENV = "AFM_PACK_CATALOG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "afm-pack" / "config.yaml"

DEFAULT_WIDTH_POLICIES = ("space", "zero")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Runtime settings.

    Attributes:
        catalog: Packed catalog file; None selects the bundled catalog.
        default_width: Width used for control characters, missing slots and
            unmapped code points: "space" (the font's space width) or "zero".
        tab_width: Tab stop spacing in device units for text_width(); 0
            disables tab stops.
        log_level: Logging level name.
    """

    catalog: Path | None = None
    default_width: str = "space"
    tab_width: float = 0.0
    log_level: str = "WARNING"
    source: Path | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.default_width not in DEFAULT_WIDTH_POLICIES:
            raise ConfigError(
                self.source,
                f"default_width must be one of {', '.join(DEFAULT_WIDTH_POLICIES)}, "
                f"got {self.default_width!r}",
            )
        if self.tab_width < 0:
            raise ConfigError(
                self.source, f"tab_width must not be negative, got {self.tab_width}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(self.source, f"unknown log_level {self.log_level!r}")
        object.__setattr__(self, "log_level", self.log_level.upper())

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: Path | None = None) -> Config:
        known = {f.name for f in fields(cls)} - {"source"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(source, f"unknown keys: {', '.join(unknown)}")
        values = dict(data)
        try:
            if values.get("catalog") is not None:
                values["catalog"] = Path(values["catalog"]).expanduser()
            if "tab_width" in values:
                values["tab_width"] = float(values["tab_width"])
            if "default_width" in values:
                values["default_width"] = str(values["default_width"])
            if "log_level" in values:
                values["log_level"] = str(values["log_level"])
        except (TypeError, ValueError) as e:
            raise ConfigError(source, str(e)) from e
        return cls(**values, source=source)

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load settings.

        Lookup order: ``path``, the AFM_PACK_CONFIG environment variable,
        ~/.config/afm-pack/config.yaml, then built-in defaults. The
        AFM_PACK_CATALOG environment variable overrides the catalog path.

        Raises:
            ConfigError: If the file is unreadable or holds invalid values.
        """
        if path is None and os.environ.get(CONFIG_ENV):
            path = os.environ[CONFIG_ENV]
        if path is None and DEFAULT_CONFIG_PATH.exists():
            path = DEFAULT_CONFIG_PATH

        data: dict[str, Any] = {}
        source = None
        if path is not None:
            source = Path(path)
            try:
                loaded = yaml.safe_load(source.read_text(encoding="utf-8"))
            except OSError as e:
                raise ConfigError(source, f"can not read file: {e}") from e
            except yaml.YAMLError as e:
                raise ConfigError(source, f"invalid YAML: {e}") from e
            if loaded is not None and not isinstance(loaded, dict):
                raise ConfigError(source, "top level must be a mapping")
            data = loaded or {}

        if os.environ.get(CATALOG_ENV):
            data = {**data, "catalog": os.environ[CATALOG_ENV]}
        return cls.from_dict(data, source=source)
