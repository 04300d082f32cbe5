"""Unit tests for afm_pack.config."""

from pathlib import Path
from textwrap import dedent

import pytest

from afm_pack.config import Config
from afm_pack.exceptions import ConfigError


class TestConfigDefaults:
    """Tests for built-in defaults."""

    def test_defaults(self) -> None:
        """Without a file, the bundled catalog and space fallback are used."""
        config = Config.load()
        assert config.catalog is None
        assert config.default_width == "space"
        assert config.tab_width == 0.0
        assert config.log_level == "WARNING"
        assert config.source is None


class TestConfigLoad:
    """Tests for YAML loading."""

    def test_load_full_file(self, tmp_path: Path) -> None:
        """All keys are read from YAML."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            dedent("""
            catalog: ~/fonts/catalog.json
            default_width: zero
            tab_width: 36
            log_level: debug
        """)
        )
        config = Config.load(config_file)
        assert config.catalog == Path("~/fonts/catalog.json").expanduser()
        assert config.default_width == "zero"
        assert config.tab_width == 36.0
        assert config.log_level == "DEBUG"
        assert config.source == config_file

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """An empty YAML file is equivalent to no settings."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert Config.load(config_file) == Config()

    def test_env_config_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """AFM_PACK_CONFIG points at the configuration file."""
        config_file = tmp_path / "env.yaml"
        config_file.write_text("default_width: zero\n")
        monkeypatch.setenv("AFM_PACK_CONFIG", str(config_file))
        assert Config.load().default_width == "zero"

    def test_env_catalog_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """AFM_PACK_CATALOG overrides the catalog from the file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("catalog: /from/file.json\n")
        monkeypatch.setenv("AFM_PACK_CATALOG", str(tmp_path / "env.json"))
        assert Config.load(config_file).catalog == tmp_path / "env.json"


class TestConfigErrors:
    """Tests for invalid configuration."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("default_width: wide\n", "default_width"),
            ("tab_width: -1\n", "tab_width"),
            ("log_level: LOUD\n", "log_level"),
            ("colour: blue\n", "unknown keys"),
            ("tab_width: lots\n", "lots"),
            ("- a\n- b\n", "mapping"),
            ("key: [unclosed\n", "invalid YAML"),
        ],
    )
    def test_invalid_files(self, tmp_path: Path, content: str, message: str) -> None:
        """Invalid values raise ConfigError naming the problem."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text(content)
        with pytest.raises(ConfigError) as exc_info:
            Config.load(config_file)
        assert message in exc_info.value.message
        assert exc_info.value.path == config_file

    def test_unreadable_file(self, tmp_path: Path) -> None:
        """A missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="can not read"):
            Config.load(tmp_path / "missing.yaml")
