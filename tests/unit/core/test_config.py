"""Unit tests for user settings.

Tests for TagmetaConfig and the load/save helpers.
"""

import tomllib
from pathlib import Path

import pytest
from tagmeta.core.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfirmMode,
    OutputFormat,
    TagmetaConfig,
    config_to_dict,
    load_config,
    load_config_or_default,
    save_config,
)


class TestTagmetaConfig:
    """Tests for TagmetaConfig model."""

    def test_defaults(self) -> None:
        """Defaults are text output, current directory and no prompts."""
        config = TagmetaConfig()

        assert config.output_format == OutputFormat.TEXT
        assert config.shortcut_output_dir is None
        assert config.confirm_mode == ConfirmMode.AUTO

    def test_expands_home(self) -> None:
        """shortcut_output_dir expands ~."""
        config = TagmetaConfig(shortcut_output_dir=Path("~/Desktop"))

        assert config.shortcut_output_dir == Path.home() / "Desktop"

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValueError):
            TagmetaConfig.model_validate({"colour": "red"})

    def test_what_if_value(self) -> None:
        """The what-if mode uses a hyphenated value."""
        config = TagmetaConfig.model_validate({"confirm_mode": "what-if"})

        assert config.confirm_mode == ConfirmMode.WHAT_IF


class TestLoadConfig:
    """Tests for load_config and load_config_or_default."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path / "config.toml")

    def test_missing_file_defaults(self, tmp_path: Path) -> None:
        """load_config_or_default falls back to defaults."""
        assert load_config_or_default(tmp_path / "config.toml") == TagmetaConfig()

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values from the file are validated and returned."""
        path = tmp_path / "config.toml"
        path.write_text(
            'output_format = "json"\nconfirm_mode = "prompt"\n'
            f'shortcut_output_dir = "{tmp_path}"\n'
        )

        config = load_config(path)

        assert config.output_format == OutputFormat.JSON
        assert config.confirm_mode == ConfirmMode.PROMPT
        assert config.shortcut_output_dir == tmp_path

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("output_format = ")

        with pytest.raises(ConfigParseError):
            load_config_or_default(path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('output_format = "yaml"\n')

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)


class TestSaveConfig:
    """Tests for save_config and config_to_dict."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Saved settings load back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        config = TagmetaConfig(
            output_format=OutputFormat.TABLE,
            shortcut_output_dir=tmp_path,
            confirm_mode=ConfirmMode.WHAT_IF,
        )

        saved = save_config(config, path)

        assert saved == path
        assert load_config(path) == config
        assert list(path.parent.glob("*.tmp")) == []

    def test_none_omitted(self, tmp_path: Path) -> None:
        """Unset optional values are not written."""
        path = save_config(TagmetaConfig(), tmp_path / "config.toml")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        assert data == {"output_format": "text", "confirm_mode": "auto"}
        assert config_to_dict(TagmetaConfig()) == data
