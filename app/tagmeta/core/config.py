"""User settings for tagmeta.

Settings are read from ``~/.config/tagmeta/config.toml``. A missing file
means defaults; command-line flags always override the file.

Example config.toml::

    output_format = "json"
    shortcut_output_dir = "~/Desktop"
    confirm_mode = "prompt"
"""

import logging
import os
import tomllib
from enum import Enum
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tagmeta.core.paths import get_config_path

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output format options for command results.

    Attributes:
        TEXT: One line per record, printed as it is produced.
        JSON: One JSON object per line, printed as it is produced.
        TABLE: Rich table printed after all paths are processed.
    """

    TEXT = "text"
    JSON = "json"
    TABLE = "table"


class ConfirmMode(str, Enum):
    """How shortcut creation is confirmed.

    Attributes:
        AUTO: Proceed without asking.
        PROMPT: Ask for every file.
        WHAT_IF: Report what would happen and create nothing.
    """

    AUTO = "auto"
    PROMPT = "prompt"
    WHAT_IF = "what-if"


class TagmetaConfig(BaseModel):
    """Settings loaded from config.toml.

    Attributes:
        output_format: Default output format for all commands.
        shortcut_output_dir: Default directory for new shortcuts
            (None = current working directory).
        confirm_mode: Default confirmation mode for shortcut creation.
    """

    model_config = ConfigDict(extra="forbid")

    output_format: Annotated[
        OutputFormat,
        Field(description="Default output format"),
    ] = OutputFormat.TEXT
    shortcut_output_dir: Annotated[
        Path | None,
        Field(description="Default shortcut directory (None = current directory)"),
    ] = None
    confirm_mode: Annotated[
        ConfirmMode,
        Field(description="Default confirmation mode for shortcut creation"),
    ] = ConfirmMode.AUTO

    @field_validator("shortcut_output_dir", mode="after")
    @classmethod
    def expand_user(cls, v: Path | None) -> Path | None:
        """Expand ``~`` in the shortcut directory."""
        return v.expanduser() if v is not None else None


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> TagmetaConfig:
    """Load settings from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated TagmetaConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return TagmetaConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def load_config_or_default(path: Path | None = None) -> TagmetaConfig:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded or default TagmetaConfig.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file, using defaults")
        return TagmetaConfig()


def save_config(config: TagmetaConfig, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The TagmetaConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: TagmetaConfig) -> dict[str, object]:
    """Convert TagmetaConfig to a dictionary for TOML serialization.

    Only includes non-None values since TOML has no null.

    Args:
        config: The TagmetaConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {
        "output_format": config.output_format.value,
        "confirm_mode": config.confirm_mode.value,
    }
    if config.shortcut_output_dir is not None:
        result["shortcut_output_dir"] = str(config.shortcut_output_dir)
    return result
