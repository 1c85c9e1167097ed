"""Locations of tagmeta's user files.

Everything lives in the XDG config directory, ``$XDG_CONFIG_HOME/tagmeta``
(``~/.config/tagmeta`` when the variable is unset).
"""

import os
from pathlib import Path

APP_NAME = "tagmeta"


def get_config_dir() -> Path:
    """Return the tagmeta config directory."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME


def get_config_path() -> Path:
    """Return the settings file, ``config.toml``."""
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Return the optional colour override file, ``theme.toml``."""
    return get_config_dir() / "theme.toml"


def ensure_config_dir() -> Path:
    """Create the config directory if needed.

    Returns:
        The config directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        raise RuntimeError(f"Cannot create config directory {path}: Permission denied") from e
    except OSError as e:
        raise RuntimeError(f"Cannot create config directory {path}: {e}") from e
    return path
