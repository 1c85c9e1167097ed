"""Windows shortcut (.lnk) creation.

Creates shell links through the Windows Script Host COM object exposed
by pywin32. This is the only Windows-specific dependency of tagmeta;
on other platforms every call fails with ShortcutError.
"""

import contextlib
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


class ShortcutError(Exception):
    """Raised when a shortcut file cannot be created."""


def is_supported() -> bool:
    """Check if shortcuts can be created on this platform.

    Returns:
        True on Windows, False otherwise.
    """
    return sys.platform == "win32"


def create_shortcut(target_path: str, description: str, destination_path: str | Path) -> Path:
    """Create a shortcut file pointing at a target.

    The shortcut is saved under a temporary name in the destination
    directory and then moved into place with os.replace(), so the
    destination either holds a complete shortcut or is left untouched.

    Args:
        target_path: Absolute path of the file the shortcut points to.
        description: Shortcut description (shown as tooltip by Explorer).
        destination_path: Path of the ``.lnk`` file to create.

    Returns:
        Path of the created shortcut file.

    Raises:
        ShortcutError: If the platform is unsupported, pywin32 is missing,
            or the shell fails to save the shortcut.
    """
    if not is_supported():
        msg = f"Shortcut files can only be created on Windows (platform: {sys.platform})"
        raise ShortcutError(msg)

    try:
        import pywintypes  # type: ignore[import-not-found]
        import win32com.client  # type: ignore[import-not-found]
    except ImportError as e:
        msg = "pywin32 is required to create shortcuts. Install with: pip install pywin32"
        raise ShortcutError(msg) from e

    destination = Path(destination_path)
    # WScript.Shell only accepts names ending in .lnk
    tmp_path = destination.with_name(f".{destination.stem}.{os.getpid()}.tmp.lnk")

    try:
        shell = win32com.client.Dispatch("WScript.Shell")
        shortcut = shell.CreateShortCut(str(tmp_path))
        shortcut.TargetPath = target_path
        shortcut.Description = description
        shortcut.Save()
        os.replace(tmp_path, destination)
    except (pywintypes.com_error, OSError) as e:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        msg = f"Failed to create shortcut {destination}: {e}"
        raise ShortcutError(msg) from e

    logger.debug("Created shortcut %s -> %s", destination, target_path)
    return destination
