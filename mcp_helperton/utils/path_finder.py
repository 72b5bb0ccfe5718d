"""Utilities for finding the configuration files."""

import os
import sys
from pathlib import Path
from typing import Optional

from ..core.constants import (
    APP_DIR_NAME,
    BACKUP_SUFFIX,
    CLAUDE_CONFIG_FILE_NAME,
    HELPY_CONFIG_FILE_NAME,
)


class PathFinder:
    """Utility class for resolving store locations on the current platform."""

    @staticmethod
    def claude_config_path() -> Path:
        """Path to Claude Code's global configuration file.

        Claude Code keeps it in the home directory on every platform.
        """
        return Path.home() / CLAUDE_CONFIG_FILE_NAME

    @staticmethod
    def backup_path(config_path: Path) -> Path:
        """Sibling path holding the one-time backup of the Claude config."""
        return config_path.with_name(config_path.name + BACKUP_SUFFIX)

    @staticmethod
    def helpy_config_dir(platform: Optional[str] = None) -> Path:
        """Directory holding the disabled-server storage."""
        platform = platform or sys.platform
        home = Path.home()
        if platform == "win32":
            appdata = os.environ.get("APPDATA")
            base = Path(appdata) if appdata else home / "AppData" / "Roaming"
            return base / APP_DIR_NAME
        # macOS and Linux share the XDG-style location
        return home / ".config" / APP_DIR_NAME

    @staticmethod
    def helpy_config_path(platform: Optional[str] = None) -> Path:
        """Path to the disabled-server storage file."""
        return PathFinder.helpy_config_dir(platform) / HELPY_CONFIG_FILE_NAME
