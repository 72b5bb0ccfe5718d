"""Claude Code's global configuration (the active store).

Claude Code keeps its config in ~/.claude.json:

    {
      "mcpServers": { ... },        # Global MCP servers
      "projects": { ... },          # Everything else belongs to Claude Code
      ...
    }

Only ``mcpServers`` is ever replaced; every other field is written back as it
was found.
"""

import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.constants import ACTIVE_SERVERS_KEY
from ..core.exceptions import AtomicWriteError, StoreReadError
from ..utils.path_finder import PathFinder
from .json_store import JsonStore

logger = logging.getLogger(__name__)


class ActiveStore(JsonStore):
    """Reads and writes the enabled MCP servers in Claude Code's config."""

    label = "Claude config"
    servers_key = ACTIVE_SERVERS_KEY

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize with the Claude config path (platform default if None)."""
        super().__init__(config_file or PathFinder.claude_config_path())
        self.backup_file = PathFinder.backup_path(self.config_file)

    def read_full(self) -> Dict[str, Any]:
        """Read the full Claude config document."""
        document = self._read_document()
        if document is None:
            return {ACTIVE_SERVERS_KEY: {}}
        return document

    def _backup_once(self) -> None:
        """Copy the untouched config aside the first time we modify it."""
        if self.backup_file.exists() or not self.config_file.exists():
            return
        try:
            shutil.copyfile(self.config_file, self.backup_file)
        except OSError as e:
            raise AtomicWriteError(self.backup_file, e) from e
        logger.info(f"Backed up {self.config_file} to {self.backup_file}")

    def _existing_document(self) -> Dict[str, Any]:
        # A corrupt config loses its other fields rather than blocking the write
        try:
            return self._read_document() or {}
        except StoreReadError as e:
            logger.warning(f"Ignoring unreadable {self.config_file}: {e}")
            return {}

    def write(self, servers: Dict[str, Any]) -> None:
        """Replace the enabled servers, preserving all other config fields.

        Args:
            servers: Server name to config mapping to store under mcpServers

        Raises:
            AtomicWriteError: If the backup or the config cannot be written
        """
        self._ensure_directory()
        self._backup_once()

        document = self._existing_document()
        document[ACTIVE_SERVERS_KEY] = servers
        self._write_document(document)
        logger.info(f"Wrote {len(servers)} enabled server(s) to {self.config_file}")

    def add_server(self, name: str, config: Dict[str, Any]) -> None:
        """Add or update an enabled server."""
        servers = self.read()
        servers[name] = config
        self.write(servers)

    def remove_server(self, name: str) -> Optional[Dict[str, Any]]:
        """Remove an enabled server. Returns its config, or None if not found."""
        servers = self.read()
        if name not in servers:
            return None

        removed = servers.pop(name)
        self.write(servers)
        return removed
