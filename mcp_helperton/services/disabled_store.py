"""Helperton's storage for disabled MCP servers."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.constants import DISABLED_SERVERS_KEY
from ..models.store import DisabledStoreDocument
from ..utils.path_finder import PathFinder
from .json_store import JsonStore

logger = logging.getLogger(__name__)


class DisabledStore(JsonStore):
    """Keeps the configs of servers the user has turned off."""

    label = "helpy config"
    servers_key = DISABLED_SERVERS_KEY

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize with the storage path (platform default if None)."""
        super().__init__(config_file or PathFinder.helpy_config_path())

    def write(self, servers: Dict[str, Any]) -> None:
        """Replace the disabled servers and stamp the storage metadata."""
        self._ensure_directory()
        document = DisabledStoreDocument(disabledServers=servers)
        self._write_document(document.to_json_dict())
        logger.info(f"Wrote {len(servers)} disabled server(s) to {self.config_file}")

    def add_server(self, name: str, config: Dict[str, Any]) -> None:
        """Add a server to disabled storage."""
        disabled = self.read()
        disabled[name] = config
        self.write(disabled)

    def remove_server(self, name: str) -> Optional[Dict[str, Any]]:
        """Remove a server from disabled storage. Returns its config, or None."""
        disabled = self.read()
        if name not in disabled:
            return None

        removed = disabled.pop(name)
        self.write(disabled)
        return removed

    def is_disabled(self, name: str) -> bool:
        """Check if a server is in disabled storage."""
        return name in self.read()
