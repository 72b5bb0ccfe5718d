"""Shared JSON file handling for the store adapters."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.atomic_writer import write_atomically
from ..core.constants import JSON_INDENT
from ..core.exceptions import AtomicWriteError, StoreReadError

logger = logging.getLogger(__name__)


class JsonStore:
    """Base class for a store backed by a single JSON object on disk."""

    #: Human-readable store name used in error messages
    label = "config"
    #: Top-level key holding the server mapping
    servers_key = ""

    def __init__(self, config_file: Path):
        """Initialize the store with the path of its JSON file."""
        self.config_file = Path(config_file)

    def _read_document(self) -> Optional[Dict[str, Any]]:
        """Load the whole document, or None when the file does not exist.

        Raises:
            StoreReadError: If the file is not UTF-8 encoded JSON holding an object
        """
        try:
            content = self.config_file.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StoreReadError(f"Failed to read {self.label}: {e}") from e

        try:
            document = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StoreReadError(f"Failed to read {self.label}: {e}") from e

        if not isinstance(document, dict):
            raise StoreReadError(
                f"Failed to read {self.label}: {self.config_file} must contain a JSON object"
            )
        return document

    def read(self) -> Dict[str, Any]:
        """Return the server mapping, empty if the file does not exist."""
        document = self._read_document()
        if document is None:
            logger.debug(f"{self.config_file} not found, no servers")
            return {}
        servers = document.get(self.servers_key)
        if not servers:
            return {}
        if not isinstance(servers, dict):
            raise StoreReadError(
                f"Failed to read {self.label}: {self.servers_key} in {self.config_file} must be a JSON object"
            )
        return servers

    def _ensure_directory(self) -> None:
        """Create the parent directory of the store file.

        Raises:
            AtomicWriteError: If the directory cannot be created
        """
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise AtomicWriteError(self.config_file, e) from e

    def _write_document(self, document: Dict[str, Any]) -> None:
        """Persist the document as indented JSON through an atomic replace."""
        content = json.dumps(document, indent=JSON_INDENT, ensure_ascii=False)
        write_atomically(self.config_file, content)
