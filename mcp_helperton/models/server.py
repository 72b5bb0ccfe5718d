"""In-memory server list and application state models."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ServerEntry:
    """A single MCP server as shown in the toggle list."""

    name: str  # Unique within the merged list
    enabled: bool  # True when the server lives in the Claude config
    config: Dict[str, Any] = field(default_factory=dict)  # Opaque server payload

    def toggled(self) -> "ServerEntry":
        """Return a copy with the enabled flag flipped."""
        return replace(self, enabled=not self.enabled)

    def summary(self) -> str:
        """Short human-readable description of how the server is launched."""
        if not isinstance(self.config, dict):
            return ""
        if self.config.get("command"):
            args = self.config.get("args") or []
            return " ".join([str(self.config["command"])] + [str(a) for a in args])
        if self.config.get("url"):
            return str(self.config["url"])
        return str(self.config.get("type", ""))


@dataclass(frozen=True)
class AppState:
    """Application state threaded through the state transitions."""

    servers: Tuple[ServerEntry, ...] = ()
    selected_index: int = 0
    has_changes: bool = False  # Unsaved toggles exist
