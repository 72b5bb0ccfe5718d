"""The pair of stores a toggle session reads from and writes to."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .active_store import ActiveStore
from .disabled_store import DisabledStore


@dataclass
class ConfigStores:
    """Active and disabled stores, defaulting to the platform locations."""

    active: ActiveStore = field(default_factory=ActiveStore)
    disabled: DisabledStore = field(default_factory=DisabledStore)

    @classmethod
    def from_paths(
        cls, active_path: Optional[Path] = None, disabled_path: Optional[Path] = None
    ) -> "ConfigStores":
        """Build stores for explicit paths, falling back to the defaults."""
        return cls(active=ActiveStore(active_path), disabled=DisabledStore(disabled_path))
