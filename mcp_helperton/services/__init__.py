"""Store adapters for the Claude config and helpy storage."""

from .active_store import ActiveStore
from .disabled_store import DisabledStore
from .stores import ConfigStores

__all__ = [
    "ActiveStore",
    "DisabledStore",
    "ConfigStores",
]
