"""Models for MCP Helpy Helperton."""

from .server import AppState, ServerEntry
from .store import DisabledStoreDocument, StoreMeta

__all__ = [
    'AppState',
    'ServerEntry',
    'DisabledStoreDocument',
    'StoreMeta'
]
