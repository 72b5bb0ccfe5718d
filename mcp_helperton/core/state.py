"""Application state management.

State values are immutable. Every transition takes an ``AppState`` and returns
a new one; the caller keeps the only reference and swaps it after each call.
Only ``load_servers`` and ``save_state`` touch the filesystem.
"""

import logging
from dataclasses import replace
from typing import Optional

from ..models.server import AppState, ServerEntry
from ..services.stores import ConfigStores
from .merge import merge_servers

logger = logging.getLogger(__name__)


def create_state() -> AppState:
    """Create a new, empty application state."""
    return AppState()


def load_servers(
    state: Optional[AppState] = None, stores: Optional[ConfigStores] = None
) -> AppState:
    """Load servers from both stores, keeping the selection where possible.

    Args:
        state: Current state (a fresh one if None)
        stores: Stores to read (platform defaults if None)

    Returns:
        State holding the merged list, with no unsaved changes

    Raises:
        StoreReadError: If either store contains malformed JSON
    """
    state = state or create_state()
    stores = stores or ConfigStores()

    enabled = stores.active.read()
    disabled = stores.disabled.read()
    servers = tuple(merge_servers(enabled, disabled))
    logger.debug(f"Loaded {len(servers)} server(s)")

    return replace(
        state,
        servers=servers,
        selected_index=min(state.selected_index, max(0, len(servers) - 1)),
        has_changes=False,
    )


def toggle_selected(state: AppState) -> AppState:
    """Toggle the enabled state of the selected server."""
    if not state.servers:
        return state

    servers = list(state.servers)
    servers[state.selected_index] = servers[state.selected_index].toggled()
    return replace(state, servers=tuple(servers), has_changes=True)


def move_up(state: AppState) -> AppState:
    """Move the selection up one row, stopping at the first server."""
    if not state.servers:
        return state
    return replace(state, selected_index=max(0, state.selected_index - 1))


def move_down(state: AppState) -> AppState:
    """Move the selection down one row, stopping at the last server."""
    if not state.servers:
        return state
    return replace(
        state, selected_index=min(len(state.servers) - 1, state.selected_index + 1)
    )


def save_state(state: AppState, stores: Optional[ConfigStores] = None) -> AppState:
    """Write enabled servers to the Claude config and disabled ones to helpy storage.

    The two files are written one after the other. If either write fails the
    exception propagates and the caller keeps its unsaved state.

    Returns:
        The same state with has_changes cleared

    Raises:
        StoreError: If either store cannot be written
    """
    stores = stores or ConfigStores()
    enabled = {server.name: server.config for server in state.servers if server.enabled}
    disabled = {server.name: server.config for server in state.servers if not server.enabled}

    stores.active.write(enabled)
    stores.disabled.write(disabled)
    logger.info(f"Saved {len(enabled)} enabled and {len(disabled)} disabled server(s)")

    return replace(state, has_changes=False)


def get_selected_server(state: AppState) -> Optional[ServerEntry]:
    """Get the currently selected server, or None if nothing is selected."""
    if not 0 <= state.selected_index < len(state.servers):
        return None
    return state.servers[state.selected_index]
