"""Interactive toggle screen rendered with rich.

The screen owns the only mutable reference to the application state. Key
presses are dispatched to the pure transitions in ``core.state`` and the
result replaces the held state; ``render`` builds a fresh renderable from it.
"""

import logging
from typing import List, Optional

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from mcp_helperton.core import state as app_state
from mcp_helperton.core.constants import APP_TITLE, HELP_LINE
from mcp_helperton.core.exceptions import StoreError
from mcp_helperton.models.server import AppState
from mcp_helperton.services.stores import ConfigStores

logger = logging.getLogger(__name__)

# Raw key sequences as returned by click.getchar() on POSIX and Windows
UP_KEYS = frozenset({"\x1b[A", "\x1bOA", "\xe0H", "\x00H", "k"})
DOWN_KEYS = frozenset({"\x1b[B", "\x1bOB", "\xe0P", "\x00P", "j"})
TOGGLE_KEYS = frozenset({"\r", "\n", " "})
SAVE_KEYS = frozenset({"s", "S"})
QUIT_KEYS = frozenset({"q", "Q", "\x1b", "\x03"})
CONFIRM_KEYS = frozenset({"y", "Y"})
CANCEL_KEYS = frozenset({"n", "N", "\x1b"})

# Rows taken by the border, title, status and help lines
CHROME_HEIGHT = 6


class ToggleScreen:
    """Key handling and rendering for the server toggle list."""

    def __init__(self, stores: ConfigStores, height: int = 24):
        self.stores = stores
        self.height = height
        self.state: AppState = app_state.create_state()
        self.message: Optional[str] = None
        self.message_style = "grey50"
        self.confirming = False
        self.saved = False
        self.scroll_top = 0

    def refresh(self) -> None:
        """Reload both stores.

        Raises:
            StoreReadError: If either store cannot be parsed
        """
        self.state = app_state.load_servers(self.state, self.stores)
        self.message = None

    def handle_key(self, key: str) -> bool:
        """Apply a key press. Returns False when the screen should close."""
        if self.confirming:
            return self._handle_confirm(key)

        if key in UP_KEYS:
            self.state = app_state.move_up(self.state)
        elif key in DOWN_KEYS:
            self.state = app_state.move_down(self.state)
        elif key in TOGGLE_KEYS:
            self.state = app_state.toggle_selected(self.state)
            self.message = None
        elif key in SAVE_KEYS:
            return not self._save()
        elif key in QUIT_KEYS:
            if self.state.has_changes:
                self.confirming = True
            else:
                return False
        return True

    def _handle_confirm(self, key: str) -> bool:
        if key in CONFIRM_KEYS:
            return False
        if key in CANCEL_KEYS:
            self.confirming = False
        return True

    def _save(self) -> bool:
        try:
            self.state = app_state.save_state(self.state, self.stores)
        except StoreError as e:
            logger.debug(f"Save failed: {e}")
            self.message, self.message_style = f"Error: {e}", "red"
            return False
        self.message, self.message_style = "Saved!", "green"
        self.saved = True
        return True

    def status(self) -> Text:
        """Status line reflecting the last action or the unsaved changes."""
        if self.message:
            return Text(self.message, style=self.message_style)
        if not self.state.servers:
            return Text("No MCP servers configured", style="grey50")
        if self.state.has_changes:
            return Text("* Unsaved changes (press s to save)", style="yellow")
        return Text("")

    def _visible_rows(self) -> int:
        return max(1, self.height - CHROME_HEIGHT)

    def _scroll_to_selection(self) -> None:
        rows = self._visible_rows()
        selected = self.state.selected_index
        if selected < self.scroll_top:
            self.scroll_top = selected
        elif selected >= self.scroll_top + rows:
            self.scroll_top = selected - rows + 1

    def render_list(self) -> List[Text]:
        """One line per visible server."""
        if not self.state.servers:
            return [Text("  No MCP servers found.", style="grey50")]

        self._scroll_to_selection()
        lines = []
        end = self.scroll_top + self._visible_rows()
        for index, server in enumerate(self.state.servers[self.scroll_top:end], self.scroll_top):
            selected = index == self.state.selected_index
            checkbox = "[✓]" if server.enabled else "[ ]"
            prefix = ">" if selected else " "
            if selected:
                style = "bold white"
            else:
                style = "green" if server.enabled else "grey50"
            line = Text(f"{prefix} {checkbox} {server.name}", style=style)
            summary = server.summary()
            if summary:
                line.append(f"  {summary}", style="dim")
            lines.append(line)
        return lines

    def render(self) -> RenderableType:
        """Build the whole screen."""
        body: List[RenderableType] = list(self.render_list())
        body.extend([Text(""), self.status()])
        if self.confirming:
            body.append(
                Panel(
                    Text("Discard unsaved changes?\n[y] Yes  [n] No", justify="center"),
                    border_style="yellow",
                    expand=False,
                )
            )
        return Panel(
            Group(*body),
            title=f" {APP_TITLE} ",
            subtitle=f" {HELP_LINE} ",
            border_style="cyan",
        )
