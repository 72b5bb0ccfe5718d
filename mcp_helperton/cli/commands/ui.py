"""Interactive toggle screen command."""

import time

import click
from rich.console import Console
from rich.live import Live

from ...core.exceptions import StoreError
from ..helpers import get_stores
from ..helpers.toggle_screen import ToggleScreen

SAVED_DISPLAY_SECONDS = 0.5


def read_key() -> str:
    """Read one key press; Ctrl-C arrives as the raw ^C character."""
    try:
        return click.getchar()
    except KeyboardInterrupt:
        return "\x03"


@click.command()
@click.pass_context
def ui(ctx):
    """Toggle MCP servers on and off in an interactive list."""
    console = Console()
    screen = ToggleScreen(get_stores(ctx), height=console.size.height)

    try:
        screen.refresh()
    except StoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(1)

    with Live(screen.render(), console=console, screen=True, auto_refresh=False) as live:
        while True:
            screen.height = console.size.height
            running = screen.handle_key(read_key())
            live.update(screen.render(), refresh=True)
            if not running:
                break
        if screen.saved:
            time.sleep(SAVED_DISPLAY_SECONDS)
