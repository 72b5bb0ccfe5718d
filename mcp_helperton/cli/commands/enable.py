"""Enable/disable a single MCP server without the interactive screen."""

import click
from rich.console import Console

from ...core.exceptions import StoreError
from ..helpers import get_stores


@click.command()
@click.argument('name')
@click.pass_context
def enable(ctx, name: str):
    """Move a disabled server back into the Claude config."""
    console = Console()
    stores = get_stores(ctx)

    try:
        if name in stores.active.read():
            console.print(f"[yellow]MCP server '{name}' is already enabled[/yellow]")
            return

        config = stores.disabled.read().get(name)
        if config is None:
            console.print(f"[red]MCP server '{name}' not found[/red]")
            ctx.exit(1)

        # Claude config first, so a failure in between never loses the server
        stores.active.add_server(name, config)
        stores.disabled.remove_server(name)
        console.print(f"[green]Enabled MCP server '{name}'[/green]")

    except StoreError as e:
        console.print(f"[red]Error enabling MCP server: {e}[/red]")
        ctx.exit(1)


@click.command()
@click.argument('name')
@click.pass_context
def disable(ctx, name: str):
    """Move an enabled server out of the Claude config into helpy storage."""
    console = Console()
    stores = get_stores(ctx)

    try:
        config = stores.active.read().get(name)
        if config is None:
            if stores.disabled.is_disabled(name):
                console.print(f"[yellow]MCP server '{name}' is already disabled[/yellow]")
                return
            console.print(f"[red]MCP server '{name}' not found[/red]")
            ctx.exit(1)

        # helpy storage first, so a failure in between never loses the server
        stores.disabled.add_server(name, config)
        stores.active.remove_server(name)
        console.print(f"[green]Disabled MCP server '{name}'[/green]")

    except StoreError as e:
        console.print(f"[red]Error disabling MCP server: {e}[/red]")
        ctx.exit(1)
