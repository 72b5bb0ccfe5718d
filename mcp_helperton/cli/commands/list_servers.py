"""List MCP servers command."""

import click

from ...core import state as app_state
from ...core.exceptions import StoreError
from ..helpers import format_server_table, get_stores


@click.command()
@click.pass_context
def list_servers(ctx):
    """List enabled and disabled MCP servers."""
    try:
        current = app_state.load_servers(stores=get_stores(ctx))
    except StoreError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        ctx.exit(1)

    if not current.servers:
        click.echo("No MCP servers configured.")
        return

    click.echo(format_server_table(current.servers))
    enabled = sum(1 for server in current.servers if server.enabled)
    click.echo(f"\n{enabled} enabled, {len(current.servers) - enabled} disabled")
