"""Main CLI entry point for MCP Helpy Helperton."""

from pathlib import Path

import click

from ..services.stores import ConfigStores
from .commands.enable import disable, enable
from .commands.list_servers import list_servers
from .commands.paths import paths
from .commands.ui import ui
from .helpers import configure_logging


@click.group(invoke_without_command=True)
@click.option('--active-store', type=click.Path(dir_okay=False, path_type=Path),
              envvar='MCP_HELPERTON_CLAUDE_CONFIG',
              help='Claude config file (default: ~/.claude.json)')
@click.option('--disabled-store', type=click.Path(dir_okay=False, path_type=Path),
              envvar='MCP_HELPERTON_STORE',
              help='Disabled servers file (default: platform config directory)')
@click.option('--verbose', '-v', is_flag=True, help='Log debug output to stderr')
@click.pass_context
def cli(ctx, active_store, disabled_store, verbose):
    """MCP Helpy Helperton - enable and disable Claude Code MCP servers"""
    configure_logging(verbose)
    ctx.obj = ConfigStores.from_paths(active_store, disabled_store)

    if ctx.invoked_subcommand is None:
        ctx.invoke(ui)


# Register commands
cli.add_command(ui)
cli.add_command(list_servers, name='list')
cli.add_command(enable)
cli.add_command(disable)
cli.add_command(paths)


if __name__ == '__main__':
    cli()
