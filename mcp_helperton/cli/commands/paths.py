"""Show where the stores live."""

import click

from ..helpers import get_stores


def _describe(label: str, path) -> str:
    marker = click.style("✓", fg="green") if path.exists() else click.style("✗", fg="bright_black")
    return f"{marker} {label:<16} {path}"


@click.command()
@click.pass_context
def paths(ctx):
    """Show the resolved configuration file locations."""
    stores = get_stores(ctx)
    click.echo(_describe("Claude config", stores.active.config_file))
    click.echo(_describe("Claude backup", stores.active.backup_file))
    click.echo(_describe("Disabled servers", stores.disabled.config_file))
