"""CLI Helper Functions for MCP Helpy Helperton.

This module provides helpers shared by the CLI commands:
- Logging setup for the command group
- Access to the stores selected on the command line
- Table formatting for non-interactive output
"""

import logging
import sys
from typing import Iterable

import click
from tabulate import tabulate

from mcp_helperton.models.server import ServerEntry
from mcp_helperton.services.stores import ConfigStores

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, DEBUG when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def get_stores(ctx: click.Context) -> ConfigStores:
    """Get the stores configured on the root command.

    Commands invoked on their own (as in tests) fall back to the platform
    default locations.
    """
    stores = ctx.find_object(ConfigStores)
    return stores if stores is not None else ConfigStores()


def format_server_table(servers: Iterable[ServerEntry]) -> str:
    """Format servers as a table with project-wide defaults."""
    headers = ["STATUS", "NAME", "COMMAND / URL"]
    rows = []
    for server in servers:
        status = click.style("enabled", fg="green") if server.enabled else click.style("disabled", fg="bright_black")
        rows.append([status, server.name, server.summary()])
    return tabulate(rows, headers=headers, tablefmt="simple")
