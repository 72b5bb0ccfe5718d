"""MCP Helpy Helperton - toggle Claude Code MCP servers from the terminal."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
