"""CLI commands for MCP Helpy Helperton."""
