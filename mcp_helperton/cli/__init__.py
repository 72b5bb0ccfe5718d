"""Command line interface for MCP Helpy Helperton."""
