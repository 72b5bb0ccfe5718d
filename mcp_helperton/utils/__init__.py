"""Utilities for MCP Helpy Helperton."""

from .path_finder import PathFinder

__all__ = [
    'PathFinder'
]
