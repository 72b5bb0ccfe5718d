"""Core functionality for MCP Helpy Helperton."""

from .atomic_writer import write_atomically
from .exceptions import AtomicWriteError, StoreError, StoreReadError

__all__ = [
    'write_atomically',
    'AtomicWriteError',
    'StoreError',
    'StoreReadError'
]
