"""Custom exceptions for the store and persistence layer."""

from pathlib import Path
from typing import Union


class StoreError(Exception):
    """Base exception for all store-related errors."""

    pass


class StoreReadError(StoreError):
    """Exception raised when a store file exists but cannot be parsed."""

    pass


class AtomicWriteError(StoreError):
    """Exception raised when a file could not be replaced atomically."""

    def __init__(self, path: Union[str, Path], cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to write {self.path}: {cause}")
