"""Markd DataStore module."""

from .file import FileDataStore
from .models import DataStoreError, DataStoreReadError, DataStoreWriteError
from .protocol import DataStore

__all__ = [
    "DataStore",
    "DataStoreError",
    "DataStoreReadError",
    "DataStoreWriteError",
    "FileDataStore",
]
