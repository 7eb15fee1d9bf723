"""DataStore protocol."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from result import Result

from .models import DataStoreError


class DataStore(Protocol):
    """Protocol for whole-file storage: read everything, replace everything."""

    @property
    def path(self) -> Path: ...

    def exists(self) -> bool: ...

    def read(self) -> Result[bytes | None, DataStoreError]: ...

    def write(self, data: bytes) -> Result[None, DataStoreError]: ...
