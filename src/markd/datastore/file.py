"""File-based DataStore implementation."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from result import Err, Ok, Result

from markd.common import create_logger

from .models import DataStoreError, DataStoreReadError, DataStoreWriteError

logger = create_logger("datastore")


class FileDataStore:
    """File-based implementation of DataStore protocol.

    Writes go to a temporary file next to the target which is then renamed
    over it, so a crash mid-write never leaves a truncated file behind.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read(self) -> Result[bytes | None, DataStoreError]:
        if not self._path.exists():
            logger.debug("Data file not found", path=str(self._path))
            return Ok(None)

        try:
            return Ok(self._path.read_bytes())
        except OSError as e:
            logger.error("Data file read error", path=str(self._path), error=str(e))
            return Err(
                DataStoreReadError(
                    path=self._path,
                    message=f"Failed to read data: {e}",
                )
            )

    def write(self, data: bytes) -> Result[None, DataStoreError]:
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
            logger.debug("Data file written", path=str(self._path), size=len(data))
            return Ok(None)

        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            logger.error("Data file write error", path=str(self._path), error=str(e))
            return Err(
                DataStoreWriteError(
                    path=self._path,
                    message=f"Failed to save data: {e}",
                )
            )
