"""
Local File Storage Implementation

Each key is kept in its own JSON file inside one directory:
    <directory>/<key>.json

TRADEOFFS:
- Every write replaces the whole file (fine for a personal invoice log)
- No locking; two sessions writing at once can lose an update
- Writes go to a temp file first and are renamed into place, so a
  crash mid-write leaves the previous contents intact
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from bizinvoice.services.storage.interface import (
    KeyValueStorageInterface,
    PersistenceReadError,
    StorageError,
    check_key,
)


class LocalFileStorage(KeyValueStorageInterface):
    """Key-value storage backed by one file per key."""

    def __init__(self, directory: Union[str, Path]):
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        """File that holds the value for a key."""
        return self._directory / f"{check_key(key)}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceReadError(f"Could not read {path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._directory,
                prefix=f".{key}.",
                suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Could not write {path}: {e}") from e

    def remove_item(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Could not remove {path}: {e}") from e
