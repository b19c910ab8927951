"""Blob store backed by one JSON file per key."""

import os
import tempfile
from pathlib import Path

from src.portal.core.exceptions import StorageError
from src.portal.core.logging import get_logger
from src.portal.core.storage.base import BlobStore

logger = get_logger(__name__)


class JsonFileBlobStore(BlobStore):
    """Stores each key as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory and are moved into
    place with os.replace, so a crash never leaves a half-written blob.
    """

    def __init__(self, directory: str | Path, key_prefix: str = "university_project"):
        super().__init__(key_prefix)
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def _read(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Could not read {path}: {e}", key=key) from e

    def _write(self, key: str, value: str) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Could not write {path}: {e}", key=key) from e
        logger.debug("Blob written", key=key, path=str(path))

    def _delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
