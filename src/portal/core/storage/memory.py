"""In-process blob store."""

from src.portal.core.storage.base import BlobStore


class MemoryBlobStore(BlobStore):
    """Keeps blobs as JSON strings in a dict.

    Values are serialized on write, so records handed back by load() never
    alias what the store holds.
    """

    def __init__(self, key_prefix: str = "university_project"):
        super().__init__(key_prefix)
        self._data: dict[str, str] = {}

    def _read(self, key: str) -> str | None:
        return self._data.get(key)

    def _write(self, key: str, value: str) -> None:
        self._data[key] = value

    def _delete(self, key: str) -> None:
        self._data.pop(key, None)
