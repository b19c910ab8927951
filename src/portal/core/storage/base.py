"""Key-value blob store contract.

Each collection is one blob holding the whole ordered list of records as
JSON. Writes replace the whole blob; there are no partial writes.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from src.portal.core.exceptions import StorageError

Record = dict[str, Any]

T = TypeVar("T")

SESSION_SLOT = "current_user"


class BlobStore(ABC):
    """Base class for persistence backends keyed by collection name."""

    def __init__(self, key_prefix: str = "university_project"):
        self.key_prefix = key_prefix

    def key_for(self, name: str) -> str:
        """Storage key for a collection or slot name."""
        return f"{self.key_prefix}_{name}"

    @abstractmethod
    def _read(self, key: str) -> str | None:
        """Return the raw blob stored under key, or None if absent."""

    @abstractmethod
    def _write(self, key: str, value: str) -> None:
        """Replace the blob stored under key."""

    @abstractmethod
    def _delete(self, key: str) -> None:
        """Remove key if present."""

    @staticmethod
    def _encode(value: Any) -> str:
        return json.dumps(value, ensure_ascii=False)

    @staticmethod
    def _decode_records(key: str, raw: str | None) -> list[Record]:
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupt JSON stored under '{key}': {e}", key=key) from e
        if not isinstance(data, list):
            raise StorageError(
                f"Expected a JSON array under '{key}', got {type(data).__name__}", key=key
            )
        return data

    def load(self, collection: str) -> list[Record]:
        """Load a collection. Absent collections load as an empty list."""
        key = self.key_for(collection)
        return self._decode_records(key, self._read(key))

    def store(self, collection: str, records: list[Record]) -> None:
        """Overwrite a whole collection."""
        self._write(self.key_for(collection), self._encode(records))

    def mutate(self, collection: str, fn: Callable[[list[Record]], T]) -> T:
        """Read a collection, let fn modify the list in place, write it back.

        Returns whatever fn returns. The base implementation is plain
        last-writer-wins; backends with transactions override it.
        """
        records = self.load(collection)
        result = fn(records)
        self.store(collection, records)
        return result

    def load_session(self) -> Record | None:
        """Load the current session identity, if any."""
        key = self.key_for(SESSION_SLOT)
        raw = self._read(key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupt JSON stored under '{key}': {e}", key=key) from e
        return data if isinstance(data, dict) else None

    def store_session(self, record: Record | None) -> None:
        """Set the current session identity. None clears it."""
        key = self.key_for(SESSION_SLOT)
        if record is None:
            self._delete(key)
        else:
            self._write(key, self._encode(record))

    def has(self, collection: str) -> bool:
        """Whether anything has been stored for a collection yet."""
        return self._read(self.key_for(collection)) is not None
