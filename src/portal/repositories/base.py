"""Base repository with common CRUD operations over a blob store collection."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from src.portal.core.storage import BlobStore, Record
from src.portal.models.base import RecordModel, generate_id, utc_now

_READ_ONLY_FIELDS = frozenset({"id", "created_at"})


ModelType = TypeVar("ModelType", bound=RecordModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common collection operations.

    Every write reads the whole collection, changes it, and writes the whole
    collection back through BlobStore.mutate(). Records are never deleted.
    """

    model: type[ModelType]
    collection: str
    id_prefix: str
    # Whether create() stamps created_at
    timestamped: bool = True

    def __init__(self, store: BlobStore):
        self.store = store

    def get_all(self) -> list[ModelType]:
        """All records in insertion order."""
        return [self.model.from_record(r) for r in self.store.load(self.collection)]

    def get_by_id(self, id: str) -> ModelType | None:
        """Get a record by id. None when absent."""
        return next((item for item in self.get_all() if item.id == id), None)

    def find(self, predicate: Callable[[ModelType], bool]) -> list[ModelType]:
        """Records matching predicate, in insertion order."""
        return [item for item in self.get_all() if predicate(item)]

    def filter_by(self, **fields: Any) -> list[ModelType]:
        """Records whose attributes equal all the given values."""
        return self.find(
            lambda item: all(getattr(item, name) == value for name, value in fields.items())
        )

    def create(self, fields: dict[str, Any]) -> ModelType:
        """Create a record, assigning a fresh id and creation time.

        Any id or created_at in fields is ignored. Raises
        pydantic.ValidationError if the fields don't form a valid record.
        """
        data = {k: v for k, v in fields.items() if k not in _READ_ONLY_FIELDS}
        data["id"] = generate_id(self.id_prefix)
        if self.timestamped:
            data["created_at"] = utc_now()
        record = self.model.model_validate(data).to_record()

        self.store.mutate(self.collection, lambda records: records.append(record))
        return self.model.from_record(record)

    def update(self, id: str, changes: dict[str, Any]) -> ModelType | None:
        """Shallow-merge changes into an existing record.

        Returns the updated record, or None if no record has this id.
        """
        changes = {k: v for k, v in changes.items() if k not in _READ_ONLY_FIELDS}
        updated = self.store.mutate(
            self.collection, lambda records: self._merge_into(records, id, changes)
        )
        return self.model.from_record(updated) if updated is not None else None

    def _merge_into(
        self, records: list[Record], id: str, changes: dict[str, Any]
    ) -> Record | None:
        """Merge changes into the record with this id inside a loaded collection."""
        for index, record in enumerate(records):
            if record.get("id") != id:
                continue
            current = self.model.from_record(record)
            merged = self.model.model_validate({**current.model_dump(), **changes})
            records[index] = merged.to_record()
            return records[index]
        return None
