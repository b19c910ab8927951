import threading
import time
from datetime import UTC, datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_id_lock = threading.Lock()
_last_id_stamp = 0


def utc_now() -> datetime:
    """Return current UTC time as an aware datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def generate_id(prefix: str) -> str:
    """Return ``<prefix><milliseconds>``, strictly increasing within the process.

    Two calls in the same millisecond get consecutive stamps. Uniqueness
    across processes is best-effort only.
    """
    global _last_id_stamp
    with _id_lock:
        stamp = max(time.time_ns() // 1_000_000, _last_id_stamp + 1)
        _last_id_stamp = stamp
    return f"{prefix}{stamp}"


class RecordModel(BaseModel):
    """Base for stored records.

    Attributes are snake_case in Python and camelCase in the stored JSON.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str

    def to_record(self) -> dict[str, Any]:
        """Serialize to the JSON-compatible dict written to the store."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Self:
        return cls.model_validate(record)
