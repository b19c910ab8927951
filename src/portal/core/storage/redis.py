"""Blob store backed by Redis string keys.

mutate() runs inside a WATCH/MULTI transaction, so two writers racing on
the same collection retry instead of silently dropping one another's
records.
"""

from collections.abc import Callable
from typing import TypeVar

from redis import Redis
from redis.exceptions import WatchError

from src.portal.core.exceptions import ConcurrentUpdateError
from src.portal.core.logging import get_logger
from src.portal.core.storage.base import BlobStore, Record

T = TypeVar("T")

logger = get_logger(__name__)


class RedisBlobStore(BlobStore):
    """One Redis string per collection key."""

    def __init__(
        self,
        client: Redis,
        key_prefix: str = "university_project",
        max_retries: int = 5,
    ):
        super().__init__(key_prefix)
        self.client = client
        self.max_retries = max_retries

    def _read(self, key: str) -> str | None:
        value = self.client.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def _write(self, key: str, value: str) -> None:
        self.client.set(key, value)

    def _delete(self, key: str) -> None:
        self.client.delete(key)

    def mutate(self, collection: str, fn: Callable[[list[Record]], T]) -> T:
        """Optimistic read-modify-write of a whole collection.

        fn may be called more than once, each time with a freshly loaded list.
        """
        key = self.key_for(collection)
        with self.client.pipeline() as pipe:
            for attempt in range(1, self.max_retries + 1):
                try:
                    pipe.watch(key)
                    raw = pipe.get(key)
                    if isinstance(raw, bytes):
                        raw = raw.decode("utf-8")
                    records = self._decode_records(key, raw)
                    result = fn(records)
                    pipe.multi()
                    pipe.set(key, self._encode(records))
                    pipe.execute()
                    return result
                except WatchError:
                    logger.info("Concurrent write detected, retrying", key=key, attempt=attempt)
                    continue
        raise ConcurrentUpdateError(
            f"Gave up updating '{key}' after {self.max_retries} attempts", key=key
        )
