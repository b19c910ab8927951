"""Persistence backends for the entity store."""

from src.portal.core.config import Settings, get_settings
from src.portal.core.logging import get_logger
from src.portal.core.redis import get_redis
from src.portal.core.storage.base import SESSION_SLOT, BlobStore, Record
from src.portal.core.storage.json_file import JsonFileBlobStore
from src.portal.core.storage.memory import MemoryBlobStore
from src.portal.core.storage.redis import RedisBlobStore

logger = get_logger(__name__)


def create_blob_store(settings: Settings | None = None) -> BlobStore:
    """Build the blob store selected by settings.storage_backend.

    A configured but unreachable Redis degrades to the in-memory store.
    """
    settings = settings or get_settings()
    prefix = settings.storage_key_prefix

    if settings.storage_backend == "json":
        return JsonFileBlobStore(settings.storage_path, key_prefix=prefix)

    if settings.storage_backend == "redis":
        client = get_redis()
        if client is not None:
            return RedisBlobStore(
                client,
                key_prefix=prefix,
                max_retries=settings.redis_transaction_retries,
            )
        logger.warning("Redis storage requested but unavailable, using in-memory store")

    return MemoryBlobStore(key_prefix=prefix)


__all__ = [
    "SESSION_SLOT",
    "BlobStore",
    "JsonFileBlobStore",
    "MemoryBlobStore",
    "Record",
    "RedisBlobStore",
    "create_blob_store",
]
