"""Redis client with connection pooling and graceful fallback.

Redis is optional. If it is not configured or unreachable, callers get None
and should fall back to another storage backend.
"""

from redis import ConnectionPool, Redis
from redis.exceptions import RedisError

from src.portal.core.config import get_settings
from src.portal.core.logging import get_logger

logger = get_logger(__name__)

_pool: ConnectionPool | None = None
_redis: Redis | None = None
_connection_attempted: bool = False


def get_redis() -> Redis | None:
    """Get Redis client. Returns None if unavailable (graceful degradation).

    The connection is lazily initialized on first call and reused thereafter.
    """
    global _pool, _redis, _connection_attempted

    if _redis is not None:
        return _redis

    # Already tried and failed; don't retry until close_redis is called
    if _connection_attempted:
        return None

    _connection_attempted = True
    settings = get_settings()

    if not settings.redis_url:
        logger.info("Redis not configured (REDIS_URL not set)")
        return None

    try:
        _pool = ConnectionPool.from_url(settings.redis_url, decode_responses=True)
        _redis = Redis(connection_pool=_pool)
        _redis.ping()
        logger.info("Redis connected successfully")
        return _redis

    except RedisError as e:
        logger.warning(f"Redis connection failed: {e}. Falling back to non-Redis mode.")
        if _redis:
            _redis.close()
            _redis = None
        if _pool:
            _pool.disconnect()
            _pool = None
        return None


def close_redis() -> None:
    """Close Redis connection pool."""
    global _pool, _redis, _connection_attempted

    if _redis:
        _redis.close()
        logger.info("Redis connection closed")
    if _pool:
        _pool.disconnect()

    _redis = None
    _pool = None
    _connection_attempted = False


def reset_redis_state() -> None:
    """Reset Redis state for testing purposes."""
    global _pool, _redis, _connection_attempted
    _redis = None
    _pool = None
    _connection_attempted = False
