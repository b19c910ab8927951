from collections.abc import Generator
from contextlib import contextmanager

from src.portal.core.config import Settings, get_settings
from src.portal.core.logging import clear_request_context, get_logger, setup_logging
from src.portal.core.redis import close_redis
from src.portal.core.storage import BlobStore
from src.portal.dependencies import Portal, build_portal

logger = get_logger(__name__)


@contextmanager
def lifespan(
    settings: Settings | None = None, store: BlobStore | None = None
) -> Generator[Portal]:
    """Portal lifespan - startup and shutdown.

    Usage:
        with lifespan() as portal:
            portal.admissions.submit_application(...)
    """
    settings = settings or get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    portal = build_portal(settings, store)
    try:
        yield portal
    finally:
        logger.info("Closing connections...")
        close_redis()
        clear_request_context()
        logger.info("Shutdown complete")
