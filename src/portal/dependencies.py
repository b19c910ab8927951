"""Repository and service factories.

The presentation layer is expected to build one Portal per store and call
the services on it.
"""

from dataclasses import dataclass

from src.portal.core.config import Settings, get_settings
from src.portal.core.logging import get_logger
from src.portal.core.storage import BlobStore, create_blob_store
from src.portal.repositories import (
    ApplicationRepository,
    MeetingRepository,
    ProjectRepository,
    UserRepository,
)
from src.portal.seed import initialize_database
from src.portal.services import AdmissionService, AuthService, MeetingService

logger = get_logger(__name__)


def get_user_repository(store: BlobStore) -> UserRepository:
    return UserRepository(store)


def get_project_repository(store: BlobStore) -> ProjectRepository:
    return ProjectRepository(store)


def get_application_repository(store: BlobStore) -> ApplicationRepository:
    return ApplicationRepository(store)


def get_meeting_repository(store: BlobStore) -> MeetingRepository:
    return MeetingRepository(store)


def get_admission_service(store: BlobStore, settings: Settings) -> AdmissionService:
    """Get admission service over the given store."""
    return AdmissionService(
        get_project_repository(store),
        get_application_repository(store),
        get_user_repository(store),
        settings,
    )


def get_meeting_service(store: BlobStore, settings: Settings) -> MeetingService:
    """Get meeting service over the given store."""
    return MeetingService(
        get_meeting_repository(store),
        get_project_repository(store),
        get_application_repository(store),
        get_user_repository(store),
        settings,
    )


def get_auth_service(store: BlobStore) -> AuthService:
    """Get auth service over the given store."""
    return AuthService(get_user_repository(store), store)


@dataclass(frozen=True)
class Portal:
    """Services sharing one store and one settings object."""

    store: BlobStore
    settings: Settings
    auth: AuthService
    admissions: AdmissionService
    meetings: MeetingService


def build_portal(settings: Settings | None = None, store: BlobStore | None = None) -> Portal:
    """Wire a Portal. Seeds demo data when settings.seed_demo_data is set."""
    settings = settings or get_settings()
    store = store if store is not None else create_blob_store(settings)

    if settings.seed_demo_data:
        initialize_database(store)

    logger.info(
        "Portal initialized",
        storage=type(store).__name__,
        strict_transitions=settings.strict_status_transitions,
        missing_cgpa_policy=settings.missing_cgpa_policy,
    )
    return Portal(
        store=store,
        settings=settings,
        auth=get_auth_service(store),
        admissions=get_admission_service(store, settings),
        meetings=get_meeting_service(store, settings),
    )
