"""Root test fixtures shared across all test types.

Every test gets a fresh in-memory store unless it asks for another backend.
"""

import os

# Set APP_ENV to testing before any app imports
os.environ.setdefault("APP_ENV", "testing")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator

import fakeredis
import pytest
from redis import Redis

from src.portal.core import redis as redis_core
from src.portal.core.config import Settings, get_settings
from src.portal.core.storage import MemoryBlobStore
from src.portal.dependencies import Portal, build_portal
from src.portal.models import User
from src.portal.repositories import (
    ApplicationRepository,
    MeetingRepository,
    ProjectRepository,
    UserRepository,
)
from src.portal.services import AdmissionService, AuthService, MeetingService
from tests.helpers import create_faculty, create_student

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


# --- Settings and storage ---


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any .env file."""
    return Settings(_env_file=None, app_env="testing")


@pytest.fixture
def strict_settings() -> Settings:
    """Settings with transition tables enforced."""
    return Settings(_env_file=None, app_env="testing", strict_status_transitions=True)


@pytest.fixture
def store() -> MemoryBlobStore:
    return MemoryBlobStore()


# --- Repositories ---


@pytest.fixture
def user_repo(store: MemoryBlobStore) -> UserRepository:
    return UserRepository(store)


@pytest.fixture
def project_repo(store: MemoryBlobStore) -> ProjectRepository:
    return ProjectRepository(store)


@pytest.fixture
def application_repo(store: MemoryBlobStore) -> ApplicationRepository:
    return ApplicationRepository(store)


@pytest.fixture
def meeting_repo(store: MemoryBlobStore) -> MeetingRepository:
    return MeetingRepository(store)


# --- Services ---


@pytest.fixture
def admissions(
    project_repo: ProjectRepository,
    application_repo: ApplicationRepository,
    user_repo: UserRepository,
    settings: Settings,
) -> AdmissionService:
    return AdmissionService(project_repo, application_repo, user_repo, settings)


@pytest.fixture
def meetings(
    meeting_repo: MeetingRepository,
    project_repo: ProjectRepository,
    application_repo: ApplicationRepository,
    user_repo: UserRepository,
    settings: Settings,
) -> MeetingService:
    return MeetingService(meeting_repo, project_repo, application_repo, user_repo, settings)


@pytest.fixture
def auth(user_repo: UserRepository, store: MemoryBlobStore) -> AuthService:
    return AuthService(user_repo, store)


@pytest.fixture
def portal(settings: Settings, store: MemoryBlobStore) -> Portal:
    return build_portal(settings, store)


# --- Users ---


@pytest.fixture
def faculty(user_repo: UserRepository) -> User:
    return create_faculty(user_repo, name="Dr. Sarah Johnson")


@pytest.fixture
def student(user_repo: UserRepository) -> User:
    return create_student(user_repo, name="Alex Taylor", cgpa=8.0)


# --- Redis Test Fixtures ---


@pytest.fixture
def fake_redis() -> Generator[Redis]:
    """Provides a fakeredis client for testing.

    Returns an in-memory Redis implementation that behaves like
    a real Redis server but doesn't require external dependencies.
    """
    client = fakeredis.FakeRedis(decode_responses=True)
    yield client
    client.close()


@pytest.fixture
def mock_redis(fake_redis: Redis, monkeypatch: pytest.MonkeyPatch) -> Generator[Redis]:
    """Patches get_redis() to return the fakeredis client.

    Patches both src.portal.core.redis and src.portal.core.storage, which
    imports get_redis by name.
    """
    redis_core.reset_redis_state()

    def _get_fake_redis() -> Redis:
        return fake_redis

    monkeypatch.setattr("src.portal.core.redis.get_redis", _get_fake_redis)
    monkeypatch.setattr("src.portal.core.storage.get_redis", _get_fake_redis)
    yield fake_redis
    redis_core.reset_redis_state()


@pytest.fixture
def mock_redis_unavailable(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Patches get_redis() to return None (simulates Redis unavailable)."""
    redis_core.reset_redis_state()

    def _get_none() -> None:
        return None

    monkeypatch.setattr("src.portal.core.redis.get_redis", _get_none)
    monkeypatch.setattr("src.portal.core.storage.get_redis", _get_none)
    yield
    redis_core.reset_redis_state()
