"""Repository layer - data access abstraction over the blob store."""

from src.portal.repositories.application import ApplicationRepository
from src.portal.repositories.base import BaseRepository
from src.portal.repositories.meeting import MeetingRepository
from src.portal.repositories.project import ProjectRepository
from src.portal.repositories.user import UserRepository

__all__ = [
    "ApplicationRepository",
    "BaseRepository",
    "MeetingRepository",
    "ProjectRepository",
    "UserRepository",
]
