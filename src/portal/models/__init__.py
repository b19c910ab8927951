"""Stored record models."""

from src.portal.models.application import Application
from src.portal.models.base import RecordModel, ensure_utc, generate_id, utc_now
from src.portal.models.enums import (
    ApplicationStatus,
    MeetingStatus,
    ProjectStatus,
    UserRole,
)
from src.portal.models.meeting import Meeting
from src.portal.models.project import MAX_TEAM_SIZE, Project, clamp_team_size
from src.portal.models.user import User

__all__ = [
    # Enums
    "ApplicationStatus",
    "MeetingStatus",
    "ProjectStatus",
    "UserRole",
    # Models
    "Application",
    "Meeting",
    "Project",
    "RecordModel",
    "User",
    # Helpers
    "MAX_TEAM_SIZE",
    "clamp_team_size",
    "ensure_utc",
    "generate_id",
    "utc_now",
]
