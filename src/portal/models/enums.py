"""Shared enums for models."""

from enum import Enum


class UserRole(str, Enum):
    """Portal role of a user."""

    STUDENT = "student"
    FACULTY = "faculty"


class ProjectStatus(str, Enum):
    """Project lifecycle status."""

    OPEN = "open"
    ASSIGNED = "assigned"
    CLOSED = "closed"


class ApplicationStatus(str, Enum):
    """Application status. ACCEPTED and REJECTED are terminal."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class MeetingStatus(str, Enum):
    """Meeting status. COMPLETED and CANCELLED are terminal."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
