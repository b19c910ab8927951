"""Status transition tables.

These are only consulted when settings.strict_status_transitions is on.
The default mode overwrites statuses directly, which is what allows a
closed project to be reopened.
"""

from enum import Enum
from typing import TypeVar

from src.portal.models import ApplicationStatus, MeetingStatus, ProjectStatus

PROJECT_TRANSITIONS: dict[ProjectStatus, frozenset[ProjectStatus]] = {
    ProjectStatus.OPEN: frozenset({ProjectStatus.ASSIGNED, ProjectStatus.CLOSED}),
    ProjectStatus.ASSIGNED: frozenset({ProjectStatus.CLOSED}),
    ProjectStatus.CLOSED: frozenset({ProjectStatus.OPEN}),
}

APPLICATION_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED}),
    ApplicationStatus.ACCEPTED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}

MEETING_TRANSITIONS: dict[MeetingStatus, frozenset[MeetingStatus]] = {
    MeetingStatus.SCHEDULED: frozenset({MeetingStatus.COMPLETED, MeetingStatus.CANCELLED}),
    MeetingStatus.COMPLETED: frozenset(),
    MeetingStatus.CANCELLED: frozenset(),
}

S = TypeVar("S", bound=Enum)


def can_transition(table: dict[S, frozenset[S]], current: S, target: S) -> bool:
    """Whether target is reachable from current in one step.

    Staying in the same status is always allowed.
    """
    return current == target or target in table.get(current, frozenset())
