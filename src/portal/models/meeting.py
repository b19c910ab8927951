"""Meeting record."""

from datetime import datetime

from pydantic import field_validator

from src.portal.models.base import RecordModel, ensure_utc
from src.portal.models.enums import MeetingStatus


class Meeting(RecordModel):
    """A meeting between a faculty member and a student about a project."""

    project_id: str
    faculty_id: str
    student_id: str
    scheduled_at: datetime
    status: MeetingStatus = MeetingStatus.SCHEDULED
    title: str
    description: str = ""
    location: str | None = None
    meeting_link: str | None = None

    @field_validator("scheduled_at")
    @classmethod
    def normalize_scheduled_at(cls, v: datetime) -> datetime:
        return ensure_utc(v)
