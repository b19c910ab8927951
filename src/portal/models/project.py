"""Project record."""

from datetime import datetime

from pydantic import Field, field_validator

from src.portal.models.base import RecordModel, ensure_utc, utc_now
from src.portal.models.enums import ProjectStatus

# Hard cap on team size, applied to every create, update and load.
MAX_TEAM_SIZE = 7


def clamp_team_size(value: int) -> int:
    return min(value, MAX_TEAM_SIZE)


class Project(RecordModel):
    """A project published by a faculty member.

    faculty_name is a snapshot of the owner's name at creation time.
    """

    title: str
    description: str = ""
    requirements: str = ""
    faculty_id: str
    faculty_name: str
    status: ProjectStatus = ProjectStatus.OPEN
    created_at: datetime = Field(default_factory=utc_now)
    deadline: datetime | None = None
    max_students: int = Field(ge=1)
    min_cgpa: float | None = Field(default=None, ge=0, le=10, alias="minCGPA")

    @field_validator("max_students")
    @classmethod
    def cap_max_students(cls, v: int) -> int:
        return clamp_team_size(v)

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v) if v is not None else v
