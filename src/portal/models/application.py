"""Application record."""

from datetime import datetime

from pydantic import Field

from src.portal.models.base import RecordModel, utc_now
from src.portal.models.enums import ApplicationStatus


class Application(RecordModel):
    """A student's application to a project.

    student_name and cgpa are snapshots taken when the application is
    submitted and are not kept in sync with the user record.
    """

    project_id: str
    student_id: str
    student_name: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    created_at: datetime = Field(default_factory=utc_now)
    note: str = ""
    cgpa: float | None = None
