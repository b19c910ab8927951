"""Meeting scheduling service.

Meetings are created as-is: there is no check for overlapping meetings of
the same participants or time slot.
"""

from datetime import datetime

from src.portal.core.config import Settings, get_settings
from src.portal.core.logging import get_logger
from src.portal.models import ApplicationStatus, Meeting, MeetingStatus, ensure_utc, utc_now
from src.portal.repositories import (
    ApplicationRepository,
    MeetingRepository,
    ProjectRepository,
    UserRepository,
)
from src.portal.schemas import MeetingCreate, MeetingUpdate
from src.portal.services.results import RejectionReason, Result
from src.portal.services.transitions import MEETING_TRANSITIONS, can_transition

logger = get_logger(__name__)


class MeetingService:
    """Service for creating and updating meetings."""

    def __init__(
        self,
        meeting_repo: MeetingRepository,
        project_repo: ProjectRepository,
        application_repo: ApplicationRepository,
        user_repo: UserRepository,
        settings: Settings | None = None,
    ):
        self.meeting_repo = meeting_repo
        self.project_repo = project_repo
        self.application_repo = application_repo
        self.user_repo = user_repo
        self.settings = settings or get_settings()

    def schedule_meeting(self, data: MeetingCreate) -> Result[Meeting]:
        """Create a SCHEDULED meeting."""
        if self.project_repo.get_by_id(data.project_id) is None:
            logger.info("Meeting rejected, project not found", project_id=data.project_id)
            return Result.rejected(RejectionReason.NOT_FOUND, "Project not found")

        organizer = self.user_repo.get_by_id(data.faculty_id)
        if organizer is None:
            logger.info("Meeting rejected, organizer not found", faculty_id=data.faculty_id)
            return Result.rejected(RejectionReason.NOT_FOUND, "Faculty user not found")
        if not organizer.is_faculty:
            logger.info("Meeting rejected, organizer is not faculty", user_id=organizer.id)
            return Result.rejected(
                RejectionReason.ROLE_MISMATCH, "Only faculty can schedule meetings"
            )

        meeting = self.meeting_repo.create(
            {**data.model_dump(), "status": MeetingStatus.SCHEDULED}
        )
        logger.info(
            "Meeting scheduled",
            meeting_id=meeting.id,
            project_id=meeting.project_id,
            faculty_id=meeting.faculty_id,
            student_id=meeting.student_id,
            scheduled_at=meeting.scheduled_at.isoformat(),
        )
        return Result.success(meeting)

    def schedule_for_application(
        self,
        application_id: str,
        faculty_id: str,
        scheduled_at: datetime,
        title: str | None = None,
        description: str = "",
        location: str | None = None,
        meeting_link: str | None = None,
    ) -> Result[Meeting]:
        """Schedule a meeting with the student behind an accepted application.

        Project and student come from the application. The title defaults to
        "Meeting for <project title>".
        """
        application = self.application_repo.get_by_id(application_id)
        if application is None:
            logger.info("Meeting rejected, application not found", application_id=application_id)
            return Result.rejected(RejectionReason.NOT_FOUND, "Application not found")
        if application.status != ApplicationStatus.ACCEPTED:
            logger.info(
                "Meeting rejected, application not accepted",
                application_id=application_id,
                status=application.status.value,
            )
            return Result.rejected(
                RejectionReason.APPLICATION_NOT_ACCEPTED,
                "Meetings can only be scheduled for accepted applications",
            )

        project = self.project_repo.get_by_id(application.project_id)
        if project is None:
            return Result.rejected(RejectionReason.NOT_FOUND, "Project not found")

        return self.schedule_meeting(
            MeetingCreate(
                project_id=project.id,
                faculty_id=faculty_id,
                student_id=application.student_id,
                scheduled_at=scheduled_at,
                title=title or f"Meeting for {project.title}",
                description=description,
                location=location,
                meeting_link=meeting_link,
            )
        )

    def set_meeting_status(self, meeting_id: str, status: MeetingStatus) -> Result[Meeting]:
        """Overwrite a meeting's status.

        Terminal statuses are only protected when strict transitions are on.
        """
        status = MeetingStatus(status)
        meeting = self.meeting_repo.get_by_id(meeting_id)
        if meeting is None:
            return Result.rejected(RejectionReason.NOT_FOUND, "Meeting not found")

        if self.settings.strict_status_transitions and not can_transition(
            MEETING_TRANSITIONS, meeting.status, status
        ):
            logger.info(
                "Meeting status change refused",
                meeting_id=meeting_id,
                old_status=meeting.status.value,
                new_status=status.value,
            )
            return Result.rejected(
                RejectionReason.INVALID_TRANSITION,
                f"Meeting cannot move from {meeting.status.value} to {status.value}",
            )

        updated = self.meeting_repo.update(meeting_id, {"status": status})
        if updated is None:
            return Result.rejected(RejectionReason.NOT_FOUND, "Meeting not found")

        logger.info(
            "Meeting status changed",
            meeting_id=meeting_id,
            old_status=meeting.status.value,
            new_status=status.value,
        )
        return Result.success(updated)

    def update_meeting(self, meeting_id: str, data: MeetingUpdate) -> Result[Meeting]:
        """Apply the fields set on data to a meeting."""
        changes = data.model_dump(exclude_unset=True)
        updated = self.meeting_repo.update(meeting_id, changes)
        if updated is None:
            return Result.rejected(RejectionReason.NOT_FOUND, "Meeting not found")

        logger.info("Meeting updated", meeting_id=meeting_id, fields=sorted(changes))
        return Result.success(updated)

    def get_meeting(self, meeting_id: str) -> Meeting | None:
        return self.meeting_repo.get_by_id(meeting_id)

    def meetings_for_project(self, project_id: str) -> list[Meeting]:
        return self.meeting_repo.list_by_project(project_id)

    def meetings_for_faculty(self, faculty_id: str) -> list[Meeting]:
        return self.meeting_repo.list_by_faculty(faculty_id)

    def meetings_for_student(self, student_id: str) -> list[Meeting]:
        return self.meeting_repo.list_by_student(student_id)


def split_upcoming(
    meetings: list[Meeting], now: datetime | None = None
) -> tuple[list[Meeting], list[Meeting]]:
    """Partition meetings into (upcoming, past).

    Upcoming means still SCHEDULED and in the future. Completed, cancelled
    and overdue meetings are past. Both lists are ordered by scheduled_at.
    A naive now is taken as UTC.
    """
    now = ensure_utc(now) if now is not None else utc_now()
    upcoming: list[Meeting] = []
    past: list[Meeting] = []
    for meeting in sorted(meetings, key=lambda m: m.scheduled_at):
        if meeting.status == MeetingStatus.SCHEDULED and meeting.scheduled_at > now:
            upcoming.append(meeting)
        else:
            past.append(meeting)
    return upcoming, past
