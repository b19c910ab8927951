"""Admission rules: project publishing, applications and their decisions.

Invariants enforced here span several collections, which the repositories
alone can't express:

- a student below a project's minimum CGPA cannot apply;
- a project never holds more ACCEPTED applications than max_students;
- a project moves to ASSIGNED once its accepted count reaches max_students.
"""

from typing import Any

from src.portal.core.config import Settings, get_settings
from src.portal.core.exceptions import CapacityExceededError
from src.portal.core.logging import get_logger
from src.portal.models import (
    Application,
    ApplicationStatus,
    Project,
    ProjectStatus,
    User,
)
from src.portal.repositories import (
    ApplicationRepository,
    ProjectRepository,
    UserRepository,
)
from src.portal.schemas import ProjectCreate, ProjectUpdate
from src.portal.services.results import RejectionReason, Result
from src.portal.services.transitions import (
    APPLICATION_TRANSITIONS,
    PROJECT_TRANSITIONS,
    can_transition,
)

logger = get_logger(__name__)

DECISIONS = frozenset({ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED})


def _reject(reason: RejectionReason, detail: str, **context: Any) -> Result[Any]:
    logger.info("Admission rule rejected operation", reason=reason.value, detail=detail, **context)
    return Result.rejected(reason, detail)


class AdmissionService:
    """Service for projects, applications and admission decisions."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        application_repo: ApplicationRepository,
        user_repo: UserRepository,
        settings: Settings | None = None,
    ):
        self.project_repo = project_repo
        self.application_repo = application_repo
        self.user_repo = user_repo
        self.settings = settings or get_settings()

    # --- Projects ---

    def create_project(self, faculty_id: str, data: ProjectCreate) -> Result[Project]:
        """Publish a project owned by a faculty member.

        The owner's name is snapshotted into faculty_name and the project
        starts OPEN.
        """
        faculty = self.user_repo.get_by_id(faculty_id)
        if faculty is None:
            return _reject(
                RejectionReason.NOT_FOUND, "Faculty user not found", faculty_id=faculty_id
            )
        if not faculty.is_faculty:
            return _reject(
                RejectionReason.ROLE_MISMATCH,
                "Only faculty can publish projects",
                user_id=faculty_id,
            )

        project = self.project_repo.create(
            {
                **data.model_dump(),
                "faculty_id": faculty.id,
                "faculty_name": faculty.name,
                "status": ProjectStatus.OPEN,
            }
        )
        logger.info(
            "Project created",
            project_id=project.id,
            faculty_id=faculty.id,
            max_students=project.max_students,
        )
        return Result.success(project)

    def update_project(self, project_id: str, data: ProjectUpdate) -> Result[Project]:
        """Apply the fields set on data to a project.

        max_students can't drop below the number of accepted applications.
        Lowering it to exactly that number assigns the project, as an
        acceptance filling the last seat would.
        """
        changes = data.model_dump(exclude_unset=True)
        if "max_students" in changes:
            accepted = self.application_repo.count_accepted(project_id)
            if changes["max_students"] < accepted:
                return _reject(
                    RejectionReason.CAPACITY_EXCEEDED,
                    f"Project already has {accepted} accepted students",
                    project_id=project_id,
                    max_students=changes["max_students"],
                )

        project = self.project_repo.update(project_id, changes)
        if project is None:
            return _reject(RejectionReason.NOT_FOUND, "Project not found", project_id=project_id)

        logger.info("Project updated", project_id=project_id, fields=sorted(changes))
        if "max_students" in changes:
            project = self._assign_if_full(project)
        return Result.success(project)

    def set_project_status(self, project_id: str, status: ProjectStatus) -> Result[Project]:
        """Overwrite a project's status.

        Any status may follow any other unless strict transitions are
        enabled; in particular a CLOSED project can be reopened.
        """
        status = ProjectStatus(status)
        project = self.project_repo.get_by_id(project_id)
        if project is None:
            return _reject(RejectionReason.NOT_FOUND, "Project not found", project_id=project_id)

        if self.settings.strict_status_transitions and not can_transition(
            PROJECT_TRANSITIONS, project.status, status
        ):
            return _reject(
                RejectionReason.INVALID_TRANSITION,
                f"Project cannot move from {project.status.value} to {status.value}",
                project_id=project_id,
            )

        updated = self.project_repo.update(project_id, {"status": status})
        if updated is None:
            return _reject(RejectionReason.NOT_FOUND, "Project not found", project_id=project_id)

        logger.info(
            "Project status changed",
            project_id=project_id,
            old_status=project.status.value,
            new_status=status.value,
        )
        return Result.success(updated)

    def get_project(self, project_id: str) -> Project | None:
        return self.project_repo.get_by_id(project_id)

    def list_open_projects(self) -> list[Project]:
        return self.project_repo.list_by_status(ProjectStatus.OPEN)

    def projects_for_faculty(self, faculty_id: str) -> list[Project]:
        return self.project_repo.list_by_faculty(faculty_id)

    def search_projects(
        self, term: str | None = None, status: ProjectStatus | None = None
    ) -> list[Project]:
        return self.project_repo.search(term, status)

    # --- Applications ---

    def submit_application(
        self, project_id: str, student: User, note: str = ""
    ) -> Result[Application]:
        """Apply to a project on behalf of a student.

        Checks, in order: project and student exist, no earlier application
        by this student (when duplicate prevention is on), the CGPA gate,
        and remaining capacity. On success the application is PENDING with
        the student's name and CGPA snapshotted.
        """
        project = self.project_repo.get_by_id(project_id)
        if project is None:
            return _reject(RejectionReason.NOT_FOUND, "Project not found", project_id=project_id)

        stored_student = self.user_repo.get_by_id(student.id)
        if stored_student is None:
            return _reject(RejectionReason.NOT_FOUND, "Student not found", student_id=student.id)

        if self.settings.prevent_duplicate_applications and self.has_applied(
            project.id, stored_student.id
        ):
            return _reject(
                RejectionReason.DUPLICATE_APPLICATION,
                "Student has already applied to this project",
                project_id=project.id,
                student_id=stored_student.id,
            )

        cgpa = self._cgpa_snapshot(stored_student)
        if not self._meets_min_cgpa(project, cgpa):
            return _reject(
                RejectionReason.INELIGIBLE_CGPA,
                f"Minimum CGPA is {project.min_cgpa}",
                project_id=project.id,
                student_id=stored_student.id,
                cgpa=cgpa,
            )

        accepted = self.application_repo.count_accepted(project.id)
        if accepted >= project.max_students:
            return _reject(
                RejectionReason.CAPACITY_EXCEEDED,
                f"Project already has {accepted} of {project.max_students} students",
                project_id=project.id,
            )

        application = self.application_repo.create(
            {
                "project_id": project.id,
                "student_id": stored_student.id,
                "student_name": stored_student.name,
                "status": ApplicationStatus.PENDING,
                "note": note,
                "cgpa": cgpa,
            }
        )
        logger.info(
            "Application submitted",
            application_id=application.id,
            project_id=project.id,
            student_id=stored_student.id,
        )
        return Result.success(application)

    def decide_application(
        self, application_id: str, decision: ApplicationStatus
    ) -> Result[Application]:
        """Accept or reject an application.

        Accepting is refused when the project is already full. After an
        acceptance the project is moved to ASSIGNED if it has filled up.
        Nothing is ever un-assigned automatically.

        Raises:
            ValueError: if decision is not ACCEPTED or REJECTED.
        """
        decision = ApplicationStatus(decision)
        if decision not in DECISIONS:
            raise ValueError(f"Decision must be accepted or rejected, got {decision.value}")

        application = self.application_repo.get_by_id(application_id)
        if application is None:
            return _reject(
                RejectionReason.NOT_FOUND, "Application not found", application_id=application_id
            )

        if self.settings.strict_status_transitions and not can_transition(
            APPLICATION_TRANSITIONS, application.status, decision
        ):
            return _reject(
                RejectionReason.INVALID_TRANSITION,
                f"Application is already {application.status.value}",
                application_id=application_id,
            )

        project = self.project_repo.get_by_id(application.project_id)
        if application.status == decision:
            updated = application
        else:
            try:
                if decision == ApplicationStatus.ACCEPTED and project is not None:
                    updated = self.application_repo.accept(application_id, project.max_students)
                else:
                    updated = self.application_repo.update(application_id, {"status": decision})
            except CapacityExceededError as e:
                return _reject(
                    RejectionReason.CAPACITY_EXCEEDED,
                    str(e),
                    application_id=application_id,
                    project_id=e.project_id,
                )
            if updated is None:
                return _reject(
                    RejectionReason.NOT_FOUND,
                    "Application not found",
                    application_id=application_id,
                )
            logger.info(
                "Application decided",
                application_id=application_id,
                project_id=application.project_id,
                decision=decision.value,
            )

        if decision == ApplicationStatus.ACCEPTED and project is not None:
            self._assign_if_full(project)

        return Result.success(updated)

    def get_application(self, application_id: str) -> Application | None:
        return self.application_repo.get_by_id(application_id)

    def applications_for_project(self, project_id: str) -> list[Application]:
        return self.application_repo.list_by_project(project_id)

    def applications_for_student(self, student_id: str) -> list[Application]:
        return self.application_repo.list_by_student(student_id)

    def has_applied(self, project_id: str, student_id: str) -> bool:
        return self.application_repo.get_for_student(project_id, student_id) is not None

    # --- Internals ---

    def _cgpa_snapshot(self, student: User) -> float | None:
        if student.cgpa is None and self.settings.missing_cgpa_policy == "treat_as_zero":
            return 0.0
        return student.cgpa

    def _meets_min_cgpa(self, project: Project, cgpa: float | None) -> bool:
        if project.min_cgpa is None:
            return True
        if cgpa is None:
            return self.settings.missing_cgpa_policy == "allow"
        return cgpa >= project.min_cgpa

    def _assign_if_full(self, project: Project) -> Project:
        accepted = self.application_repo.count_accepted(project.id)
        if accepted < project.max_students or project.status == ProjectStatus.ASSIGNED:
            return project
        if self.settings.strict_status_transitions and not can_transition(
            PROJECT_TRANSITIONS, project.status, ProjectStatus.ASSIGNED
        ):
            return project

        assigned = self.project_repo.update(project.id, {"status": ProjectStatus.ASSIGNED})
        logger.info("Project filled and assigned", project_id=project.id, accepted=accepted)
        return assigned or project
